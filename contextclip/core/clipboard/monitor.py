"""Clipboard monitoring service that captures changes into the history"""

import hashlib
import threading
from datetime import datetime
from typing import Optional, Callable, Set, TYPE_CHECKING

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from loguru import logger

from .classifier import detect_content_type
from .history import ClipboardHistory
from .models import ClipItem, ClipContext
from .system import SystemClipboard

if TYPE_CHECKING:
    from ..context.provider import ContextProvider


class ClipboardMonitor:
    """Polls the clipboard and records each new value with its context"""

    JOB_ID = 'clipboard_check'

    def __init__(
        self,
        history: ClipboardHistory,
        context_provider: 'ContextProvider',
        clipboard: Optional[SystemClipboard] = None,
        check_interval: int = 1000,
        clock: Callable[[], datetime] = datetime.now,
        preview_length: int = 50,
    ):
        """
        Initialize clipboard monitor

        Args:
            history: History receiving captured items
            context_provider: Source of provenance for each capture
            clipboard: Clipboard reader (defaults to the system clipboard)
            check_interval: Check interval in milliseconds
            clock: Returns the capture timestamp
            preview_length: Characters of content shown in the capture log
        """
        self.history = history
        self.context_provider = context_provider
        self.clipboard = clipboard or SystemClipboard()
        self.check_interval = check_interval / 1000.0  # Convert to seconds
        self.clock = clock
        self.preview_length = preview_length

        self._scheduler: Optional[BackgroundScheduler] = None
        self._running = False
        self._last_hash: str = ""
        self._callbacks: Set[Callable[[ClipItem], None]] = set()
        self._lock = threading.RLock()
        self._tick_lock = threading.Lock()

        logger.info(f"ClipboardMonitor initialized with {check_interval}ms interval")

    def add_callback(self, callback: Callable[[ClipItem], None]) -> None:
        """
        Add a callback for captured items

        Args:
            callback: Function called with each new ClipItem
        """
        with self._lock:
            self._callbacks.add(callback)
            logger.debug(f"Added callback: {callback.__name__}")

    def remove_callback(self, callback: Callable[[ClipItem], None]) -> None:
        """Remove a callback"""
        with self._lock:
            self._callbacks.discard(callback)
            logger.debug(f"Removed callback: {callback.__name__}")

    def start(self) -> None:
        """Start monitoring the clipboard"""
        with self._lock:
            if self._running:
                logger.warning("Monitor already running")
                return

            self._scheduler = BackgroundScheduler()
            # One instance at a time; a tick that fires while the previous
            # one is still running is skipped
            self._scheduler.add_job(
                func=self.check_clipboard,
                trigger=IntervalTrigger(seconds=self.check_interval),
                id=self.JOB_ID,
                max_instances=1,
                coalesce=True,
                replace_existing=True
            )
            self._scheduler.start()
            self._running = True
            logger.info("Clipboard monitoring started")

    def stop(self) -> None:
        """Stop monitoring the clipboard"""
        with self._lock:
            if not self._running:
                logger.warning("Monitor not running")
                return

            self._running = False
            scheduler, self._scheduler = self._scheduler, None

        if scheduler:
            scheduler.shutdown(wait=True)

        logger.info("Clipboard monitoring stopped")

    def check_clipboard(self) -> Optional[ClipItem]:
        """
        Run one capture tick

        Returns:
            The captured item, or None when nothing was captured
        """
        if not self._tick_lock.acquire(blocking=False):
            logger.debug("Previous clipboard check still running, skipping")
            return None

        try:
            return self._capture()
        finally:
            self._tick_lock.release()

    def _capture(self) -> Optional[ClipItem]:
        try:
            content = self.clipboard.read()
        except Exception as e:
            logger.debug(f"Clipboard read failed: {e}")
            return None

        if not content or not self._has_changed(content):
            return None

        try:
            context = self.context_provider.capture_context()
        except Exception as e:
            logger.warning(f"Context capture failed, recording without context: {e}")
            context = ClipContext.unknown()

        item = ClipItem(
            content=content,
            content_type=detect_content_type(content),
            timestamp=self.clock(),
            context=context
        )
        self.history.insert(item)

        logger.info(f"Captured from {context.app_name}: {item.preview(self.preview_length)}...")
        self._notify_callbacks(item)
        return item

    def _has_changed(self, content: str) -> bool:
        """
        Check if clipboard content differs from the last seen value

        Args:
            content: Current clipboard content

        Returns:
            True if content has changed
        """
        content_hash = hashlib.sha256(content.encode()).hexdigest()

        if content_hash != self._last_hash:
            self._last_hash = content_hash
            return True

        return False

    def _notify_callbacks(self, item: ClipItem) -> None:
        with self._lock:
            callbacks = self._callbacks.copy()

        for callback in callbacks:
            try:
                callback(item)
            except Exception as e:
                logger.error(f"Error in callback {callback.__name__}: {e}")

    @property
    def is_running(self) -> bool:
        """Check if monitor is running"""
        return self._running
