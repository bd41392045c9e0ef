"""Clipboard history service shared by the interactive surfaces"""

from datetime import datetime
from typing import Callable, List, Optional

from loguru import logger

from ..core.clipboard import ClipboardHistory, ClipboardMonitor, ClipItem, SystemClipboard
from ..core.context import ContextProvider, get_context_provider
from ..core.exceptions import ItemNotFoundError, ClipboardWriteError
from ..core.search import SearchEngine
from ..utils import ConfigManager


COPY_SEARCH_LIMIT = 100


class ContextClipService:
    """Owns the history, its monitor and search for one session"""

    def __init__(
        self,
        history: ClipboardHistory,
        monitor: ClipboardMonitor,
        clipboard: SystemClipboard,
        clock: Callable[[], datetime] = datetime.now,
        preview_length: int = 50,
    ):
        self.history = history
        self.monitor = monitor
        self.clipboard = clipboard
        self.clock = clock
        self.preview_length = preview_length
        self.search_engine = SearchEngine(history, clock)

    @classmethod
    def create(
        cls,
        config: ConfigManager,
        context_provider: Optional[ContextProvider] = None,
        clipboard: Optional[SystemClipboard] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> 'ContextClipService':
        """
        Build a service from configuration

        Args:
            config: Loaded configuration
            context_provider: Provider to use instead of the platform default
            clipboard: Clipboard to use instead of the system clipboard
            clock: Time source for captures and searches

        Returns:
            Service ready to start
        """
        if context_provider is None:
            context_provider = get_context_provider(
                enabled=config.get('context.enabled', True),
                timeout=config.get('context.script_timeout', 2.0)
            )
        clipboard = clipboard or SystemClipboard()
        preview_length = config.get('clipboard.preview_length', 50)

        history = ClipboardHistory()
        monitor = ClipboardMonitor(
            history,
            context_provider,
            clipboard=clipboard,
            check_interval=config.get('clipboard.check_interval', 1000),
            clock=clock,
            preview_length=preview_length
        )
        return cls(history, monitor, clipboard, clock=clock, preview_length=preview_length)

    def start(self) -> None:
        """Start capturing clipboard changes"""
        self.monitor.start()

    def stop(self) -> None:
        """Stop capturing clipboard changes"""
        if self.monitor.is_running:
            self.monitor.stop()

    def list_recent(self, count: int = 10) -> List[ClipItem]:
        """Most recent items, newest first"""
        return self.history.list_recent(count)

    def search(self, query: str) -> List[ClipItem]:
        """Search history with natural-language filters or plain text"""
        return self.search_engine.search(query)

    def find_item(self, prefix: str) -> Optional[ClipItem]:
        """Newest recent item whose id starts with ``prefix``"""
        return self.history.find_by_id_prefix(prefix, limit=COPY_SEARCH_LIMIT)

    def copy_item(self, prefix: str) -> ClipItem:
        """
        Put a history item back on the clipboard

        Args:
            prefix: Case-sensitive id prefix

        Returns:
            The copied item

        Raises:
            ItemNotFoundError: If no recent item matches
            ClipboardWriteError: If the clipboard could not be written
        """
        item = self.find_item(prefix)
        if item is None:
            raise ItemNotFoundError(prefix)

        if not self.clipboard.write(item.content):
            raise ClipboardWriteError("Clipboard write failed")

        logger.info(f"Copied: {item.preview(self.preview_length)}...")
        return item
