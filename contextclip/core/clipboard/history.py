"""Bounded, recency-ordered clipboard history"""

import threading
from typing import List, Optional, Iterator

from loguru import logger

from .models import ClipItem


DEFAULT_MAX_SIZE = 100


class ClipboardHistory:
    """In-memory clipboard history, newest first"""

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE):
        """
        Initialize clipboard history

        Args:
            max_size: Maximum number of items to keep
        """
        if max_size < 1:
            raise ValueError("max_size must be at least 1")

        self.max_size = max_size
        self._items: List[ClipItem] = []
        self._lock = threading.RLock()

        logger.debug(f"ClipboardHistory initialized (max_size={max_size})")

    def insert(self, item: ClipItem) -> Optional[ClipItem]:
        """
        Add item at the front of the history

        Args:
            item: Newly captured item

        Returns:
            The oldest item if it was evicted to stay within max_size
        """
        with self._lock:
            # Build the new list before publishing it so readers never
            # see a half-updated history
            items = [item] + self._items
            removed = None
            if len(items) > self.max_size:
                removed = items.pop()
            self._items = items

        if removed is not None:
            logger.debug(f"Evicted oldest item: {removed.id[:8]}")

        return removed

    def list_recent(self, count: int) -> List[ClipItem]:
        """
        Get the most recent items

        Args:
            count: Number of items wanted

        Returns:
            Up to ``count`` items, newest first
        """
        if count <= 0:
            return []
        with self._lock:
            return self._items[:count]

    def snapshot(self) -> List[ClipItem]:
        """Copy of the whole history as of the last insert"""
        with self._lock:
            return list(self._items)

    def find_by_id_prefix(self, prefix: str, limit: int = DEFAULT_MAX_SIZE) -> Optional[ClipItem]:
        """
        Find the newest item whose id starts with ``prefix``

        Args:
            prefix: Case-sensitive id prefix
            limit: Only look at this many recent items

        Returns:
            Matching item or None
        """
        if not prefix:
            return None
        for item in self.list_recent(limit):
            if item.id.startswith(prefix):
                return item
        return None

    def clear(self) -> None:
        """Clear all history"""
        with self._lock:
            self._items = []
        logger.info("Clipboard history cleared")

    def __iter__(self) -> Iterator[ClipItem]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return self.size

    @property
    def size(self) -> int:
        """Get current number of items"""
        with self._lock:
            return len(self._items)
