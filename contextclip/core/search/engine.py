"""Search over the clipboard history"""

from datetime import datetime
from typing import Callable, List, Optional

from loguru import logger

from .query_parser import QueryFilter, parse_query
from ..clipboard.history import ClipboardHistory
from ..clipboard.models import ClipItem


class SearchEngine:
    """Applies parsed filters, or a plain substring match, to the history"""

    def __init__(self, history: ClipboardHistory, clock: Callable[[], datetime] = datetime.now):
        self.history = history
        self.clock = clock

    def search(self, query: str, query_filter: Optional[QueryFilter] = None) -> List[ClipItem]:
        """
        Search history, newest first

        When the query names a time, app or type filter, items must satisfy
        all of them and the query text itself is not matched. Otherwise the
        query is matched case-insensitively against each item's search text.

        Args:
            query: Free-text query
            query_filter: Pre-parsed filter (parsed from ``query`` if omitted)

        Returns:
            Matching items
        """
        if query_filter is None:
            query_filter = parse_query(query)

        items = self.history.snapshot()

        if query_filter.is_empty:
            needle = query.lower()
            results = [item for item in items if needle in item.search_text.lower()]
        else:
            now = self.clock()
            results = [item for item in items if self.matches(item, query_filter, now)]

        logger.debug(f"Search '{query}' matched {len(results)} of {len(items)} items")
        return results

    @staticmethod
    def matches(item: ClipItem, query_filter: QueryFilter, now: datetime) -> bool:
        """Check an item against every recognized filter dimension"""
        if query_filter.max_age is not None:
            age = (now - item.timestamp).total_seconds()
            if age > query_filter.max_age:
                return False

        if query_filter.app is not None:
            if query_filter.app not in item.context.app_name.lower():
                return False

        if query_filter.content_type is not None:
            if item.content_type != query_filter.content_type:
                return False

        return True
