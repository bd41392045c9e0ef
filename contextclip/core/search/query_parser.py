"""Natural-language filters for clipboard search queries

Queries such as "from safari", "2 hours ago" or "code" are mapped to a
structured filter. Each dimension is an ordered list of independent rules
and the first rule that matches wins.
"""

import re
from dataclasses import dataclass
from typing import Optional, List, Tuple

from ..clipboard.models import ContentType


SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class QueryFilter:
    """Structured constraints parsed from a query"""
    max_age: Optional[float] = None
    app: Optional[str] = None
    content_type: Optional[ContentType] = None

    @property
    def is_empty(self) -> bool:
        """True when no dimension was recognized"""
        return self.max_age is None and self.app is None and self.content_type is None


# (pattern, seconds per unit); fixed phrases have no number group
TIME_RULES: List[Tuple[re.Pattern, float]] = [
    (re.compile(r'(\d+)\s*hours?\s*ago', re.IGNORECASE), SECONDS_PER_HOUR),
    (re.compile(r'(\d+)\s*minutes?\s*ago', re.IGNORECASE), SECONDS_PER_MINUTE),
    (re.compile(r'(\d+)\s*days?\s*ago', re.IGNORECASE), SECONDS_PER_DAY),
    (re.compile(r'yesterday', re.IGNORECASE), SECONDS_PER_DAY),
    (re.compile(r'today', re.IGNORECASE), 0.0),
]

APP_RULES: List[re.Pattern] = [
    re.compile(r'from\s+(\w+)', re.IGNORECASE),
    re.compile(r'in\s+(safari|chrome|xcode|vscode)', re.IGNORECASE),
]

TYPE_RULES: List[Tuple[Tuple[str, ...], ContentType]] = [
    (('link', 'url'), ContentType.URL),
    (('code',), ContentType.CODE),
    (('email',), ContentType.EMAIL),
]


def parse_time_filter(query: str) -> Optional[float]:
    """
    Parse a maximum item age from the query

    Args:
        query: Free-text query

    Returns:
        Maximum age in seconds, or None
    """
    for pattern, unit in TIME_RULES:
        match = pattern.search(query)
        if not match:
            continue
        if pattern.groups:
            return int(match.group(1)) * unit
        return unit
    return None


def parse_app_filter(query: str) -> Optional[str]:
    """Lower-cased application name fragment, or None"""
    for pattern in APP_RULES:
        match = pattern.search(query)
        if match:
            return match.group(1).lower()
    return None


def parse_type_filter(query: str) -> Optional[ContentType]:
    """Content type named by a lower-case keyword in the query, or None"""
    for keywords, content_type in TYPE_RULES:
        if any(keyword in query for keyword in keywords):
            return content_type
    return None


def parse_query(query: str) -> QueryFilter:
    """Parse all filter dimensions of a query"""
    return QueryFilter(
        max_age=parse_time_filter(query),
        app=parse_app_filter(query),
        content_type=parse_type_filter(query)
    )
