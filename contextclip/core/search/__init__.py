"""Clipboard history search"""

from .query_parser import QueryFilter, parse_query
from .engine import SearchEngine

__all__ = ['QueryFilter', 'parse_query', 'SearchEngine']
