"""Clipboard provenance providers"""

from .provider import ContextProvider, UnknownContextProvider, StaticContextProvider
from .macos import MacOSContextProvider
from .factory import get_context_provider

__all__ = [
    'ContextProvider', 'UnknownContextProvider', 'StaticContextProvider',
    'MacOSContextProvider', 'get_context_provider'
]
