"""Clipboard capture and history"""

from .models import ClipItem, ClipContext, ContentType
from .classifier import detect_content_type
from .history import ClipboardHistory
from .monitor import ClipboardMonitor
from .system import SystemClipboard

__all__ = [
    'ClipItem', 'ClipContext', 'ContentType', 'detect_content_type',
    'ClipboardHistory', 'ClipboardMonitor', 'SystemClipboard'
]
