"""Application services"""

from .clip_service import ContextClipService

__all__ = ['ContextClipService']
