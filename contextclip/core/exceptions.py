"""Exceptions raised by ContextClip components"""


class ContextClipError(Exception):
    """Base exception for all ContextClip errors"""


class ContextQueryError(ContextClipError):
    """External context query failed, timed out or was denied"""


class ItemNotFoundError(ContextClipError):
    """No recent clipboard item matches the requested id prefix"""

    def __init__(self, prefix: str):
        super().__init__(f"No clipboard item with id starting with '{prefix}'")
        self.prefix = prefix


class ClipboardWriteError(ContextClipError):
    """The system clipboard could not be written"""
