"""Interactive command-line surface"""

from .shell import ClipShell, format_time_ago

__all__ = ['ClipShell', 'format_time_ago']
