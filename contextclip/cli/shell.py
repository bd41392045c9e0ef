"""Interactive command shell for browsing clipboard history"""

from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from ..core.clipboard import ClipItem
from ..core.exceptions import ItemNotFoundError, ClipboardWriteError
from ..services import ContextClipService


BANNER = """ContextClip started. Monitoring clipboard...

Commands:
  list [n]          - Show last n items (default {count})
  search <query>    - Search clipboard history
  copy <id>         - Copy item to clipboard
  quit              - Exit
"""

ID_DISPLAY_LENGTH = 8
SUMMARY_PREVIEW_LENGTH = 50


def format_time_ago(timestamp: datetime, now: datetime) -> str:
    """
    Describe how long ago a timestamp was

    Args:
        timestamp: Past instant
        now: Current instant

    Returns:
        "just now", "Nm ago", "Nh ago" or "Nd ago"
    """
    interval = (now - timestamp).total_seconds()

    if interval < 60:
        return "just now"
    elif interval < 3600:
        return f"{int(interval / 60)}m ago"
    elif interval < 86400:
        return f"{int(interval / 3600)}h ago"
    return f"{int(interval / 86400)}d ago"


class ClipShell:
    """Line-oriented command loop over a ContextClipService"""

    def __init__(
        self,
        service: ContextClipService,
        output: Optional[Callable[[str], None]] = None,
        read_line: Optional[Callable[[str], str]] = None,
        default_count: int = 10,
        content_preview_length: int = 100,
    ):
        self.service = service
        self.output = output or print
        self.read_line = read_line or input
        self.default_count = default_count
        self.content_preview_length = content_preview_length

        self._commands = {
            'list': self.list_items,
            'ls': self.list_items,
            'search': self.search_items,
            's': self.search_items,
            'find': self.search_items,
            'copy': self.copy_item,
            'cp': self.copy_item,
        }

    def run(self) -> None:
        """Read and execute commands until quit or end of input"""
        self.output(BANNER.format(count=self.default_count))

        while True:
            try:
                line = self.read_line("> ")
            except EOFError:
                break

            if not self.handle(line):
                break

        self.output("Goodbye!")

    def handle(self, line: str) -> bool:
        """
        Execute one command line

        Args:
            line: Raw input line

        Returns:
            False when the session should end
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return True

        command = parts[0].lower()
        argument = parts[1] if len(parts) > 1 else ""

        if command in ('quit', 'exit', 'q'):
            return False

        handler = self._commands.get(command)
        if handler is None:
            self.output("Unknown command. Try: list, search, copy, quit")
            return True

        handler(argument)
        return True

    def list_items(self, argument: str = "") -> None:
        """Print the most recent items"""
        count = self.default_count
        if argument.strip():
            try:
                count = int(argument)
            except ValueError:
                logger.debug(f"Invalid list count '{argument}', using {count}")

        now = self.service.clock()
        for item in self.service.list_recent(count):
            self.output(f"\n[{self._short_id(item)}] {format_time_ago(item.timestamp, now)}")
            self.output(f"  From: {item.context.app_name}")
            if item.context.url:
                self.output(f"  URL: {item.context.url}")
            self.output(f"  Content: {self._content_preview(item)}")

    def search_items(self, query: str = "") -> None:
        """Print items matching a query"""
        results = self.service.search(query)

        if not results:
            self.output(f"No results found for '{query}'")
            return

        now = self.service.clock()
        self.output(f"Found {len(results)} items:")
        for item in results:
            self.output(
                f"  [{self._short_id(item)}] {format_time_ago(item.timestamp, now)} - "
                f"{item.context.app_name}: {item.preview(SUMMARY_PREVIEW_LENGTH)}..."
            )

    def copy_item(self, prefix: str = "") -> None:
        """Copy the item with the given id prefix back to the clipboard"""
        prefix = prefix.strip()
        if not prefix:
            self.output("Usage: copy <id>")
            return

        try:
            self.service.copy_item(prefix)
        except ItemNotFoundError:
            self.output("Item not found")
        except ClipboardWriteError as e:
            self.output(f"Failed to copy: {e}")
        else:
            self.output("Copied to clipboard")

    def _content_preview(self, item: ClipItem) -> str:
        preview = item.preview(self.content_preview_length)
        if len(item.content) > self.content_preview_length:
            preview += "..."
        return preview

    @staticmethod
    def _short_id(item: ClipItem) -> str:
        return item.id[:ID_DISPLAY_LENGTH]
