"""System clipboard access through pyperclip"""

from typing import Optional

import pyperclip
from loguru import logger


class SystemClipboard:
    """Reads and writes the system clipboard as text"""

    def read(self) -> Optional[str]:
        """Get current clipboard text, None when it cannot be read"""
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as e:
            logger.debug(f"Failed to read clipboard: {e}")
            return None

    def write(self, text: str) -> bool:
        """
        Replace the clipboard content

        Args:
            text: Text to place on the clipboard

        Returns:
            True if the clipboard was written
        """
        try:
            pyperclip.copy(text)
            return True
        except pyperclip.PyperclipException as e:
            logger.error(f"Failed to write clipboard: {e}")
            return False
