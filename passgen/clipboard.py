"""
System clipboard integration for passgen.

Backed by pyperclip, which picks the platform mechanism:
- macOS: pbcopy
- Windows: win32 clipboard API
- Linux: xclip, xsel or wl-clipboard
"""

import logging
from typing import Protocol

import pyperclip

from .exceptions import ClipboardWriteError


logger = logging.getLogger(__name__)


class ClipboardSink(Protocol):
    """Destination for copied passwords."""

    def write_text(self, text: str) -> None:
        ...


class PyperclipClipboard:
    """Clipboard sink that writes through pyperclip."""

    def write_text(self, text: str) -> None:
        """
        Copy text to the system clipboard.

        Args:
            text: Text to copy

        Raises:
            ClipboardWriteError: If no clipboard mechanism is usable
        """
        try:
            pyperclip.copy(text)
        except (pyperclip.PyperclipException, OSError) as e:
            logger.warning(f"Clipboard write failed: {e}")
            raise ClipboardWriteError(f"Could not copy to clipboard: {e}") from e

        logger.debug(f"Copied {len(text)} characters to clipboard")


def get_clipboard() -> PyperclipClipboard:
    """
    Get the default clipboard sink.

    Returns:
        PyperclipClipboard instance
    """
    return PyperclipClipboard()
