"""Clipboard collaborators."""

from abc import ABC, abstractmethod


class ClipboardError(Exception):
    """Raised when the clipboard cannot be read or written."""


class BaseClipboard(ABC):
    """Source and sink for copy/paste text."""

    @abstractmethod
    def read_text(self) -> str:
        """Return the clipboard text.

        Raises:
            ClipboardError: Access was denied or failed.
        """

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Replace the clipboard text."""


class MemoryClipboard(BaseClipboard):
    """Process-local clipboard buffer."""

    def __init__(self, text: str = ""):
        self._text = text

    def read_text(self) -> str:
        return self._text

    def write_text(self, text: str) -> None:
        self._text = text
