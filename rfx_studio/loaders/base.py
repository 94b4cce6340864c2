"""Base document loader abstract class."""

import re
from abc import ABC, abstractmethod
from pathlib import Path

from rfx_studio.utils.logging import LoggerMixin

_EXTENSION = re.compile(r"\.[^/.]+$")


def strip_extension(filename: str) -> str:
    """Drop the last extension: ``"rfp.final.txt"`` becomes ``"rfp.final"``."""
    return _EXTENSION.sub("", filename)


class BaseDocumentLoader(ABC, LoggerMixin):
    """Abstract base class for document loaders."""

    def __init__(self, file_path: Path):
        """Initialize the loader with a file path.

        Args:
            file_path: Path to the document file.
        """
        self.file_path = Path(file_path)
        self._validate_file()

    def _validate_file(self) -> None:
        """Validate that the file exists and is readable."""
        if not self.file_path.exists():
            raise FileNotFoundError(f"File not found: {self.file_path}")
        if not self.file_path.is_file():
            raise ValueError(f"Path is not a file: {self.file_path}")

    @abstractmethod
    def load(self) -> str:
        """Read the document.

        Returns:
            The document's full text.
        """

    def get_document_name(self) -> str:
        """Display name derived from the file name."""
        return strip_extension(self.file_path.name)
