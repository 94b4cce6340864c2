"""Document loader modules."""

from rfx_studio.loaders.base import BaseDocumentLoader, strip_extension
from rfx_studio.loaders.text_loader import TextFileLoader

__all__ = ["BaseDocumentLoader", "TextFileLoader", "strip_extension"]
