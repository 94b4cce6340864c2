"""Drafting session modules."""

from rfx_studio.workspace.clipboard import BaseClipboard, ClipboardError, MemoryClipboard
from rfx_studio.workspace.session import RFxWorkspace

__all__ = ["BaseClipboard", "ClipboardError", "MemoryClipboard", "RFxWorkspace"]
