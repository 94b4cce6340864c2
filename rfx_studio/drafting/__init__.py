"""Draft composition and snippet modules."""

from rfx_studio.drafting.composer import DraftComposer, compose_draft
from rfx_studio.drafting.snippets import SnippetKind, generate_snippet

__all__ = ["DraftComposer", "compose_draft", "SnippetKind", "generate_snippet"]
