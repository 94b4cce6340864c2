"""Text normalization and paragraph-based section splitting."""

import re

from pydantic import BaseModel, Field

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


class TokenizedText(BaseModel):
    """Normalized text with its lines, word count and section map."""

    text: str = Field(default="", description="Text with carriage returns removed")
    lines: list[str] = Field(default_factory=list)
    word_count: int = Field(default=0, ge=0)
    sections: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}


def normalize(text: str | None) -> str:
    """Strip carriage returns; ``None`` becomes an empty string."""
    return (text or "").replace("\r", "")


def split_lines(text: str) -> list[str]:
    """Non-blank lines, trimmed, in order."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def count_words(text: str) -> int:
    return len(text.split())


def split_sections(text: str) -> dict[str, str]:
    """Chunk text on blank lines and label the chunks ``Section <n>``.

    One or more blank lines (lines holding only whitespace count as blank)
    delimit a chunk. Chunks are trimmed and empty ones are dropped, so numbering
    stays contiguous. No attempt is made to recognise headings.
    """
    chunks = [chunk.strip() for chunk in _PARAGRAPH_BREAK.split(text)]
    return {
        f"Section {index}": chunk
        for index, chunk in enumerate((c for c in chunks if c), start=1)
    }


def tokenize(text: str | None) -> TokenizedText:
    """Normalize raw text and derive lines, word count and sections."""
    cleaned = normalize(text)
    return TokenizedText(
        text=cleaned,
        lines=split_lines(cleaned),
        word_count=count_words(cleaned),
        sections=split_sections(cleaned),
    )
