"""Frequency-ranked keyword extraction."""

import re
from collections import Counter

MAX_KEYWORDS = 20

STOPWORDS = frozenset(
    {
        "the", "and", "for", "with", "that", "this", "from", "are", "into",
        "your", "will", "shall", "must", "should", "our", "their", "a", "an",
        "of", "to", "in", "on", "by", "or", "be", "as", "is", "it",
    }
)

# A letter followed by letters or hyphens; tokens are at least two characters.
_TOKEN = re.compile(r"[a-z][a-z\-]+")


def tokenize_words(text: str) -> list[str]:
    """Lowercased word tokens in order of appearance."""
    return _TOKEN.findall((text or "").lower())


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """Rank non-stopword tokens by descending frequency.

    Ties keep first-occurrence order: ``Counter`` preserves insertion order and
    ``sorted`` is stable.

    Args:
        text: Normalized document text.
        limit: Maximum number of keywords returned.

    Returns:
        At most ``limit`` distinct keywords, most frequent first.
    """
    counts = Counter(token for token in tokenize_words(text) if token not in STOPWORDS)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [token for token, _ in ranked[:limit]]
