"""Regex heuristics that pull structured facts out of RFx text.

Every extractor is a pure function over the normalized (carriage-return free)
document text. Each one is an anchor phrase, a capture window and a split rule,
and each degrades to ``None`` or an empty list when its anchor is absent.

The window sizes and item caps below are part of the observable output, so
truncation is a literal character count.
"""

import re

EVALUATION_WINDOW = 1200
EVALUATION_MAX_ITEMS = 8
EVALUATION_MIN_LENGTH = 3

REQUIREMENT_WINDOW = 120
REQUIREMENT_MAX_ITEMS = 12

GOALS_WINDOW = 800
GOALS_MAX_ITEMS = 6
FALLBACK_GOALS_MAX_ITEMS = 4

_DUE_DATE = re.compile(r"due\s*date[:\-\s]*([A-Za-z0-9_\s,/\-]+)", re.IGNORECASE)
_BUDGET = re.compile(r"budget[:\-\s]*([$A-Za-z0-9_\s,.]+)", re.IGNORECASE)

_EVALUATION = re.compile(
    r"evaluation\s*criteria[\s:]*([\s\S]{0,%d})" % EVALUATION_WINDOW, re.IGNORECASE
)
_EVALUATION_SPLIT = re.compile(r"\n|\d+\.|-|•")

_SENTENCE_BREAK = re.compile(r"(?<=[.!?;])\s+")
_REQUIREMENT = re.compile(
    r".*?\b(?:must|shall)\b\s*.{0,%d}" % REQUIREMENT_WINDOW, re.IGNORECASE
)

# Priority order: the first anchor present anywhere in the text wins.
GOAL_ANCHORS = ("objectives?", "goals?", "purpose", "outcomes?")
_GOAL_PATTERNS = [
    re.compile(r"%s[\s:]*([\s\S]{0,%d})" % (anchor, GOALS_WINDOW), re.IGNORECASE)
    for anchor in GOAL_ANCHORS
]
_GOAL_SPLIT = re.compile(r"\n|\.|;|-")
_FALLBACK_GOAL_SPLIT = re.compile(r"\.|\n")


def find_due_date(text: str) -> str | None:
    """Date-like run following the first ``due date`` phrase.

    The capture is returned verbatim; whitespace belongs to the captured class,
    so it can continue past a line break.
    """
    match = _DUE_DATE.search(text or "")
    return match.group(1) if match else None


def find_budget(text: str) -> str | None:
    """Currency or number-like run following the first ``budget`` phrase."""
    match = _BUDGET.search(text or "")
    return match.group(1) if match else None


def find_evaluation_criteria(text: str) -> list[str]:
    """Items listed after the first ``evaluation criteria`` phrase."""
    match = _EVALUATION.search(text or "")
    if not match:
        return []
    items = (part.strip() for part in _EVALUATION_SPLIT.split(match.group(1)))
    return [item for item in items if len(item) >= EVALUATION_MIN_LENGTH][
        :EVALUATION_MAX_ITEMS
    ]


def _segments(text: str) -> list[str]:
    segments = []
    for line in text.split("\n"):
        segments.extend(_SENTENCE_BREAK.split(line))
    return segments


def find_mandatory_requirements(text: str) -> list[str]:
    """Sentences carrying ``must`` or ``shall``, in order of appearance.

    Each line is cut into sentence segments. A segment containing either modal
    as a whole word contributes one entry: its text up to the first modal plus
    at most ``REQUIREMENT_WINDOW`` trailing characters, trimmed.
    """
    requirements = []
    for segment in _segments(text or ""):
        match = _REQUIREMENT.match(segment)
        if not match:
            continue
        requirement = match.group(0).strip()
        if requirement:
            requirements.append(requirement)
            if len(requirements) == REQUIREMENT_MAX_ITEMS:
                break
    return requirements


def infer_goals(text: str, sections: dict[str, str]) -> list[str]:
    """Goals listed after the highest-priority anchor phrase found.

    Falls back to the sentences of the first section when no anchor occurs
    anywhere in the text.
    """
    text = text or ""
    for pattern in _GOAL_PATTERNS:
        match = pattern.search(text)
        if match:
            parts = (part.strip() for part in _GOAL_SPLIT.split(match.group(1)))
            return [part for part in parts if part][:GOALS_MAX_ITEMS]

    first = next(iter(sections.values()), "")
    parts = (part.strip() for part in _FALLBACK_GOAL_SPLIT.split(first))
    return [part for part in parts if part][:FALLBACK_GOALS_MAX_ITEMS]
