"""Keyword-density scoring of company reference documents."""

import re
from collections.abc import Iterable, Sequence

from rfx_studio.models.analysis import CompanyReference
from rfx_studio.models.documents import Document

MAX_REFERENCES = 5


def count_keyword_matches(keywords: Sequence[str], content: str) -> int:
    """Count non-overlapping keyword hits in lowercased content.

    The keywords form one alternation, so at each position the first listed
    keyword that matches wins.
    """
    if not keywords:
        return 0
    pattern = re.compile("|".join(re.escape(keyword.lower()) for keyword in keywords))
    return sum(1 for _ in pattern.finditer((content or "").lower()))


def score_references(
    keywords: Sequence[str],
    documents: Iterable[Document],
    limit: int = MAX_REFERENCES,
) -> list[CompanyReference]:
    """Rank documents by keyword hits, dropping those with none.

    Ties keep the input order.

    Args:
        keywords: Ranked keywords of the RFx document.
        documents: Candidate company documents.
        limit: Maximum number of references returned.

    Returns:
        References sorted by descending score.
    """
    scored = []
    for document in documents:
        score = count_keyword_matches(keywords, document.content)
        if score > 0:
            scored.append(
                CompanyReference(
                    document_id=document.id,
                    document_name=document.name,
                    score=score,
                )
            )
    scored.sort(key=lambda reference: reference.score, reverse=True)
    return scored[:limit]
