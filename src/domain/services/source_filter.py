"""Turns grounding citations into displayable sources."""

from typing import Iterable

from src.domain.entities.model_response import Citation
from src.domain.entities.stock_analysis import Source

DEFAULT_TITLE = "Source"
PLACEHOLDER_URL = "#"


def filter_sources(citations: Iterable[Citation]) -> tuple[Source, ...]:
    """Map citations to Sources, dropping any without a usable URL.

    Order is preserved and duplicates are kept.
    """
    resolved = (
        Source(
            title=citation.title or DEFAULT_TITLE,
            url=citation.uri or PLACEHOLDER_URL,
        )
        for citation in citations
    )
    return tuple(source for source in resolved if source.url != PLACEHOLDER_URL)
