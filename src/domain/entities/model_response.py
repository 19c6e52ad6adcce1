"""
Domain entities for what the generative-search service hands back.
The text body is opaque here; only the field extractor knows its layout.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Citation:
    title: Optional[str] = None
    uri: Optional[str] = None


@dataclass(frozen=True)
class RawModelResponse:
    text: str
    citations: tuple[Citation, ...] = field(default_factory=tuple)
