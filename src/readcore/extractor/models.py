"""
Data models for extraction results.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    """Readable summary of one HTML document.

    ``content`` is ``None`` when no container scored positive; an empty
    string is a (degenerate) successful extraction.
    """

    title: str | None
    lead_image: str | None
    word_count: int
    content: str | None

    def __post_init__(self) -> None:
        """Validate the result."""
        if self.word_count < 0:
            raise ValueError("word_count cannot be negative")

    @property
    def has_content(self) -> bool:
        return self.content is not None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
