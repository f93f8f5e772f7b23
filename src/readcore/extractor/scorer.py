"""
Content scoring: find the element most likely to hold the article body.

Every paragraph votes for its parent element. A vote is worth the
class/id score of the parent plus, for paragraphs with real text, the
length of that text in UTF-8 bytes. Scores live in a side table keyed
by node identity so nothing is ever written into the tree being scored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable

import structlog
from bs4 import BeautifulSoup, Tag

logger = structlog.get_logger(__name__)

NEGATIVE_PATTERN = re.compile(r"comment|meta|footer|footnote|sidebar|blogroll", re.IGNORECASE)

_SUFFIXES = "content|text|body|post"
POSITIVE_PATTERN = re.compile(
    rf"(^|\s)(post|hentry|entry-?({_SUFFIXES})?|article-?({_SUFFIXES})?)(\s|$)",
    re.IGNORECASE,
)


@dataclass
class Candidate:
    """A container and its running score."""

    node: Tag
    score: int = 0


ScoreTable = Dict[int, Candidate]


def classify(value: str | None, base: int = 25, neutral: int = 1) -> int:
    """Score a class or id attribute value.

    Args:
        value: Attribute value; missing attributes classify as ``""``
        base: Bonus for likely article markup; the penalty is twice this
        neutral: Score for values matching neither pattern

    Returns:
        ``-2 * base``, ``base`` or ``neutral``
    """
    value = value or ""
    if NEGATIVE_PATTERN.search(value):
        return -(base * 2)
    if POSITIVE_PATTERN.search(value):
        return base
    return neutral


def attribute_text(node: Tag, name: str) -> str:
    """Return an attribute as a single string, joining multi-valued ones."""
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def score_paragraphs(
    tree: BeautifulSoup,
    paragraph_tags: Iterable[str] = ("p",),
    *,
    base: int = 25,
    neutral: int = 1,
    min_length: int = 10,
) -> ScoreTable:
    """
    Accumulate a score for the parent of every paragraph in ``tree``.

    A container with several paragraphs collects its class/id score once
    per paragraph.

    Returns:
        Candidates keyed by ``id(node)`` in the order they were first touched
    """
    table: ScoreTable = {}

    for paragraph in tree.find_all(list(paragraph_tags)):
        parent = paragraph.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            continue

        # Tags hash by content, so identical containers need identity keys
        candidate = table.setdefault(id(parent), Candidate(parent))

        candidate.score += classify(attribute_text(parent, "class"), base, neutral)
        candidate.score += classify(attribute_text(parent, "id"), base, neutral)

        # Length in UTF-8 bytes, not characters
        text_length = len(paragraph.get_text().encode("utf-8"))
        if text_length > min_length:
            candidate.score += text_length

    logger.debug("Scored paragraph containers", containers=len(table))
    return table


def select_top_candidate(table: ScoreTable) -> Tag | None:
    """Pick the container with the highest positive score; earliest wins ties."""
    best: Candidate | None = None

    for candidate in table.values():
        best_score = best.score if best else 0
        if candidate.score > 0 and candidate.score > best_score:
            best = candidate

    if best is None:
        logger.debug("No container scored above zero")
        return None

    logger.debug("Selected content container", tag=best.node.name, score=best.score)
    return best.node
