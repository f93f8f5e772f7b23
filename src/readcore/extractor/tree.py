"""
Tolerant DOM construction on top of BeautifulSoup.
"""

from __future__ import annotations

import warnings

import structlog
from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, ProcessingInstruction

from ..config.config import DEFAULT_CHARSET

logger = structlog.get_logger(__name__)


def build_tree(markup: str, parser: str = "lxml") -> BeautifulSoup | None:
    """
    Parse normalized markup into a mutable document tree.

    Malformed markup is accepted as-is; only a parser that cannot run at
    all yields ``None``.

    Args:
        markup: Normalized HTML text
        parser: BeautifulSoup tree builder name

    Returns:
        The parsed document, or None if parsing failed outright
    """
    if not isinstance(markup, str):
        logger.warning("Cannot build a tree from non-text markup", markup_type=type(markup).__name__)
        return None

    try:
        with warnings.catch_warnings():
            # Short documents that look like a path or URL are still documents here
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(markup, parser)
    except Exception as e:
        logger.warning("Document could not be parsed", parser=parser, error=str(e), error_type=type(e).__name__)
        return None

    # Inline PHP/ASP directives at the top level never belong to the content
    for item in list(soup.contents):
        if isinstance(item, ProcessingInstruction):
            item.extract()

    soup.original_encoding = DEFAULT_CHARSET
    return soup
