"""
Textual clean-up of raw markup before it is parsed.

The rewrites here run on the markup string, not the tree: stray charset
declarations, double line breaks, ``<font>`` wrappers and inline scripts
are easier to remove reliably before a tolerant parser has guessed at
their structure.
"""

from __future__ import annotations

import codecs
import re
from typing import Any

import structlog

from ..config.config import DEFAULT_CHARSET

logger = structlog.get_logger(__name__)

CHARSET_PATTERN = re.compile(r"charset=([\w|\-]+);?")
DOUBLE_BREAK_PATTERN = re.compile(r"<br\s*/?>[ \r\n\s]*<br\s*/?>", re.IGNORECASE)
FONT_TAG_PATTERN = re.compile(r"</?font[^>]*>", re.IGNORECASE)
SCRIPT_BLOCK_PATTERN = re.compile(r"<script(.*?)>(.*?)</script>", re.IGNORECASE | re.DOTALL)


def resolve_charset(charset: Any) -> str:
    """Return a usable codec name, falling back to UTF-8 for junk labels."""
    if not isinstance(charset, str) or not charset.strip():
        return DEFAULT_CHARSET
    try:
        return codecs.lookup(charset.strip()).name
    except LookupError:
        logger.debug("Unknown charset label, using default", charset=charset, default=DEFAULT_CHARSET)
        return DEFAULT_CHARSET


def to_entities(source: Any, charset: str = DEFAULT_CHARSET) -> str | None:
    """Decode ``source`` and turn every non-ASCII code point into ``&#NNNN;``.

    Returns None for input that is neither text nor bytes.
    """
    if source is None:
        return ""
    if isinstance(source, (bytes, bytearray)):
        source = bytes(source).decode(resolve_charset(charset), errors="replace")
    elif not isinstance(source, str):
        logger.debug("Source is not markup", source_type=type(source).__name__)
        return None
    return source.encode("ascii", errors="xmlcharrefreplace").decode("ascii")


def normalize(source: Any, charset: Any = DEFAULT_CHARSET) -> str | None:
    """
    Prepare raw markup for tree building.

    Args:
        source: Raw HTML as text or undecoded bytes
        charset: Label used to decode bytes; anything unusable means UTF-8

    Returns:
        ASCII-safe markup with entities for non-ASCII characters, or
        None when ``source`` is not markup at all
    """
    src = to_entities(source, resolve_charset(charset))
    if src is None:
        return None

    # Strip the first character set declaration; the document is ours now
    src = CHARSET_PATTERN.sub("", src, count=1)

    # Double line breaks usually separate paragraphs on old-style pages
    src = DOUBLE_BREAK_PATTERN.sub("</p><p>", src)

    src = FONT_TAG_PATTERN.sub("", src)
    src = SCRIPT_BLOCK_PATTERN.sub("", src)

    return src.strip()
