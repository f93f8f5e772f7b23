"""
Document title clean-up.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

DEFAULT_DELIMITER = " - "

TRAILING_SEPARATOR_PATTERN = re.compile(r"[\s\-—–.•]*[\-—–.•]\s*$")


def normalize_title(raw: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Drop the site-name suffix and stray separators from a title.

    "My Great Post - Example Site" becomes "My Great Post". With the
    delimiter appearing several times only the last segment is dropped.
    """
    title = raw.strip()

    if delimiter:
        segments = title.rsplit(delimiter, 1)
        if len(segments) > 1:
            title = segments[0]

    title = TRAILING_SEPARATOR_PATTERN.sub("", title).strip()

    # Lone surrogates from broken entities cannot be encoded; drop them
    return title.encode("utf-8", errors="ignore").decode("utf-8")


def find_title(tree: BeautifulSoup | None, delimiter: str = DEFAULT_DELIMITER) -> str | None:
    """Return the normalized text of the first ``<title>``, if any."""
    if tree is None:
        return None
    node = tree.find("title")
    if node is None:
        return None
    return normalize_title(node.get_text(), delimiter)
