"""
Removal of junk tags and attributes from an isolated content tree.
"""

from __future__ import annotations

import re
from typing import Any, Dict

import structlog
from bs4 import BeautifulSoup, Tag

from ..config.config import SanitizerConfig

logger = structlog.get_logger(__name__)

# Entries such as id="disqus_thread" select by attribute rather than tag name
ATTRIBUTE_MARKER_PATTERN = re.compile(r'^\s*([\w:.-]+)\s*=\s*"([^"]*)"\s*$')


def _matcher(entry: str) -> Dict[str, Any]:
    """Translate a junk-tag entry into ``find()`` keyword arguments."""
    marker = ATTRIBUTE_MARKER_PATTERN.match(entry)
    if marker:
        return {"attrs": {marker.group(1): marker.group(2)}}
    return {"name": entry.strip().lower()}


class Sanitizer:
    """Strips configured tags (whole subtree) and attributes from a tree."""

    def __init__(self, config: SanitizerConfig | None = None) -> None:
        self.config = config or SanitizerConfig()

    def remove_junk_tag(self, tree: Tag, entry: str) -> int:
        """Remove every element matching ``entry``; returns how many were removed."""
        matcher = _matcher(entry)
        removed = 0
        while (item := tree.find(**matcher)) is not None:
            item.decompose()
            removed += 1
        return removed

    def remove_junk_attribute(self, tree: Tag, attribute: str) -> int:
        """Delete ``attribute`` from every element in ``tree``."""
        removed = 0
        elements = tree.find_all(True)
        if not isinstance(tree, BeautifulSoup):
            elements.insert(0, tree)
        for element in elements:
            if attribute in element.attrs:
                del element.attrs[attribute]
                removed += 1
        return removed

    def sanitize(self, tree: Tag) -> Tag:
        """
        Strip junk from ``tree`` in place.

        All junk tags go first so that attributes are only stripped from
        elements that survive.

        Returns:
            The same tree, mutated
        """
        tags_removed = sum(self.remove_junk_tag(tree, entry) for entry in self.config.junk_tags)
        attrs_removed = sum(self.remove_junk_attribute(tree, attr) for attr in self.config.junk_attributes)

        logger.debug("Sanitized content tree", tags_removed=tags_removed, attributes_removed=attrs_removed)
        return tree
