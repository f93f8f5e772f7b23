"""
Readable-content extraction for a single HTML document.

Algorithm after arc90's Readability bookmarklet: score the
parents of all paragraphs, keep the best one, copy it out of the page and
scrub what is left.
"""

from __future__ import annotations

import copy
from typing import Any

import structlog
from bs4 import BeautifulSoup, Tag

from ..config.config import Config, ExtractionSettings
from ..crawler.fetcher import FetchError, fetch_html
from .models import ExtractionResult
from .normalizer import normalize, resolve_charset
from .sanitizer import Sanitizer
from .scorer import score_paragraphs, select_top_candidate
from .title import find_title
from .tree import build_tree

logger = structlog.get_logger(__name__)


def isolate(node: Tag) -> BeautifulSoup:
    """Deep-copy ``node`` into a new, otherwise empty document.

    Copied tags keep their own void-element and whitespace rules, so the
    host document can use the stdlib builder whatever parsed the source.
    """
    target = BeautifulSoup("", "html.parser")
    target.append(copy.copy(node))
    return target


class Readability:
    """
    Extracts the main content, title and lead image of one document.

    Instances are single-use: the parsed tree and the lead image are kept
    on the instance, so create one per document.
    """

    name = "readability"

    def __init__(
        self,
        source: str | bytes | None,
        charset: Any = None,
        *,
        settings: ExtractionSettings | None = None,
        sanitizer: Sanitizer | None = None,
    ) -> None:
        """
        Parse ``source`` into a document tree.

        Args:
            source: Raw HTML, as text or bytes
            charset: Label for decoding bytes; invalid labels fall back to UTF-8
            settings: Scoring and parsing tunables
            sanitizer: Sanitizer applied to the extracted fragment
        """
        self.settings = settings or ExtractionSettings()
        self.sanitizer = sanitizer or Sanitizer()
        self.charset = resolve_charset(self.settings.charset if charset is None else charset)
        self.source = source
        self.image: str | None = None
        self.logger = logger.bind(component="Readability")

        self.dom = build_tree(normalize(source, self.charset), self.settings.parser)

    @classmethod
    def parse(
        cls,
        source: str | bytes,
        is_content: bool = False,
        *,
        config: Config | None = None,
        client: Any = None,
    ) -> ExtractionResult | None:
        """
        Extract content from a URL, or from markup when ``is_content`` is set.

        Returns:
            The extraction result, or None if the page could not be fetched or parsed
        """
        config = config or Config()
        charset = None

        if not is_content:
            try:
                page = fetch_html(str(source), config.fetch, client=client)
            except FetchError as e:
                logger.error("Could not fetch document", url=str(source), error=str(e))
                return None
            source, charset = page.content, page.charset

        readability = cls(
            source,
            charset,
            settings=config.extraction,
            sanitizer=Sanitizer(config.sanitizer),
        )
        return readability.get_content()

    def get_title(self, delimiter: str | None = None) -> str | None:
        """Return the cleaned document title, or None if there is none."""
        if delimiter is None:
            delimiter = self.settings.title_delimiter
        return find_title(self.dom, delimiter)

    def get_image(self, node: Tag | None = None) -> str | None:
        """
        Find the lead image.

        Without ``node`` the image recorded by the last extraction is
        returned; otherwise the first ``<img>`` inside ``node`` is used.
        """
        if node is None:
            return self.image

        lead = node.find("img")
        if lead is None:
            return None
        return lead.get("src")

    def get_content(self) -> ExtractionResult | None:
        """
        Run the extraction and bring everything together.

        Returns:
            ExtractionResult, with ``content`` None when nothing looked like
            an article; None if the document never parsed
        """
        if self.dom is None:
            return None

        target = self._process_content()
        if target is None:
            content = None
            word_count = 0
        else:
            content = target.decode(formatter="minimal")
            word_count = len(target.get_text())

        result = ExtractionResult(
            title=self.get_title(),
            lead_image=self.image,
            word_count=word_count,
            content=content,
        )

        self.logger.info(
            "Extraction completed",
            found_content=result.has_content,
            word_count=word_count,
            has_image=self.image is not None,
        )
        return result

    def _get_top_box(self) -> Tag | None:
        """Return the best-scoring paragraph container."""
        table = score_paragraphs(
            self.dom,
            self.settings.paragraph_tags,
            base=self.settings.base_score,
            neutral=self.settings.neutral_score,
            min_length=self.settings.min_paragraph_length,
        )
        return select_top_candidate(table)

    def _process_content(self) -> BeautifulSoup | None:
        content = self._get_top_box()

        # No decent match means there is nothing to process
        if content is None:
            self.logger.debug("No content candidate found")
            return None

        target = isolate(content)
        self.image = self.get_image(target)

        return self.sanitizer.sanitize(target)


def extract(
    source: str | bytes,
    charset: Any = None,
    *,
    config: Config | None = None,
) -> ExtractionResult | None:
    """Convenience wrapper: extract readable content from markup."""
    config = config or Config()
    return Readability(
        source,
        charset,
        settings=config.extraction,
        sanitizer=Sanitizer(config.sanitizer),
    ).get_content()
