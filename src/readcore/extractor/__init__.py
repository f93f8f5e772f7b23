"""
readcore content extraction.

Pipeline, in order:
1. Normalizer: textual clean-up and entity encoding of raw markup
2. Tree builder: tolerant BeautifulSoup parse
3. Scorer / selector: paragraph-parent scoring and best-container choice
4. Isolator: copy of the winning container into its own document
5. Image finder and sanitizer on the isolated copy
6. Title clean-up and assembly of the ExtractionResult
"""

from .models import ExtractionResult
from .normalizer import normalize, resolve_charset
from .readability import Readability, extract, isolate
from .sanitizer import Sanitizer
from .scorer import Candidate, classify, score_paragraphs, select_top_candidate
from .title import find_title, normalize_title
from .tree import build_tree

__all__ = [
    "Candidate",
    "ExtractionResult",
    "Readability",
    "Sanitizer",
    "build_tree",
    "classify",
    "extract",
    "find_title",
    "isolate",
    "normalize",
    "normalize_title",
    "resolve_charset",
    "score_paragraphs",
    "select_top_candidate",
]
