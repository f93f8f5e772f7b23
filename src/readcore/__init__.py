"""
readcore - readable main-content extraction for HTML documents.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .extractor import ExtractionResult, Readability, extract

__all__ = ["__version__", "Config", "ExtractionResult", "Readability", "extract"]
