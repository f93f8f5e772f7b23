"""
HTTP retrieval for the URL entry points.
"""

from .fetcher import FetchedPage, FetchError, fetch_html, is_url

__all__ = ["FetchedPage", "FetchError", "fetch_html", "is_url"]
