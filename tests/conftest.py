"""
Shared fixtures for the readcore test suite.
"""

import pytest

ARTICLE_HTML = """<!DOCTYPE html>
<html>
<head>
<meta http-equiv="Content-Type" content="text/html; charset=utf-8">
<title>My Great Post - Example Site</title>
<style>body { color: red; }</style>
</head>
<body>
<div id="nav"><p>Home</p><p>About</p></div>
<div id="main" class="article-body" style="margin: 0 auto">
<p align="left">The first paragraph of the article carries most of the story text.</p>
<img src="/images/lead.jpg" class="hero" border="0">
<p>A second paragraph keeps the article going with more words.</p>
<script type="text/javascript">trackVisitor();</script>
<form action="/subscribe"><input type="email" name="email"><button>Subscribe</button></form>
</div>
<div class="sidebar"><p>Related links and other sidebar material</p><img src="/images/ad.png"></div>
<div id="comments"><p>A long reader comment that should never be chosen.</p></div>
</body>
</html>
"""

NO_PARAGRAPH_HTML = """<html><head><title>Empty Page</title></head>
<body><div>Nothing but a div in here</div></body></html>"""


@pytest.fixture
def article_html() -> str:
    """A small news-style page with navigation, sidebar and comments."""
    return ARTICLE_HTML


@pytest.fixture
def no_paragraph_html() -> str:
    """A page without any paragraph elements."""
    return NO_PARAGRAPH_HTML


@pytest.fixture
def article_file(tmp_path, article_html):
    """The article page written to disk."""
    path = tmp_path / "article.html"
    path.write_text(article_html, encoding="utf-8")
    return path
