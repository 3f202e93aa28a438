# tests/conftest.py
"""Shared fixtures for the SEO audit tests."""

import pytest
from unittest.mock import Mock

from seo_audit.models import SEOAnalysisResult

AUDITED_URL = "https://example.com/guide"

TITLE = "Complete Guide to Technical SEO Audits"  # 38 characters
DESCRIPTION = (
    "Learn how to run a technical SEO audit step by step, covering meta tags, "
    "content structure, page performance and the tools that help fix issues."
)  # 144 characters

SENTENCE = "Search engines reward pages that answer questions clearly and load quickly. "
PARAGRAPH = SENTENCE * 12  # 132 words


def _optimized_html():
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{TITLE}</title>
    <meta name="description" content="{DESCRIPTION}">
    <meta name="keywords" content="seo, audit, technical seo">
    <meta name="robots" content="index, follow">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <link rel="canonical" href="{AUDITED_URL}">
    <link rel="stylesheet" href="/static/site.css">
    <meta property="og:title" content="{TITLE}">
    <meta name="twitter:card" content="summary">
    <script src="/static/app.js"></script>
</head>
<body>
    <h1>Technical SEO Audits</h1>
    <p>{PARAGRAPH}</p>
    <h2>What to check</h2>
    <p>{PARAGRAPH}</p>
    <ul>
        <li>Meta tags</li>
        <li>Content structure</li>
    </ul>
    <table>
        <tr><th>Check</th><th>Weight</th></tr>
        <tr><td>Title</td><td>10</td></tr>
    </table>
    <p>{PARAGRAPH}</p>
    <img src="/static/diagram.webp" alt="Audit workflow diagram">
    <a href="/pricing">Pricing</a>
    <a href="https://developers.google.com/search/docs">Search documentation</a>
</body>
</html>
"""


@pytest.fixture
def optimized_html():
    """A page that passes every rule."""
    return _optimized_html()


@pytest.fixture
def empty_html():
    """A page with an empty head and body."""
    return "<html><head></head><body></body></html>"


@pytest.fixture
def sample_result():
    """An audit result with a few issues in each category."""
    return SEOAnalysisResult(
        url=AUDITED_URL,
        meta_score=90,
        content_score=68,
        performance_score=44,
        meta_issues=["Missing meta keywords"],
        content_issues=[
            "Missing H1 heading",
            "No lists found (consider using bullet points or numbered lists)",
            "No tables found (consider using tables for structured data)",
            "3 images missing alt text",
        ],
        performance_issues=[
            "High number of CSS files (7 found, recommend combining)",
            "12 inline styles found (recommend using external CSS)",
            "8 inline scripts found (recommend using external JS files)",
            "14 large images found (recommend optimizing)",
            "4 iframes found (consider reducing for better performance)",
            "High number of JavaScript files (15 found, recommend combining)",
            "<iframe> heavy layout",
        ],
    )


def _make_response(body=b"", status_code=200, headers=None, encoding=None, error=None):
    response = Mock()
    response.status_code = status_code
    response.headers = headers or {}
    response.encoding = encoding
    response.iter_content.return_value = [body] if body else []
    if error is not None:
        response.raise_for_status.side_effect = error
    return response


@pytest.fixture
def make_response():
    """Factory for mock streamed requests responses."""
    return _make_response
