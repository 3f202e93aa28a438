# src/seo_audit/meta_checks.py
"""Checks for title, description and other head meta tags."""

from typing import Optional

from bs4 import BeautifulSoup

from seo_audit.config import AuditThresholds, default_thresholds


def _attr(soup: BeautifulSoup, selector: str, attribute: str) -> Optional[str]:
    """Trimmed attribute of the first element matching selector, or None."""
    tag = soup.select_one(selector)
    if tag is None:
        return None
    value = tag.get(attribute)
    if value is None:
        return None
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip()


def get_title(soup: BeautifulSoup) -> str:
    """Concatenated text of all <title> elements, trimmed."""
    return "".join(tag.get_text() for tag in soup.find_all("title")).strip()


def check_title(title: str, thresholds: AuditThresholds) -> Optional[str]:
    if not title:
        return "Missing title tag"
    if len(title) < thresholds.title_min:
        return f"Title is too short (should be at least {thresholds.title_min} characters)"
    if len(title) > thresholds.title_max:
        return f"Title is too long (should be less than {thresholds.title_max} characters)"
    return None


def check_description(description: Optional[str], thresholds: AuditThresholds) -> Optional[str]:
    if not description:
        return "Missing meta description"
    if len(description) < thresholds.meta_description_min:
        return (
            "Meta description is too short "
            f"(should be at least {thresholds.meta_description_min} characters)"
        )
    if len(description) > thresholds.meta_description_max:
        return (
            "Meta description is too long "
            f"(should be less than {thresholds.meta_description_max} characters)"
        )
    return None


def check_meta_tags(soup: BeautifulSoup, thresholds: Optional[AuditThresholds] = None) -> list[str]:
    """
    Runs the meta tag rule set against a parsed page.

    Title and description each produce at most one issue. Every other tag is a
    presence check, where an empty value counts as missing.

    Args:
        soup: Parsed page
        thresholds: Length bounds for title and description

    Returns:
        Issue messages in rule order
    """
    thresholds = thresholds or default_thresholds
    issues = []

    title_issue = check_title(get_title(soup), thresholds)
    if title_issue:
        issues.append(title_issue)

    description_issue = check_description(
        _attr(soup, 'meta[name="description"]', "content"), thresholds
    )
    if description_issue:
        issues.append(description_issue)

    presence_checks = [
        ('meta[name="keywords"]', "content", "Missing meta keywords"),
        ('meta[name="robots"]', "content", "Missing robots meta tag"),
        ('link[rel="canonical"]', "href", "Missing canonical URL"),
        ('meta[name="viewport"]', "content", "Missing viewport meta tag"),
        ("meta[charset]", "charset", "Missing charset meta tag"),
    ]
    for selector, attribute, message in presence_checks:
        if not _attr(soup, selector, attribute):
            issues.append(message)

    if not soup.select('meta[property^="og:"]'):
        issues.append("Missing Open Graph tags")
    if not soup.select('meta[name^="twitter:"]'):
        issues.append("Missing Twitter Card tags")

    return issues
