# src/seo_audit/content_checks.py
"""Checks for headings, images, links and body structure."""

from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, Script, Stylesheet, TemplateString

from seo_audit.config import AuditThresholds, default_thresholds
from seo_audit.constants import HEADING_TAGS

BODY_TEXT_TYPES = (NavigableString, CData, Script, Stylesheet, TemplateString)


def count_words(soup: BeautifulSoup) -> int:
    """Count whitespace-separated words in the body text.

    Script and stylesheet text counts too; comments do not. Blank text still
    counts as one word.
    """
    root = soup.body or soup
    text = root.get_text(types=BODY_TEXT_TYPES).strip()
    if not text:
        return 1
    return len(text.split())


def count_images_without_alt(soup: BeautifulSoup) -> int:
    return sum(1 for img in soup.find_all("img") if not img.get("alt"))


def count_external_links(soup: BeautifulSoup, url: str) -> int:
    """Count links that point off the audited URL.

    A link is external when its href starts with "http" and does not contain
    the audited URL.
    """
    count = 0
    for link in soup.find_all("a"):
        href = link.get("href") or ""
        if href.startswith("http") and url not in href:
            count += 1
    return count


def check_content(
    soup: BeautifulSoup, url: str, thresholds: Optional[AuditThresholds] = None
) -> list[str]:
    """
    Runs the content structure rule set against a parsed page.

    Args:
        soup: Parsed page
        url: The audited URL, used to tell external links apart
        thresholds: Minimum word, paragraph and heading counts

    Returns:
        Issue messages in rule order
    """
    thresholds = thresholds or default_thresholds
    issues = []

    h1_count = len(soup.find_all("h1"))
    if h1_count == 0:
        issues.append("Missing H1 heading")
    if h1_count > 1:
        issues.append("Multiple H1 headings detected (should have exactly one)")

    images_without_alt = count_images_without_alt(soup)
    if images_without_alt > 0:
        issues.append(f"{images_without_alt} images missing alt text")

    if count_external_links(soup, url) == 0:
        issues.append("No external links found (consider adding relevant outbound links)")

    if count_words(soup) < thresholds.min_word_count:
        issues.append(
            f"Content length is too short (should be at least {thresholds.min_word_count} words)"
        )

    if len(soup.find_all("p")) < thresholds.min_paragraphs:
        issues.append(
            f"Too few paragraphs (should have at least {thresholds.min_paragraphs} paragraphs)"
        )

    if len(soup.find_all(HEADING_TAGS)) < thresholds.min_headings:
        issues.append("Too few headings (should use proper heading hierarchy)")

    if not soup.find_all(["ul", "ol"]):
        issues.append("No lists found (consider using bullet points or numbered lists)")

    if not soup.find_all("table"):
        issues.append("No tables found (consider using tables for structured data)")

    return issues
