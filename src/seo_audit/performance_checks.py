# src/seo_audit/performance_checks.py
"""Static performance hints derived from the page markup."""

from typing import Optional

from bs4 import BeautifulSoup

from seo_audit.config import AuditThresholds, default_thresholds
from seo_audit.constants import LARGE_IMAGE_EXTENSIONS


def count_large_images(soup: BeautifulSoup) -> int:
    return sum(
        1 for img in soup.find_all("img")
        if (img.get("src") or "").endswith(LARGE_IMAGE_EXTENSIONS)
    )


def check_performance(soup: BeautifulSoup, thresholds: Optional[AuditThresholds] = None) -> list[str]:
    """
    Runs the performance hint rule set against a parsed page.

    Each count raises an issue only when it exceeds its threshold.
    """
    thresholds = thresholds or default_thresholds
    issues = []

    css_files = len(soup.select('link[rel="stylesheet"]'))
    scripts = soup.find_all("script")
    js_files = sum(1 for script in scripts if script.has_attr("src"))
    inline_styles = len(soup.find_all(style=True))
    inline_scripts = len(scripts) - js_files
    large_images = count_large_images(soup)
    iframes = len(soup.find_all("iframe"))

    if css_files > thresholds.max_css_files:
        issues.append(f"High number of CSS files ({css_files} found, recommend combining)")

    if js_files > thresholds.max_js_files:
        issues.append(f"High number of JavaScript files ({js_files} found, recommend combining)")

    if inline_styles > thresholds.max_inline_styles:
        issues.append(f"{inline_styles} inline styles found (recommend using external CSS)")

    if inline_scripts > thresholds.max_inline_scripts:
        issues.append(f"{inline_scripts} inline scripts found (recommend using external JS files)")

    if large_images > thresholds.max_large_images:
        issues.append(f"{large_images} large images found (recommend optimizing)")

    if iframes > thresholds.max_iframes:
        issues.append(f"{iframes} iframes found (consider reducing for better performance)")

    return issues
