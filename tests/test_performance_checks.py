# tests/test_performance_checks.py
"""Tests for the performance hint rule set."""

from bs4 import BeautifulSoup

from seo_audit.config import AuditThresholds
from seo_audit.performance_checks import check_performance, count_large_images


def _soup(body):
    return BeautifulSoup(f"<html><head></head><body>{body}</body></html>", "lxml")


class TestCheckPerformance:
    """Test cases for check_performance."""

    def test_lean_page_has_no_issues(self, optimized_html):
        soup = BeautifulSoup(optimized_html, "lxml")
        assert check_performance(soup) == []

    def test_thresholds_are_exclusive(self):
        """Test counts equal to the threshold do not raise issues."""
        body = (
            '<link rel="stylesheet" href="s.css">' * 5
            + '<script src="a.js"></script>' * 10
            + '<div style="color:red"></div>' * 5
            + "<script>var x = 1;</script>" * 5
            + '<img src="p.jpg" alt="p">' * 10
            + '<iframe src="f.html"></iframe>' * 2
        )
        assert check_performance(_soup(body)) == []

    def test_every_rule_triggers(self):
        body = (
            '<link rel="stylesheet" href="s.css">' * 6
            + '<script src="a.js"></script>' * 11
            + '<div style="color:red"></div>' * 6
            + "<script>var x = 1;</script>" * 6
            + '<img src="p.png" alt="p">' * 11
            + '<iframe src="f.html"></iframe>' * 3
        )
        assert check_performance(_soup(body)) == [
            "High number of CSS files (6 found, recommend combining)",
            "High number of JavaScript files (11 found, recommend combining)",
            "6 inline styles found (recommend using external CSS)",
            "6 inline scripts found (recommend using external JS files)",
            "11 large images found (recommend optimizing)",
            "3 iframes found (consider reducing for better performance)",
        ]

    def test_external_scripts_are_not_inline(self):
        body = '<script src="a.js"></script>' * 8
        assert check_performance(_soup(body)) == []

    def test_large_image_extension_match(self):
        """Test the extension match is a case-sensitive suffix check."""
        soup = _soup(
            '<img src="a.jpg"><img src="b.gif"><img src="c.png">'
            '<img src="d.JPG"><img src="e.webp"><img src="f.jpg?w=200"><img>'
        )
        assert count_large_images(soup) == 3

    def test_custom_thresholds(self):
        thresholds = AuditThresholds(max_iframes=0)
        soup = _soup('<iframe src="f.html"></iframe>')
        assert check_performance(soup, thresholds) == [
            "1 iframes found (consider reducing for better performance)"
        ]
