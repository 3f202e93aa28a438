"""SEO analyzer that combines proxy fetching and rule-based scoring."""

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from seo_audit.config import AuditThresholds, default_thresholds
from seo_audit.content_checks import check_content
from seo_audit.exceptions import (
    AccessDeniedError,
    AnalysisError,
    AuditError,
    FetchError,
    FetchTimeoutError,
    InvalidURLError,
    PageNotFoundError,
)
from seo_audit.fetcher import ProxyFetcher
from seo_audit.meta_checks import check_meta_tags
from seo_audit.models import FetchResult, SEOAnalysisResult
from seo_audit.performance_checks import check_performance
from seo_audit.scoring import calculate_score

logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "Please enter a valid URL starting with http:// or https://"
TIMEOUT_MESSAGE = "Request timed out. Please try again or check if the website is accessible."
NOT_FOUND_MESSAGE = "Website not found. Please check if the URL is correct."
ACCESS_DENIED_MESSAGE = "Access denied. The website might be blocking automated requests."
GENERIC_FAILURE_MESSAGE = (
    "Failed to analyze website. Please check your internet connection and try again."
)


def validate_url(url: str) -> str:
    """Ensure the URL uses http or https.

    Raises:
        InvalidURLError: If the URL has another scheme or none
    """
    if not url.startswith("http://") and not url.startswith("https://"):
        raise InvalidURLError(INVALID_URL_MESSAGE)
    return url


def translate_error(error: Exception) -> AuditError:
    """Map a fetch or parse failure to an AuditError with a user-facing message."""
    if isinstance(error, AuditError):
        return error
    if isinstance(error, requests.exceptions.Timeout):
        return FetchTimeoutError(TIMEOUT_MESSAGE)
    if isinstance(error, requests.RequestException):
        status_code = error.response.status_code if error.response is not None else None
        if status_code == 404:
            return PageNotFoundError(NOT_FOUND_MESSAGE)
        if status_code == 403:
            return AccessDeniedError(ACCESS_DENIED_MESSAGE)
        return FetchError(f"Unable to analyze website: {error}")
    return AnalysisError(GENERIC_FAILURE_MESSAGE)


class SEOAnalyzer:
    """Audits a page's meta tags, content structure and performance hints."""

    def __init__(
        self,
        fetcher: Optional[ProxyFetcher] = None,
        thresholds: Optional[AuditThresholds] = None,
    ):
        """Initialize the SEO analyzer.

        Args:
            fetcher: Fetcher used to download pages (a default ProxyFetcher if None)
            thresholds: Rule thresholds and penalties
        """
        self.fetcher = fetcher or ProxyFetcher()
        self.thresholds = thresholds or default_thresholds

    def analyze_url(self, url: str) -> SEOAnalysisResult:
        """Fetch and audit a URL.

        Args:
            url: The URL to analyze

        Returns:
            SEOAnalysisResult with scores and issues

        Raises:
            AuditError: With a message suitable for display
        """
        validate_url(url)
        logger.info(f"Analyzing {url}")

        try:
            fetch_result = self.fetcher.fetch(url)
            return self._analyze(url, fetch_result.html, fetch_result)
        except Exception as e:
            audit_error = translate_error(e)
            logger.error(f"Analysis of {url} failed: {e}")
            raise audit_error from e

    def analyze_html(self, url: str, html: str) -> SEOAnalysisResult:
        """Audit HTML that was already fetched.

        Args:
            url: The URL the HTML came from
            html: Page markup

        Returns:
            SEOAnalysisResult with scores and issues
        """
        try:
            return self._analyze(url, html)
        except Exception as e:
            raise translate_error(e) from e

    def analyze_multiple_urls(
        self, urls: list[str]
    ) -> list[tuple[str, Optional[SEOAnalysisResult], Optional[AuditError]]]:
        """Analyze several URLs, continuing past failures.

        Args:
            urls: URLs to analyze

        Returns:
            List of (url, result, error) tuples; exactly one of result and error is set
        """
        results = []
        for url in urls:
            try:
                results.append((url, self.analyze_url(url), None))
            except AuditError as e:
                results.append((url, None, e))
        return results

    def _analyze(
        self, url: str, html: str, fetch_result: Optional[FetchResult] = None
    ) -> SEOAnalysisResult:
        soup = BeautifulSoup(html, "lxml")

        meta_issues = check_meta_tags(soup, self.thresholds)
        content_issues = check_content(soup, url, self.thresholds)
        performance_issues = check_performance(soup, self.thresholds)

        result = SEOAnalysisResult(
            url=url,
            meta_score=calculate_score(meta_issues, self.thresholds.meta_penalty),
            content_score=calculate_score(content_issues, self.thresholds.content_penalty),
            performance_score=calculate_score(
                performance_issues, self.thresholds.performance_penalty
            ),
            meta_issues=meta_issues,
            content_issues=content_issues,
            performance_issues=performance_issues,
            fetch=fetch_result,
        )
        logger.debug(
            f"Scores for {url}: meta={result.meta_score} "
            f"content={result.content_score} performance={result.performance_score}"
        )
        return result
