"""Tests for SEO analyzer."""

import pytest
import requests
from unittest.mock import Mock
from urllib3.exceptions import ReadTimeoutError

from seo_audit.analyzer import SEOAnalyzer, translate_error, validate_url
from seo_audit.config import AuditThresholds
from seo_audit.exceptions import (
    AccessDeniedError,
    AllProxiesFailedError,
    AnalysisError,
    FetchError,
    FetchTimeoutError,
    InvalidURLError,
    PageNotFoundError,
    ResponseTooLargeError,
)
from seo_audit.fetcher import ProxyFetcher
from seo_audit.models import FetchResult

URL = "https://example.com/guide"


def _http_error(status_code):
    return requests.HTTPError(
        f"{status_code} Client Error", response=Mock(status_code=status_code)
    )


class TestValidateUrl:
    """Test cases for URL validation."""

    @pytest.mark.parametrize("url", ["http://example.com", "https://example.com/page"])
    def test_valid_urls(self, url):
        assert validate_url(url) == url

    @pytest.mark.parametrize("url", ["example.com", "ftp://example.com", "", "HTTPS://example.com"])
    def test_invalid_urls(self, url):
        with pytest.raises(InvalidURLError, match="starting with http:// or https://"):
            validate_url(url)


class TestTranslateError:
    """Test cases for mapping failures to user-facing errors."""

    def test_timeout(self):
        error = translate_error(requests.exceptions.ReadTimeout("read timed out"))
        assert isinstance(error, FetchTimeoutError)
        assert str(error) == (
            "Request timed out. Please try again or check if the website is accessible."
        )

    def test_not_found(self):
        error = translate_error(_http_error(404))
        assert isinstance(error, PageNotFoundError)
        assert str(error) == "Website not found. Please check if the URL is correct."

    def test_access_denied(self):
        error = translate_error(_http_error(403))
        assert isinstance(error, AccessDeniedError)
        assert str(error) == "Access denied. The website might be blocking automated requests."

    def test_other_http_error(self):
        error = translate_error(_http_error(500))
        assert type(error) is FetchError
        assert str(error) == "Unable to analyze website: 500 Client Error"

    def test_connection_error(self):
        error = translate_error(requests.exceptions.ConnectionError("Name or service not known"))
        assert type(error) is FetchError
        assert str(error) == "Unable to analyze website: Name or service not known"

    def test_too_large_is_a_fetch_error(self):
        error = translate_error(ResponseTooLargeError("maxContentLength size of 10 exceeded"))
        assert type(error) is FetchError
        assert "maxContentLength" in str(error)

    @pytest.mark.parametrize("exc", [AllProxiesFailedError(), ValueError("bad markup")])
    def test_generic_failure(self, exc):
        error = translate_error(exc)
        assert isinstance(error, AnalysisError)
        assert str(error) == (
            "Failed to analyze website. Please check your internet connection and try again."
        )


class TestSEOAnalyzer:
    """Test cases for SEOAnalyzer."""

    @pytest.fixture
    def fetcher(self):
        return Mock()

    @pytest.fixture
    def analyzer(self, fetcher):
        return SEOAnalyzer(fetcher=fetcher)

    def test_analyzer_initialization(self):
        """Test analyzer can be initialized with defaults."""
        analyzer = SEOAnalyzer()
        assert analyzer.fetcher is not None
        assert analyzer.thresholds.title_min == 30

    def test_analyze_url_success(self, analyzer, fetcher, optimized_html):
        """Test a page passing every rule scores 100 everywhere."""
        fetcher.fetch.return_value = FetchResult(
            url=URL, html=optimized_html, proxy_url="https://corsproxy.io/?x"
        )

        result = analyzer.analyze_url(URL)

        fetcher.fetch.assert_called_once_with(URL)
        assert result.meta_score == 100
        assert result.content_score == 100
        assert result.performance_score == 100
        assert result.total_issues == 0
        assert result.fetch.proxy_url == "https://corsproxy.io/?x"

    def test_analyze_empty_page_scores(self, analyzer, empty_html):
        """Test the penalty arithmetic on an empty page."""
        result = analyzer.analyze_html(URL, empty_html)

        assert len(result.meta_issues) == 9
        assert result.meta_score == 10
        assert len(result.content_issues) == 7
        assert result.content_score == 44
        assert result.performance_issues == []
        assert result.performance_score == 100
        assert result.overall_score == 51

    def test_invalid_url_is_not_fetched(self, analyzer, fetcher):
        with pytest.raises(InvalidURLError):
            analyzer.analyze_url("example.com")
        fetcher.fetch.assert_not_called()

    def test_fetch_failure_is_translated(self, analyzer, fetcher):
        """Test the original exception is chained."""
        original = _http_error(403)
        fetcher.fetch.side_effect = original

        with pytest.raises(AccessDeniedError) as exc_info:
            analyzer.analyze_url(URL)

        assert exc_info.value.__cause__ is original

    def test_stall_mid_body_reports_timeout(self, make_response):
        """Test a body that stalls after the headers gets the timeout message."""
        fetcher = ProxyFetcher(proxy_templates=["https://proxy.test/?{url}"])
        fetcher.session = Mock()
        response = make_response()
        response.iter_content.side_effect = requests.exceptions.ConnectionError(
            ReadTimeoutError(None, None, "Read timed out.")
        )
        fetcher.session.get.return_value = response

        with pytest.raises(FetchTimeoutError, match="Request timed out"):
            SEOAnalyzer(fetcher=fetcher).analyze_url(URL)

    def test_all_proxies_empty(self, analyzer, fetcher):
        fetcher.fetch.side_effect = AllProxiesFailedError()
        with pytest.raises(AnalysisError):
            analyzer.analyze_url(URL)

    def test_custom_penalties(self, fetcher, empty_html):
        """Test penalties come from the thresholds and scores floor at zero."""
        thresholds = AuditThresholds(meta_penalty=20, content_penalty=15)
        analyzer = SEOAnalyzer(fetcher=fetcher, thresholds=thresholds)

        result = analyzer.analyze_html(URL, empty_html)

        assert result.meta_score == 0
        assert result.content_score == 0

    def test_analyze_multiple_urls(self, analyzer, fetcher, optimized_html):
        """Test failures are reported per URL without stopping the batch."""
        fetcher.fetch.side_effect = [
            FetchResult(url=URL, html=optimized_html, proxy_url="p"),
            requests.exceptions.Timeout("slow"),
        ]

        results = analyzer.analyze_multiple_urls([URL, "https://slow.example", "not-a-url"])

        assert [url for url, _, _ in results] == [URL, "https://slow.example", "not-a-url"]
        assert results[0][1] is not None and results[0][2] is None
        assert isinstance(results[1][2], FetchTimeoutError)
        assert isinstance(results[2][2], InvalidURLError)
        assert fetcher.fetch.call_count == 2
