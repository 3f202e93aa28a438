"""Fetch page HTML through a list of public CORS proxies."""

import logging
import time
from typing import Optional
from urllib.parse import quote

import requests
from urllib3.exceptions import ReadTimeoutError

from seo_audit.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    DIRECT_FETCH_TEMPLATE,
    DOWNLOAD_CHUNK_SIZE,
    MAX_CONTENT_LENGTH_BYTES,
    PROXY_SERVICES,
    REQUEST_HEADERS,
)
from seo_audit.exceptions import AllProxiesFailedError, ResponseTooLargeError
from seo_audit.models import FetchResult, ProxyAttempt

logger = logging.getLogger(__name__)


def encode_uri_component(url: str) -> str:
    """Percent-encode a URL for use as a query parameter value."""
    return quote(url, safe="-_.!~*'()")


def build_proxy_url(template: str, url: str) -> str:
    """Fill a proxy template with the target URL."""
    return template.format(url=encode_uri_component(url), raw=url)


class ProxyFetcher:
    """Fetches a page by trying each proxy in order until one returns HTML.

    There is no retry, backoff or caching: each call makes at most one request
    per proxy template.
    """

    def __init__(
        self,
        proxy_templates: Optional[list[str]] = None,
        timeout: int = DEFAULT_TIMEOUT_SECONDS,
        max_content_length: int = MAX_CONTENT_LENGTH_BYTES,
        user_agent: Optional[str] = None,
        direct: bool = False,
    ):
        """Initialize the fetcher.

        Args:
            proxy_templates: Proxy URL templates containing {url} (defaults to PROXY_SERVICES)
            timeout: Request timeout in seconds for each attempt
            max_content_length: Largest accepted response body in bytes
            user_agent: User agent sent to the proxies
            direct: Try the target URL itself before the proxies
        """
        templates = list(proxy_templates) if proxy_templates else list(PROXY_SERVICES)
        if direct and DIRECT_FETCH_TEMPLATE not in templates:
            templates.insert(0, DIRECT_FETCH_TEMPLATE)

        self.proxy_templates = templates
        self.timeout = timeout
        self.max_content_length = max_content_length
        self.user_agent = user_agent or DEFAULT_USER_AGENT

        self.session = requests.Session()
        self.session.headers.update(REQUEST_HEADERS)
        self.session.headers.update({"User-Agent": self.user_agent})

    def fetch(self, url: str) -> FetchResult:
        """Fetch the HTML for a URL with proxy fallback.

        Args:
            url: The page to fetch

        Returns:
            FetchResult from the first proxy that returned a non-empty body

        Raises:
            requests.RequestException: The error from the last failed proxy
            AllProxiesFailedError: Every proxy answered with an empty body
        """
        last_error: Optional[Exception] = None
        failed_attempts: list[ProxyAttempt] = []

        for template in self.proxy_templates:
            proxy_url = build_proxy_url(template, url)
            logger.debug(f"Fetching {url} via {proxy_url}")

            try:
                start_time = time.time()
                deadline = time.monotonic() + self.timeout
                response = self.session.get(
                    proxy_url, timeout=self.timeout, stream=True
                )
                try:
                    response.raise_for_status()
                    html = self._read_body(response, deadline)
                finally:
                    response.close()
                load_time = time.time() - start_time

            except Exception as e:
                last_error = e
                failed_attempts.append(ProxyAttempt(proxy_url=proxy_url, error=str(e)))
                logger.warning(f"Proxy {template} failed for {url}: {e}")
                continue

            if not html:
                failed_attempts.append(ProxyAttempt(proxy_url=proxy_url, error="Empty response"))
                logger.warning(f"Proxy {template} returned an empty body for {url}")
                continue

            logger.info(f"Fetched {url} via {template} in {load_time:.2f}s")
            return FetchResult(
                url=url,
                html=html,
                proxy_url=proxy_url,
                status_code=response.status_code,
                load_time=load_time,
                failed_attempts=failed_attempts,
            )

        if last_error is not None:
            raise last_error
        raise AllProxiesFailedError()

    def _read_body(self, response: requests.Response, deadline: float) -> str:
        """Read a streamed response, enforcing the content limit and the deadline.

        The timeout passed to requests only bounds each socket read, so a slow
        body is also checked against the deadline for the whole attempt.
        """
        declared = response.headers.get("Content-Length")
        if declared and declared.isdigit() and int(declared) > self.max_content_length:
            raise ResponseTooLargeError(
                f"maxContentLength size of {self.max_content_length} exceeded",
                response=response,
            )

        chunks = []
        received = 0
        try:
            for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                if time.monotonic() > deadline:
                    raise requests.exceptions.ReadTimeout(
                        f"Read timed out after {self.timeout}s", response=response
                    )
                if not chunk:
                    continue
                received += len(chunk)
                if received > self.max_content_length:
                    raise ResponseTooLargeError(
                        f"maxContentLength size of {self.max_content_length} exceeded",
                        response=response,
                    )
                chunks.append(chunk)
        except requests.exceptions.ConnectionError as e:
            # iter_content wraps a read timeout mid-body in ConnectionError
            if e.args and isinstance(e.args[0], ReadTimeoutError):
                raise requests.exceptions.ReadTimeout(e.args[0], response=response) from e
            raise

        return b"".join(chunks).decode(self._encoding(response), errors="replace")

    @staticmethod
    def _encoding(response: requests.Response) -> str:
        # requests falls back to ISO-8859-1 for text/* without a charset
        content_type = response.headers.get("Content-Type", "")
        if "charset=" in content_type.lower() and response.encoding:
            return response.encoding
        return "utf-8"
