"""Errors raised while auditing a page.

Every AuditError carries a message that can be shown to the user as-is.
"""

import requests


class AuditError(Exception):
    """Base class for audit failures."""


class InvalidURLError(AuditError):
    """The URL does not start with http:// or https://."""


class FetchError(AuditError):
    """The page could not be fetched through any proxy."""


class FetchTimeoutError(FetchError):
    """The last fetch attempt timed out."""


class PageNotFoundError(FetchError):
    """The page answered with HTTP 404."""


class AccessDeniedError(FetchError):
    """The page answered with HTTP 403."""


class AnalysisError(AuditError):
    """Fetching or parsing failed for a reason other than HTTP transport."""


class AllProxiesFailedError(Exception):
    """Every proxy returned an empty body."""

    def __init__(self, message: str = "All proxy services failed"):
        super().__init__(message)


class ResponseTooLargeError(requests.RequestException):
    """The response body exceeded the configured content limit."""
