"""Rule-based SEO audit of a single page fetched through CORS proxies."""

__version__ = "0.1.0"

from seo_audit.analyzer import SEOAnalyzer, validate_url
from seo_audit.fetcher import ProxyFetcher
from seo_audit.meta_checks import check_meta_tags
from seo_audit.content_checks import check_content
from seo_audit.performance_checks import check_performance
from seo_audit.scoring import calculate_score, score_band
from seo_audit.report import ReportRenderer
from seo_audit.output_manager import OutputManager
from seo_audit.models import (
    FetchResult,
    ProxyAttempt,
    CategoryResult,
    SEOAnalysisResult,
)
from seo_audit.exceptions import (
    AuditError,
    InvalidURLError,
    FetchError,
    FetchTimeoutError,
    PageNotFoundError,
    AccessDeniedError,
    AnalysisError,
)
from seo_audit.config import Config, AuditThresholds, settings

__all__ = [
    # Core
    "SEOAnalyzer",
    "ProxyFetcher",
    "validate_url",
    "check_meta_tags",
    "check_content",
    "check_performance",
    "calculate_score",
    "score_band",
    "ReportRenderer",
    "OutputManager",
    # Models
    "FetchResult",
    "ProxyAttempt",
    "CategoryResult",
    "SEOAnalysisResult",
    # Errors
    "AuditError",
    "InvalidURLError",
    "FetchError",
    "FetchTimeoutError",
    "PageNotFoundError",
    "AccessDeniedError",
    "AnalysisError",
    # Config
    "Config",
    "AuditThresholds",
    "settings",
]
