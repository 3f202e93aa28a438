"""Data models for the SEO audit."""

from dataclasses import dataclass, field
from typing import Optional
from datetime import datetime

from seo_audit.constants import (
    META_CARD_TITLE,
    CONTENT_CARD_TITLE,
    PERFORMANCE_CARD_TITLE,
)
from seo_audit.scoring import score_band


@dataclass
class ProxyAttempt:
    """A failed attempt to fetch through one proxy."""

    proxy_url: str
    error: str


@dataclass
class FetchResult:
    """HTML fetched for a target URL."""

    url: str
    html: str
    proxy_url: str
    status_code: int = 200
    load_time: float = 0.0
    failed_attempts: list[ProxyAttempt] = field(default_factory=list)
    fetched_at: datetime = field(default_factory=datetime.now)


@dataclass
class CategoryResult:
    """One scored result card."""

    title: str
    score: int
    issues: list[str] = field(default_factory=list)

    @property
    def band(self) -> str:
        return score_band(self.score)[0]

    @property
    def color(self) -> str:
        return score_band(self.score)[1]


@dataclass
class SEOAnalysisResult:
    """Scores and issues for the three audited dimensions."""

    url: str
    meta_score: int
    content_score: int
    performance_score: int
    meta_issues: list[str] = field(default_factory=list)
    content_issues: list[str] = field(default_factory=list)
    performance_issues: list[str] = field(default_factory=list)
    fetch: Optional[FetchResult] = None
    analyzed_at: datetime = field(default_factory=datetime.now)

    @property
    def overall_score(self) -> int:
        """Rounded mean of the three category scores."""
        return round(
            (self.meta_score + self.content_score + self.performance_score) / 3
        )

    @property
    def total_issues(self) -> int:
        return (
            len(self.meta_issues)
            + len(self.content_issues)
            + len(self.performance_issues)
        )

    def cards(self) -> list[CategoryResult]:
        """Result cards in display order."""
        return [
            CategoryResult(META_CARD_TITLE, self.meta_score, list(self.meta_issues)),
            CategoryResult(CONTENT_CARD_TITLE, self.content_score, list(self.content_issues)),
            CategoryResult(
                PERFORMANCE_CARD_TITLE, self.performance_score, list(self.performance_issues)
            ),
        ]

    def to_dict(self) -> dict:
        data = {
            "url": self.url,
            "overall_score": self.overall_score,
            "meta_score": self.meta_score,
            "meta_issues": self.meta_issues,
            "content_score": self.content_score,
            "content_issues": self.content_issues,
            "performance_score": self.performance_score,
            "performance_issues": self.performance_issues,
            "analyzed_at": self.analyzed_at.isoformat(),
        }
        if self.fetch is not None:
            data["fetch"] = {
                "proxy_url": self.fetch.proxy_url,
                "status_code": self.fetch.status_code,
                "load_time": self.fetch.load_time,
                "html_size_bytes": len(self.fetch.html.encode("utf-8")),
                "failed_attempts": [
                    {"proxy_url": a.proxy_url, "error": a.error}
                    for a in self.fetch.failed_attempts
                ],
            }
        return data
