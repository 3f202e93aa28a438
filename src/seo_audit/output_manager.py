"""Output manager for saving audit results with timestamps."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from seo_audit.models import SEOAnalysisResult
from seo_audit.report import ReportRenderer

logger = logging.getLogger(__name__)


class DateTimeEncoder(json.JSONEncoder):
    """JSON encoder that handles datetime objects."""

    def default(self, obj):
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super().default(obj)


class OutputManager:
    """Writes each audit to its own timestamped directory."""

    def __init__(self, base_output_dir: str = "audits", renderer: Optional[ReportRenderer] = None):
        """Initialize output manager.

        Args:
            base_output_dir: Base directory for all audit outputs
            renderer: Renderer used for the HTML and text files
        """
        self.base_output_dir = Path(base_output_dir)
        self.base_output_dir.mkdir(parents=True, exist_ok=True)
        self.renderer = renderer or ReportRenderer()

    @staticmethod
    def domain_dirname(url: str) -> str:
        domain = urlparse(url).netloc
        return domain.replace(":", "_").replace("/", "_")

    def create_audit_directory(self, url: str, timestamp: Optional[datetime] = None) -> Path:
        """Create a timestamped directory for this audit.

        Args:
            url: The audited URL
            timestamp: Optional timestamp (defaults to now)

        Returns:
            Path to the created directory

        Example structure:
            audits/
            └── example.com/
                ├── latest.txt
                └── 2025-11-23_143022/
                    ├── result.json
                    ├── report.html
                    └── summary.txt
        """
        if timestamp is None:
            timestamp = datetime.now()

        timestamp_str = timestamp.strftime("%Y-%m-%d_%H%M%S")
        audit_dir = self.base_output_dir / self.domain_dirname(url) / timestamp_str
        audit_dir.mkdir(parents=True, exist_ok=True)
        return audit_dir

    def save_audit(self, result: SEOAnalysisResult) -> Path:
        """Save an audit result as JSON, HTML and a text summary.

        Args:
            result: The audit to save

        Returns:
            Directory the files were written to
        """
        audit_dir = self.create_audit_directory(result.url, result.analyzed_at)

        self._save_json(audit_dir / "result.json", result.to_dict())

        with open(audit_dir / "report.html", "w", encoding="utf-8") as f:
            f.write(self.renderer.render_html(result))

        with open(audit_dir / "summary.txt", "w", encoding="utf-8") as f:
            f.write(self.renderer.render_text(result))
            f.write("\n")

        with open(audit_dir.parent / "latest.txt", "w", encoding="utf-8") as f:
            f.write(audit_dir.name)

        logger.info(f"Saved audit for {result.url} to {audit_dir}")
        return audit_dir

    def _save_json(self, filepath: Path, data: dict) -> None:
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False, cls=DateTimeEncoder)

