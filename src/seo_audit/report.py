"""Render audit results as text, JSON or HTML result cards."""

import json
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from seo_audit.models import SEOAnalysisResult
from seo_audit.scoring import score_band


class ReportRenderer:
    """Renders SEOAnalysisResult objects for the terminal, files and the web UI."""

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize report renderer.

        Args:
            template_dir: Directory containing Jinja2 templates (defaults to the bundled ones)
        """
        template_path = Path(template_dir) if template_dir else None
        if template_path is None or not template_path.exists():
            template_path = Path(__file__).parent / "templates"

        self.env = Environment(
            loader=FileSystemLoader(str(template_path)),
            autoescape=select_autoescape(["html"]),
        )
        self.env.filters["score_color"] = lambda score: score_band(score)[1]
        self.env.filters["score_band"] = lambda score: score_band(score)[0]

    def render_text(self, result: SEOAnalysisResult) -> str:
        """Format a result as plain-text cards."""
        lines = [
            "=" * 60,
            f"SEO Analysis for: {result.url}",
            "=" * 60,
            "",
            f"📊 Overall Score: {result.overall_score}/100 ({result.total_issues} issues found)",
        ]

        for card in result.cards():
            lines.append("")
            lines.append(f"{card.title}: {card.score}/100 ({card.band})")
            if card.issues:
                for issue in card.issues:
                    lines.append(f"  • {issue}")
            else:
                lines.append("  ✅ No issues found")

        lines.append("")
        lines.append("=" * 60)
        return "\n".join(lines)

    def render_json(
        self,
        results: list[tuple[str, Optional[SEOAnalysisResult], Optional[Exception]]],
    ) -> str:
        """Format (url, result, error) entries as a JSON array."""
        entries = [
            {
                "url": url,
                "success": result is not None,
                "result": result.to_dict() if result else None,
                "error": str(error) if error else None,
            }
            for url, result, error in results
        ]
        return json.dumps(entries, indent=2, default=str)

    def render_html(
        self,
        result: Optional[SEOAnalysisResult] = None,
        error: Optional[str] = None,
        url: str = "",
        show_form: bool = False,
    ) -> str:
        """Render the HTML page with the URL form, error banner and result cards.

        Args:
            result: Audit result to show, if any
            error: Error message to show in the banner, if any
            url: Value to prefill in the URL field
            show_form: Whether to include the analysis form

        Returns:
            Rendered HTML document
        """
        template = self.env.get_template("report.html")
        return template.render(
            result=result,
            cards=result.cards() if result else [],
            error=error,
            url=url or (result.url if result else ""),
            show_form=show_form,
        )
