"""Browser UI and JSON API for the SEO audit."""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse

from seo_audit import __version__
from seo_audit.analyzer import SEOAnalyzer
from seo_audit.exceptions import AuditError, InvalidURLError
from seo_audit.report import ReportRenderer

logger = logging.getLogger(__name__)


def create_app(
    analyzer: Optional[SEOAnalyzer] = None,
    renderer: Optional[ReportRenderer] = None,
) -> FastAPI:
    """Build the web application.

    Args:
        analyzer: Analyzer used for audits (a default SEOAnalyzer if None)
        renderer: Renderer for the HTML page

    Returns:
        Configured FastAPI application
    """
    analyzer = analyzer or SEOAnalyzer()
    renderer = renderer or ReportRenderer()

    app = FastAPI(title="SEO Analyzer", version=__version__)

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    @app.get("/", response_class=HTMLResponse)
    def index(url: Optional[str] = Query(default=None)):
        if not url:
            return renderer.render_html(show_form=True)

        try:
            result = analyzer.analyze_url(url)
        except AuditError as e:
            return renderer.render_html(error=str(e), url=url, show_form=True)

        return renderer.render_html(result=result, url=url, show_form=True)

    @app.get("/api/analyze")
    def analyze(url: str = Query(...)):
        try:
            result = analyzer.analyze_url(url)
        except InvalidURLError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except AuditError as e:
            raise HTTPException(status_code=502, detail=str(e))

        return result.to_dict()

    return app


def run_server(host: str = "127.0.0.1", port: int = 8000, analyzer: Optional[SEOAnalyzer] = None) -> None:
    """Serve the web UI with uvicorn."""
    import uvicorn

    logger.info(f"Starting SEO Analyzer UI on http://{host}:{port}")
    uvicorn.run(create_app(analyzer=analyzer), host=host, port=port)
