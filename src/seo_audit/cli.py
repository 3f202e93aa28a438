"""Command-line interface for the SEO audit."""

import sys
import json
import logging
from pathlib import Path

from seo_audit.analyzer import SEOAnalyzer
from seo_audit.config import AuditThresholds, Config, settings
from seo_audit.fetcher import ProxyFetcher
from seo_audit.logging_config import setup_logging
from seo_audit.output_manager import OutputManager
from seo_audit.report import ReportRenderer

logger = logging.getLogger(__name__)


def build_analyzer(args) -> SEOAnalyzer:
    """Create an analyzer from environment config and command-line overrides."""
    config = Config.from_env()
    if getattr(args, "timeout", None):
        config.timeout = args.timeout
    if getattr(args, "direct", False):
        config.direct = True

    if getattr(args, "thresholds", None):
        if not Path(args.thresholds).exists():
            logger.warning(f"Thresholds file {args.thresholds} not found, using defaults")
        thresholds = AuditThresholds.from_file(args.thresholds)
    else:
        thresholds = AuditThresholds.from_env()

    fetcher = ProxyFetcher(
        proxy_templates=config.proxy_templates,
        timeout=config.timeout,
        max_content_length=config.max_content_length,
        user_agent=config.user_agent,
        direct=config.direct,
    )
    return SEOAnalyzer(fetcher=fetcher, thresholds=thresholds)


def _write_output(output: str, output_file=None) -> None:
    if output_file:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Results written to {output_file}")
    else:
        print(output)


def _numbered_path(output_file: str, index: int) -> str:
    path = Path(output_file)
    return str(path.with_name(f"{path.stem}_{index}{path.suffix}"))


def analyze_command(args) -> int:
    """Analyze one or more URLs for SEO."""
    analyzer = build_analyzer(args)
    renderer = ReportRenderer()
    output_manager = OutputManager(args.save_dir) if args.save else None

    failed = 0
    results = []
    html_pages = []

    for url, result, error in analyzer.analyze_multiple_urls(args.urls):
        if error is not None:
            failed += 1
            print(f"Error: {error}", file=sys.stderr)
        elif output_manager:
            audit_dir = output_manager.save_audit(result)
            print(f"Saved audit to {audit_dir}", file=sys.stderr)

        if args.output == "text":
            if result is not None:
                print(renderer.render_text(result))
        elif args.output == "json":
            results.append((url, result, error))
        else:
            html_pages.append(renderer.render_html(result=result, error=str(error) if error else None, url=url))

    if args.output == "json":
        _write_output(renderer.render_json(results), args.output_file)
    elif args.output == "html":
        if len(html_pages) == 1 or not args.output_file:
            for page in html_pages:
                _write_output(page, args.output_file)
        else:
            for index, page in enumerate(html_pages, start=1):
                _write_output(page, _numbered_path(args.output_file, index))

    return 1 if failed else 0


def serve_command(args) -> int:
    """Run the browser UI."""
    from seo_audit.web import run_server

    run_server(host=args.host, port=args.port, analyzer=build_analyzer(args))
    return 0


def thresholds_command(args) -> int:
    """Print or save the active audit thresholds."""
    thresholds = AuditThresholds.from_env()
    if args.output_file:
        thresholds.save_to_file(args.output_file)
        print(f"Thresholds written to {args.output_file}")
    else:
        print(json.dumps({"thresholds": thresholds.to_dict()}, indent=2))
    return 0


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        description="SEO Analyzer - Score a page's meta tags, content structure and performance hints"
    )

    # Global flags (before subcommands)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        default=settings.LOG_LEVEL.upper(),
        help="Set logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to file in addition to console",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze command parser
    analyze_parser = subparsers.add_parser(
        "analyze", help="Analyze one or more URLs for SEO."
    )
    analyze_parser.add_argument(
        "urls", nargs="+", help="URLs to analyze (must start with http:// or https://)"
    )
    analyze_parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json", "html"],
        default="text",
        help="Output format (default: text)",
    )
    analyze_parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file (json and html formats)",
    )
    analyze_parser.add_argument(
        "--save",
        action="store_true",
        help="Save each audit to a timestamped directory",
    )
    analyze_parser.add_argument(
        "--save-dir",
        default=settings.OUTPUT_DIR,
        help=f"Base directory for saved audits (default: {settings.OUTPUT_DIR})",
    )
    analyze_parser.add_argument(
        "--direct",
        action="store_true",
        help="Fetch the page directly before falling back to the CORS proxies",
    )
    analyze_parser.add_argument(
        "--thresholds",
        help="JSON file with audit thresholds",
    )
    analyze_parser.add_argument(
        "--timeout",
        type=int,
        help=f"Request timeout per proxy in seconds (default: {settings.TIMEOUT})",
    )
    analyze_parser.set_defaults(func=analyze_command)

    # Serve command parser
    serve_parser = subparsers.add_parser("serve", help="Run the browser UI.")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    serve_parser.add_argument(
        "--direct",
        action="store_true",
        help="Fetch pages directly before falling back to the CORS proxies",
    )
    serve_parser.add_argument("--thresholds", help="JSON file with audit thresholds")
    serve_parser.set_defaults(func=serve_command)

    # Thresholds command parser
    thresholds_parser = subparsers.add_parser(
        "thresholds", help="Show the active audit thresholds."
    )
    thresholds_parser.add_argument(
        "--output-file",
        "-f",
        help="Save thresholds to a JSON file",
    )
    thresholds_parser.set_defaults(func=thresholds_command)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging based on flags
    setup_logging(
        level=args.log_level,
        log_file=getattr(args, 'log_file', None),
    )

    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
