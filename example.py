"""Example usage of the SEO audit - Single page analysis."""

from seo_audit import SEOAnalyzer, ProxyFetcher, ReportRenderer, AuditError, Config


def main():
    """Run example SEO audit."""

    # Initialize the fetcher using .env configuration
    config = Config.from_env()

    fetcher = ProxyFetcher(
        proxy_templates=config.proxy_templates,
        timeout=config.timeout,
        user_agent=config.user_agent,
    )
    analyzer = SEOAnalyzer(fetcher=fetcher)

    url = "https://example.com"
    print(f"Analyzing {url}...")

    try:
        result = analyzer.analyze_url(url)
    except AuditError as e:
        print(f"Failed to analyze: {e}")
        return

    print(f"Fetched via {result.fetch.proxy_url} in {result.fetch.load_time:.2f}s")
    print(ReportRenderer().render_text(result))

    # Scores are also available individually
    for card in result.cards():
        print(f"{card.title}: {card.score}/100 ({len(card.issues)} issues)")


if __name__ == "__main__":
    main()
