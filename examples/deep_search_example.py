#!/usr/bin/env python3
"""Deep Search Example.

This example demonstrates the search service with an in-memory provider:
- Building a service from a YAML configuration
- Per-agent execution contexts and provider selection
- Deep search with a rerank hook
- Unreachable pages being dropped instead of failing the search

Run from the repository root:

    python examples/deep_search_example.py
"""

import asyncio
from pathlib import Path

from agent_websearch import (
    AppConfig,
    DeepSearchOptions,
    build_search_service,
    get_logger,
    setup_logging,
)
from agent_websearch.core import SearchProviderConfig
from agent_websearch.search import (
    NewsItem,
    NewsSearchResult,
    OrganicResult,
    PageOptions,
    PageResult,
    SearchOptions,
    SearchProvider,
    SearchRateLimitError,
    WebSearchResult,
)

logger = get_logger("examples.deep_search")

CONFIG_PATH = Path(__file__).with_name("config.example.yaml")


class InMemoryProvider(SearchProvider):
    """Provider serving canned results; one page is always rate limited."""

    def __init__(self, config: SearchProviderConfig) -> None:
        self.corpus = config.options.get("corpus", "python")

    async def search_web(
        self, query: str, options: SearchOptions | None = None
    ) -> WebSearchResult:
        num = options.num if options and options.num else 5
        organic = [
            OrganicResult(
                title=f"{self.corpus} result {i}",
                link=f"https://example.com/{self.corpus}/{i}",
                snippet=f"About {query}",
                position=i,
            )
            for i in range(1, num + 1)
        ]
        return WebSearchResult(organic=organic, related_searches=[f"{query} tutorial"])

    async def search_news(
        self, query: str, options: SearchOptions | None = None
    ) -> NewsSearchResult:
        return NewsSearchResult(
            news=[NewsItem(title=f"News about {query}", link="https://news.example.com/1")]
        )

    async def fetch_page(self, url: str, options: PageOptions | None = None) -> PageResult:
        await asyncio.sleep(0.05)
        if url.endswith("/2"):
            raise SearchRateLimitError(f"Rate limited fetching {url}", provider="memory")
        return PageResult(markdown=f"# {url}\n\nPage body.", metadata={"status": 200})


def lowest_ranked_first(results: list[OrganicResult]) -> list[OrganicResult]:
    """Example rerank hook."""
    return sorted(results, key=lambda r: r.position, reverse=True)


# =============================================================================
# Demo
# =============================================================================
async def main() -> None:
    config = AppConfig.from_yaml(CONFIG_PATH)
    setup_logging(config.logging)

    service = build_search_service(config.websearch, {"memory": InMemoryProvider})
    print(f"Providers: {service.list_providers()}")

    context = service.create_context("agent-1")
    print(f"Active provider: {service.get_active_provider(context)}")

    result = await service.deep_search(
        "python asyncio",
        DeepSearchOptions(
            search_count=5,
            news_count=1,
            fetch_count=3,
            rerank=lowest_ranked_first,
        ),
        context=context,
    )

    print(result.summary)
    for page in result.pages:
        print(f"  {page.url}: {len(page.markdown)} chars")

    print(f"Stats: {service.get_stats()}")


if __name__ == "__main__":
    asyncio.run(main())
