"""Search service: active-provider passthroughs and the deep search pipeline."""

from __future__ import annotations

import asyncio
import inspect
import time
from typing import Any

from ..core.logger import get_logger
from .base import (
    DeepSearchOptions,
    DeepSearchResult,
    FetchedPage,
    NewsSearchResult,
    OrganicResult,
    PageOptions,
    PageResult,
    RerankFunction,
    SearchError,
    SearchOptions,
    SearchProvider,
    WebSearchResult,
)
from .context import SearchContext
from .registry import ProviderRegistry

logger = get_logger("search.service")


class WebSearchService:
    """Unified web search over the active provider of each execution context.

    Features:
    - Provider registration and per-context selection
    - Web search, news search and page fetch passthroughs
    - Deep search: parallel web/news retrieval, optional rerank hook and
      concurrent page fetching where a failed page is dropped, not raised

    Every call resolves the active provider exactly once, so a selection
    change during an in-flight deep search never switches providers
    mid-pipeline.
    """

    def __init__(
        self,
        registry: ProviderRegistry | None = None,
        auto_activate_first: bool = False,
    ) -> None:
        """Initialize the search service.

        Args:
            registry: Provider registry (a new one is created if None)
            auto_activate_first: Policy for a newly created registry; ignored
                when ``registry`` is given
        """
        if registry is None:
            registry = ProviderRegistry(auto_activate_first=auto_activate_first)
        self._registry = registry

        # Statistics
        self._deep_searches = 0
        self._pages_fetched = 0
        self._page_failures = 0

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Provider selection
    # ------------------------------------------------------------------

    def register_provider(self, name: str, provider: SearchProvider) -> None:
        """Register (or replace) a provider under ``name``."""
        self._registry.register(name, provider)

    def list_providers(self) -> list[str]:
        """Get registered provider names in registration order."""
        return self._registry.list_names()

    def create_context(
        self,
        context_id: str | None = None,
        provider: str | None = None,
        parent: SearchContext | None = None,
    ) -> SearchContext:
        """Create an execution context.

        The initial selection comes from the parent's current selection, else
        ``provider``, else the registry default. It is not validated here; an
        unknown name surfaces as ``ProviderNotFoundError`` on first use.

        Args:
            context_id: Identifier (generated if None)
            provider: Agent-level provider name
            parent: Context to inherit the selection from

        Returns:
            New SearchContext
        """
        initial = provider if provider is not None else self._registry.default_name
        kwargs: dict[str, Any] = {"initial_provider": initial}
        if context_id is not None:
            kwargs["context_id"] = context_id
        context = SearchContext(**kwargs)
        if parent is not None:
            context.transfer_from_parent(parent)

        logger.debug(
            "Created search context %s (provider=%s)", context.context_id, context.provider
        )
        return context

    def get_active_provider(self, context: SearchContext) -> str | None:
        """Get the active provider name for ``context``."""
        return context.provider

    def set_active_provider(self, name: str, context: SearchContext) -> None:
        """Select the active provider for ``context``.

        Raises:
            ProviderNotFoundError: If ``name`` is not registered
        """
        self._registry.set_active(name, context)

    def reset_provider(self, context: SearchContext) -> str | None:
        """Restore the context's initial selection and return it."""
        restored = context.reset()
        logger.info("Search provider for context %s reset to %s", context.context_id, restored)
        return restored

    def select_sole_provider(self, context: SearchContext) -> str | None:
        """Activate the only registered provider, if there is exactly one.

        Returns:
            The selected name, or None when zero or several are registered
        """
        names = self._registry.list_names()
        if len(names) != 1:
            return None
        self._registry.set_active(names[0], context)
        return names[0]

    # ------------------------------------------------------------------
    # Passthroughs
    # ------------------------------------------------------------------

    async def search_web(
        self,
        query: str,
        options: SearchOptions | None = None,
        *,
        context: SearchContext,
    ) -> WebSearchResult:
        """Search the web with the active provider.

        Raises:
            SearchError: If the query is empty
            NoActiveProviderError: If the context has no selection
            ProviderNotFoundError: If the selection is not registered
        """
        query = self._validate_query(query)
        provider = self._registry.resolve_active(context)
        logger.debug("search_web via %s: %s", context.provider, query[:100])
        return await provider.search_web(query, options)

    async def search_news(
        self,
        query: str,
        options: SearchOptions | None = None,
        *,
        context: SearchContext,
    ) -> NewsSearchResult:
        """Search news with the active provider."""
        query = self._validate_query(query)
        provider = self._registry.resolve_active(context)
        logger.debug("search_news via %s: %s", context.provider, query[:100])
        return await provider.search_news(query, options)

    async def fetch_page(
        self,
        url: str,
        options: PageOptions | None = None,
        *,
        context: SearchContext,
    ) -> PageResult:
        """Fetch a page with the active provider."""
        if not url or not url.strip():
            raise SearchError("Page URL cannot be empty")
        provider = self._registry.resolve_active(context)
        logger.debug("fetch_page via %s: %s", context.provider, url)
        return await provider.fetch_page(url.strip(), options)

    # ------------------------------------------------------------------
    # Deep search
    # ------------------------------------------------------------------

    async def deep_search(
        self,
        query: str,
        options: DeepSearchOptions | None = None,
        *,
        context: SearchContext,
    ) -> DeepSearchResult:
        """Search, optionally rerank, then fetch the top pages.

        Phases:
        1. Web and news searches run concurrently; a count of zero skips the
           call. Any failure here aborts the whole deep search.
        2. ``options.rerank`` (if given) replaces the organic results.
        3. Pages for the first ``fetch_count`` results are fetched
           concurrently. Results without a URL and failed fetches are
           dropped; the remaining pages keep the result order.

        Args:
            query: Search query
            options: Deep search options (defaults if None)
            context: Execution context selecting the provider

        Returns:
            DeepSearchResult with results, news and pages

        Raises:
            SearchError: If the query is empty
            NoActiveProviderError: If the context has no selection
            ProviderNotFoundError: If the selection is not registered
            Exception: Whatever the provider raised from a search call
        """
        query = self._validate_query(query)
        options = options or DeepSearchOptions()
        provider = self._registry.resolve_active(context)
        provider_name = context.provider

        self._deep_searches += 1
        start_time = time.time()
        logger.info(
            "Deep search via %s: %s (search=%d, news=%d, fetch=%d)",
            provider_name,
            query[:100],
            options.search_count,
            options.news_count,
            options.fetch_count,
        )

        web_result, news_result = await self._retrieve(provider, query, options)
        results = web_result.organic if web_result is not None else []
        news = news_result.news if news_result is not None else []

        if options.rerank is not None:
            results = await self._rerank(options.rerank, results)

        selected = results[: max(options.fetch_count, 0)]
        pages = await self._fetch_pages(
            provider, selected, PageOptions(country_code=options.country_code)
        )

        result = DeepSearchResult(results=results, news=news, pages=pages)
        logger.info(
            "Deep search completed: %s in %.2fms",
            result.summary,
            (time.time() - start_time) * 1000,
        )
        return result

    async def _retrieve(
        self,
        provider: SearchProvider,
        query: str,
        options: DeepSearchOptions,
    ) -> tuple[WebSearchResult | None, NewsSearchResult | None]:
        """Run the web and news searches concurrently.

        Returns:
            Tuple of (web result, news result); None for a skipped call

        Raises:
            Exception: The first failure, after cancelling the other call
        """
        web_task: asyncio.Task[WebSearchResult] | None = None
        news_task: asyncio.Task[NewsSearchResult] | None = None

        if options.search_count > 0:
            web_task = asyncio.create_task(
                provider.search_web(query, options.to_search_options(num=options.search_count))
            )
        if options.news_count > 0:
            news_task = asyncio.create_task(
                provider.search_news(query, options.to_search_options(num=options.news_count))
            )

        tasks = [task for task in (web_task, news_task) if task is not None]
        try:
            await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        return (
            web_task.result() if web_task is not None else None,
            news_task.result() if news_task is not None else None,
        )

    @staticmethod
    async def _rerank(
        rerank: RerankFunction,
        results: list[OrganicResult],
    ) -> list[OrganicResult]:
        reranked = rerank(list(results))
        if inspect.isawaitable(reranked):
            reranked = await reranked
        return list(reranked)

    async def _fetch_pages(
        self,
        provider: SearchProvider,
        selected: list[OrganicResult],
        page_options: PageOptions,
    ) -> list[FetchedPage]:
        """Fetch pages for the selected results, dropping failures.

        All fetches are awaited together and their outcomes partitioned in
        selection order, so completion order never affects the result.
        """
        urls = [url for url in (result.resolved_url for result in selected) if url]
        skipped = len(selected) - len(urls)
        if skipped:
            logger.debug("Skipping %d result(s) without a URL", skipped)

        outcomes = await asyncio.gather(
            *(self._fetch_one(provider, url, page_options) for url in urls),
            return_exceptions=True,
        )

        pages: list[FetchedPage] = []
        for url, outcome in zip(urls, outcomes, strict=True):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                self._page_failures += 1
                logger.warning("Dropping page %s: %s", url, outcome)
                continue
            pages.append(FetchedPage(url=url, markdown=outcome.markdown, metadata=outcome.metadata))

        self._pages_fetched += len(pages)
        return pages

    @staticmethod
    async def _fetch_one(
        provider: SearchProvider,
        url: str,
        page_options: PageOptions,
    ) -> PageResult:
        return await provider.fetch_page(url, page_options)

    @staticmethod
    def _validate_query(query: str) -> str:
        if not query or not query.strip():
            raise SearchError("Search query cannot be empty")
        return query.strip()

    def get_stats(self) -> dict[str, Any]:
        """Get search service statistics.

        Returns:
            Dictionary with statistics
        """
        return {
            "provider_count": len(self._registry),
            "providers": self._registry.list_names(),
            "default_provider": self._registry.default_name,
            "deep_searches": self._deep_searches,
            "pages_fetched": self._pages_fetched,
            "page_fetch_failures": self._page_failures,
        }


# Global search service instance
_global_service: WebSearchService | None = None


def get_search_service() -> WebSearchService:
    """Get the global search service instance.

    Returns:
        WebSearchService instance
    """
    global _global_service
    if _global_service is None:
        _global_service = WebSearchService()
    return _global_service


def set_search_service(service: WebSearchService) -> None:
    """Set the global search service instance.

    Args:
        service: WebSearchService to use globally
    """
    global _global_service
    _global_service = service
    logger.info("Global search service updated")
