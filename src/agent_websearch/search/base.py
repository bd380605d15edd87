"""Base classes and interfaces for search providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import BaseModel, Field


class SearchError(Exception):
    """Base exception for search-related errors."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        """Initialize search error.

        Args:
            message: Error message
            provider: Name of the provider involved in the error
        """
        self.provider = provider
        super().__init__(message)


class ProviderNotFoundError(SearchError):
    """A provider name was not found in the registry."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        """Initialize the exception.

        Args:
            name: Provider name that could not be resolved
            available: Names that are registered
        """
        self.name = name
        self.available = list(available)
        listing = ", ".join(self.available) or "none"
        super().__init__(
            f"Search provider '{name}' not found. Available: {listing}",
            provider=name,
        )


class NoActiveProviderError(SearchError):
    """No provider has been selected for an execution context."""

    def __init__(self, context_id: str | None = None) -> None:
        """Initialize the exception.

        Args:
            context_id: Identifier of the context without a selection
        """
        self.context_id = context_id
        suffix = f" for context '{context_id}'" if context_id else ""
        super().__init__(f"No active search provider{suffix}")


class SearchConfigError(SearchError):
    """Search configuration could not be applied."""

    pass


class SearchProviderError(SearchError):
    """Error from a specific search provider."""

    pass


class SearchRateLimitError(SearchError):
    """Rate limit exceeded for a search provider."""

    pass


class SearchAuthenticationError(SearchError):
    """Authentication failed for a search provider."""

    pass


class SearchOptions(BaseModel):
    """Options shared by web and news searches.

    Every field is optional; an absent field means "provider default".
    """

    country_code: str | None = Field(default=None, description="Country code (ISO 3166-1)")
    language: str | None = Field(default=None, description="Language code (ISO 639-1)")
    location: str | None = Field(default=None, description="Free-text location")
    num: int | None = Field(default=None, ge=1, description="Number of results")
    page: int | None = Field(default=None, ge=1, description="Page number")
    timeout: float | None = Field(default=None, gt=0, description="Per-call timeout in seconds")


class PageOptions(BaseModel):
    """Options for fetching a single page."""

    render: bool | None = Field(
        default=None, description="Execute JavaScript before extracting content"
    )
    country_code: str | None = Field(default=None, description="Country code (ISO 3166-1)")
    timeout: float | None = Field(default=None, gt=0, description="Per-call timeout in seconds")


class OrganicResult(BaseModel):
    """A ranked organic web search result.

    Providers differ in whether they report the target as ``url`` or
    ``link``; ``resolved_url`` prefers ``url``.
    """

    title: str = Field(default="", description="Result title")
    link: str | None = Field(default=None, description="Result link")
    url: str | None = Field(default=None, description="Result URL")
    snippet: str = Field(default="", description="Text snippet or description")
    position: int = Field(default=1, ge=1, description="Rank in results (1-indexed)")
    date: str | None = Field(default=None, description="Publication date")
    sitelinks: list[dict[str, Any]] | None = Field(default=None, description="Sitelinks")
    attributes: dict[str, Any] | None = Field(default=None, description="Extra attributes")

    @property
    def resolved_url(self) -> str | None:
        """Get the URL to fetch for this result."""
        return self.url or self.link or None


class NewsItem(BaseModel):
    """A news search result."""

    title: str = Field(description="Headline")
    link: str = Field(description="Article link")
    date: str | None = Field(default=None, description="Publication date")
    source: str | None = Field(default=None, description="Publisher")
    snippet: str | None = Field(default=None, description="Text snippet")
    position: int | None = Field(default=None, ge=1, description="Rank in results")


class WebSearchResult(BaseModel):
    """Response from a web search."""

    organic: list[OrganicResult] = Field(default_factory=list, description="Organic results")
    knowledge_graph: dict[str, Any] | None = Field(default=None, description="Knowledge graph")
    people_also_ask: list[dict[str, Any]] | None = Field(
        default=None, description="'People also ask' entries"
    )
    related_searches: list[dict[str, Any]] | None = Field(
        default=None, description="Related searches"
    )


class NewsSearchResult(BaseModel):
    """Response from a news search."""

    news: list[NewsItem] = Field(default_factory=list, description="News items")


class PageResult(BaseModel):
    """Content of a fetched page."""

    markdown: str = Field(description="Markdown-formatted page content")
    metadata: dict[str, Any] | None = Field(default=None, description="Page metadata")


class FetchedPage(PageResult):
    """A page fetched during a deep search, tagged with its source URL."""

    url: str = Field(description="Source URL")


RerankFunction = Callable[[list[OrganicResult]], Any]
"""Reorders/filters organic results; may return a list or an awaitable of one."""


class DeepSearchOptions(SearchOptions):
    """Options for a deep search."""

    search_count: int = Field(default=10, description="Organic results to request (0 skips)")
    news_count: int = Field(default=0, description="News items to request (0 skips)")
    fetch_count: int = Field(default=5, description="Top results to fetch pages for")
    rerank: RerankFunction | None = Field(
        default=None,
        exclude=True,
        description="Hook applied to organic results before fetching",
    )

    def to_search_options(self, **overrides: Any) -> SearchOptions:
        """Project onto plain search options.

        Args:
            **overrides: Search option fields to replace

        Returns:
            SearchOptions carrying only the shared fields
        """
        data = self.model_dump(include=set(SearchOptions.model_fields))
        data.update(overrides)
        return SearchOptions(**data)


class DeepSearchResult(BaseModel):
    """Result of a deep search."""

    results: list[OrganicResult] = Field(default_factory=list, description="Reranked results")
    news: list[NewsItem] = Field(default_factory=list, description="News items")
    pages: list[FetchedPage] = Field(default_factory=list, description="Fetched pages")

    @property
    def summary(self) -> str:
        """One-line count summary."""
        return (
            f"{len(self.results)} web results, {len(self.news)} news results, "
            f"{len(self.pages)} pages fetched"
        )


class SearchProvider(ABC):
    """Abstract base class for search providers.

    A provider is any backend that can search the web, search news and fetch
    pages. Each operation may fail independently with a provider-specific
    error.
    """

    @abstractmethod
    async def search_web(
        self,
        query: str,
        options: SearchOptions | None = None,
    ) -> WebSearchResult:
        """Search the web.

        Args:
            query: Search query string
            options: Search options (None for provider defaults)

        Returns:
            WebSearchResult with organic results
        """

    @abstractmethod
    async def search_news(
        self,
        query: str,
        options: SearchOptions | None = None,
    ) -> NewsSearchResult:
        """Search news.

        Args:
            query: Search query string
            options: Search options (None for provider defaults)

        Returns:
            NewsSearchResult with news items
        """

    @abstractmethod
    async def fetch_page(
        self,
        url: str,
        options: PageOptions | None = None,
    ) -> PageResult:
        """Fetch a page and extract it as markdown.

        Args:
            url: Page URL
            options: Page options; ``render`` requests JavaScript execution

        Returns:
            PageResult with markdown content
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
