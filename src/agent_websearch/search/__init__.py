"""Web search for agent runtimes.

This module provides a backend-agnostic interface over web search
providers:
- Web search, news search and page fetch through the active provider
- Per-context provider selection
- Deep search combining search, optional rerank and page fetching
"""

from .base import (
    DeepSearchOptions,
    DeepSearchResult,
    FetchedPage,
    NewsItem,
    NewsSearchResult,
    NoActiveProviderError,
    OrganicResult,
    PageOptions,
    PageResult,
    ProviderNotFoundError,
    SearchAuthenticationError,
    SearchConfigError,
    SearchError,
    SearchOptions,
    SearchProvider,
    SearchProviderError,
    SearchRateLimitError,
    WebSearchResult,
)
from .context import SearchContext
from .factory import ProviderFactory, build_search_service
from .registry import ProviderRegistry
from .service import WebSearchService, get_search_service, set_search_service

__all__ = [
    "DeepSearchOptions",
    "DeepSearchResult",
    "FetchedPage",
    "NewsItem",
    "NewsSearchResult",
    "NoActiveProviderError",
    "OrganicResult",
    "PageOptions",
    "PageResult",
    "ProviderFactory",
    "ProviderNotFoundError",
    "ProviderRegistry",
    "SearchAuthenticationError",
    "SearchConfigError",
    "SearchContext",
    "SearchError",
    "SearchOptions",
    "SearchProvider",
    "SearchProviderError",
    "SearchRateLimitError",
    "WebSearchResult",
    "WebSearchService",
    "build_search_service",
    "get_search_service",
    "set_search_service",
]
