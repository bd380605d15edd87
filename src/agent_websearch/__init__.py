"""agent-websearch.

Backend-agnostic web search for AI agent runtimes:
- Pluggable providers for web search, news search and page fetching
- Per-context active provider selection
- Deep search that chains search, rerank and page fetching

Example:
    ```python
    from agent_websearch import AppConfig, build_search_service

    config = AppConfig.from_yaml("config.yaml")
    service = build_search_service(config.websearch, {"serper": SerperProvider})
    context = service.create_context("agent-1")
    result = await service.deep_search("python asyncio", context=context)
    ```
"""

from importlib.metadata import PackageNotFoundError, version

from .core import AppConfig, WebSearchConfig, get_logger, setup_logging
from .search import (
    DeepSearchOptions,
    DeepSearchResult,
    SearchContext,
    SearchProvider,
    WebSearchService,
    build_search_service,
)

__all__ = [
    "__version__",
    "AppConfig",
    "WebSearchConfig",
    "DeepSearchOptions",
    "DeepSearchResult",
    "SearchContext",
    "SearchProvider",
    "WebSearchService",
    "build_search_service",
    "get_logger",
    "setup_logging",
]

try:  # pragma: no cover - best-effort during development
    __version__ = version("agent-websearch")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
