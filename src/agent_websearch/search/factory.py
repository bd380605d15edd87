"""Build a search service from configuration."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from ..core.config import SearchProviderConfig, WebSearchConfig
from ..core.logger import get_logger
from .base import SearchConfigError, SearchProvider
from .registry import ProviderRegistry
from .service import WebSearchService

logger = get_logger("search.factory")

ProviderFactory = Callable[[SearchProviderConfig], SearchProvider]


def build_search_service(
    config: WebSearchConfig,
    factories: Mapping[str, ProviderFactory],
) -> WebSearchService:
    """Create a WebSearchService with providers built from configuration.

    Provider implementations live outside this package; callers supply a
    factory per provider ``type``.

    Args:
        config: Web search configuration
        factories: Provider factories keyed by provider type

    Returns:
        Configured WebSearchService

    Raises:
        SearchConfigError: If an enabled provider has no factory
        ProviderNotFoundError: If ``default_provider`` is not registered
    """
    service = WebSearchService(
        registry=ProviderRegistry(auto_activate_first=config.auto_activate_first)
    )

    for name, entry in config.providers.items():
        if not entry.enabled:
            logger.debug("Skipping disabled search provider: %s", name)
            continue

        factory = factories.get(entry.type)
        if factory is None:
            raise SearchConfigError(
                f"No factory for search provider type '{entry.type}' "
                f"(provider '{name}'). Known types: {', '.join(factories) or 'none'}",
                provider=name,
            )

        service.register_provider(name, factory(entry))

    if config.default_provider is not None:
        service.registry.set_default(config.default_provider)

    logger.info(
        "Search service initialized (providers=%d, default=%s)",
        len(service.registry),
        service.registry.default_name,
    )
    return service
