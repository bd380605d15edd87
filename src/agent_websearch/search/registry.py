"""Registry of named search providers with per-context selection."""

from __future__ import annotations

from ..core.logger import get_logger
from .base import NoActiveProviderError, ProviderNotFoundError, SearchProvider
from .context import SearchContext

logger = get_logger("search.registry")


class ProviderRegistry:
    """Keyed collection of search providers.

    The registry owns the name -> provider mapping. The active selection is
    not stored here: it lives on each ``SearchContext`` and is only changed
    through ``set_active``, which rejects unknown names up front.

    The registry also keeps a ``default_name`` used to seed new contexts.
    With ``auto_activate_first`` enabled, the first provider registered while
    no default exists becomes the default.
    """

    def __init__(self, auto_activate_first: bool = False) -> None:
        """Initialize the registry.

        Args:
            auto_activate_first: Make the first registered provider the default
        """
        self._providers: dict[str, SearchProvider] = {}
        self._default: str | None = None
        self._auto_activate_first = auto_activate_first

    @property
    def auto_activate_first(self) -> bool:
        return self._auto_activate_first

    @property
    def default_name(self) -> str | None:
        """Name applied as the initial selection of new contexts."""
        return self._default

    def register(self, name: str, provider: SearchProvider) -> None:
        """Insert or replace the provider registered under ``name``.

        Args:
            name: Registry key
            provider: Provider implementation
        """
        replaced = name in self._providers
        self._providers[name] = provider

        if self._auto_activate_first and self._default is None and len(self._providers) == 1:
            self._default = name
            logger.info("Auto-activated first search provider: %s", name)

        logger.info(
            "%s search provider: %s (%r)",
            "Replaced" if replaced else "Registered",
            name,
            provider,
        )

    def list_names(self) -> list[str]:
        """Get registered names in insertion order."""
        return list(self._providers)

    def get(self, name: str) -> SearchProvider | None:
        return self._providers.get(name)

    def require(self, name: str) -> SearchProvider:
        """Get a provider by name.

        Raises:
            ProviderNotFoundError: If no provider is registered under ``name``
        """
        try:
            return self._providers[name]
        except KeyError:
            raise ProviderNotFoundError(name, self._providers) from None

    def set_default(self, name: str | None) -> None:
        """Set the default selection for new contexts.

        Args:
            name: Registered provider name, or None to clear the default

        Raises:
            ProviderNotFoundError: If ``name`` is not registered
        """
        if name is not None:
            self.require(name)
        self._default = name
        logger.info("Default search provider set to: %s", name)

    def resolve_active(self, context: SearchContext) -> SearchProvider:
        """Get the provider selected for ``context``.

        Raises:
            NoActiveProviderError: If the context has no selection
            ProviderNotFoundError: If the selection names an unknown provider
        """
        if context.provider is None:
            raise NoActiveProviderError(context.context_id)
        return self.require(context.provider)

    def set_active(self, name: str, context: SearchContext) -> None:
        """Select ``name`` as the active provider for ``context``.

        The context is left untouched when ``name`` is unknown.

        Raises:
            ProviderNotFoundError: If ``name`` is not registered
        """
        self.require(name)
        previous = context.provider
        context.provider = name
        logger.info(
            "Active search provider for context %s: %s -> %s",
            context.context_id,
            previous,
            name,
        )

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)
