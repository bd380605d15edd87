"""Tests for build_search_service."""

from __future__ import annotations

import pytest

from agent_websearch.core.config import SearchProviderConfig, WebSearchConfig
from agent_websearch.search import (
    OrganicResult,
    ProviderNotFoundError,
    SearchConfigError,
    build_search_service,
)
from tests.mocks import MockSearchProvider


def _mock_factory(entry: SearchProviderConfig) -> MockSearchProvider:
    provider = MockSearchProvider(pages=entry.options.get("pages"))
    provider.api_key = entry.api_key
    return provider


FACTORIES = {"mock": _mock_factory}


class TestBuildSearchService:
    """Tests for building a service from configuration."""

    def test_registers_enabled_providers_in_order(self) -> None:
        """Test enabled providers are registered under their names."""
        config = WebSearchConfig(
            providers={
                "primary": SearchProviderConfig(type="mock", api_key="k1"),
                "disabled": SearchProviderConfig(type="mock", enabled=False),
                "backup": SearchProviderConfig(type="MOCK"),
            }
        )

        service = build_search_service(config, FACTORIES)

        assert service.list_providers() == ["primary", "backup"]
        assert service.registry.get("primary").api_key == "k1"
        assert service.registry.default_name is None

    def test_default_provider_applied(self) -> None:
        """Test the configured default seeds new contexts."""
        config = WebSearchConfig(
            default_provider="backup",
            providers={
                "primary": SearchProviderConfig(type="mock"),
                "backup": SearchProviderConfig(type="mock"),
            },
        )

        service = build_search_service(config, FACTORIES)
        context = service.create_context()

        assert service.get_active_provider(context) == "backup"

    def test_unknown_default_provider(self) -> None:
        """Test an unregistered default fails fast."""
        config = WebSearchConfig(
            default_provider="ghost",
            providers={"primary": SearchProviderConfig(type="mock")},
        )

        with pytest.raises(ProviderNotFoundError):
            build_search_service(config, FACTORIES)

    def test_unknown_provider_type(self) -> None:
        """Test a provider type without a factory."""
        config = WebSearchConfig(
            providers={"primary": SearchProviderConfig(type="serper")},
        )

        with pytest.raises(SearchConfigError) as exc_info:
            build_search_service(config, FACTORIES)

        assert exc_info.value.provider == "primary"
        assert "serper" in str(exc_info.value)

    def test_auto_activate_first(self) -> None:
        """Test the auto-activation policy from configuration."""
        config = WebSearchConfig(
            auto_activate_first=True,
            providers={
                "primary": SearchProviderConfig(type="mock"),
                "backup": SearchProviderConfig(type="mock"),
            },
        )

        service = build_search_service(config, FACTORIES)

        assert service.registry.default_name == "primary"

    @pytest.mark.asyncio
    async def test_built_service_deep_search(self) -> None:
        """Test a configured service runs a deep search end to end."""
        config = WebSearchConfig(
            default_provider="primary",
            providers={
                "primary": SearchProviderConfig(type="mock", options={"pages": {"u1": "c1"}}),
            },
        )
        service = build_search_service(config, FACTORIES)
        service.registry.get("primary").organic = [OrganicResult(link="u1")]

        result = await service.deep_search("query", context=service.create_context())

        assert [(p.url, p.markdown) for p in result.pages] == [("u1", "c1")]
