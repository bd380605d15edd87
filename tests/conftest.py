"""Test configuration hooks."""

import pytest

from agent_websearch.search import WebSearchService
from tests.mocks import MockSearchProvider


@pytest.fixture
def provider_a():
    """Provider returning two organic results."""
    return MockSearchProvider(
        organic=[{"link": "u1"}, {"link": "u2"}],
        pages={"u1": "c1", "u2": "c2"},
    )


@pytest.fixture
def provider_b():
    """Second provider with distinct results."""
    return MockSearchProvider(organic=[{"link": "b1"}], pages={"b1": "from b"})


@pytest.fixture
def service(provider_a, provider_b):
    """Service with providers A and B registered, no default."""
    svc = WebSearchService()
    svc.register_provider("A", provider_a)
    svc.register_provider("B", provider_b)
    return svc
