"""Mock objects for testing."""

from .mock_provider import MockSearchProvider

__all__ = ["MockSearchProvider"]
