"""Tests for SearchContext."""

from __future__ import annotations

from agent_websearch.search.context import SearchContext


class TestSearchContext:
    """Tests for SearchContext."""

    def test_initial_provider_seeds_selection(self) -> None:
        """Test the initial provider becomes the current selection."""
        context = SearchContext(context_id="agent", initial_provider="A")
        assert context.provider == "A"

    def test_generated_context_id(self) -> None:
        """Test contexts get distinct generated identifiers."""
        assert SearchContext().context_id != SearchContext().context_id

    def test_transfer_from_parent(self) -> None:
        """Test a child inherits the parent's current selection."""
        parent = SearchContext(initial_provider="A")
        parent.provider = "B"
        child = SearchContext(initial_provider="A")

        child.transfer_from_parent(parent)

        assert child.provider == "B"
        assert child.initial_provider == "A"

    def test_reset(self) -> None:
        """Test reset restores the initial selection."""
        context = SearchContext(initial_provider="A")
        context.provider = "B"

        assert context.reset() == "A"
        assert context.provider == "A"

    def test_reset_without_initial(self) -> None:
        """Test reset to no selection."""
        context = SearchContext()
        context.provider = "B"

        assert context.reset() is None
        assert context.provider is None

    def test_show(self) -> None:
        """Test display lines."""
        assert SearchContext(initial_provider="A").show() == ["Active Provider: A"]
        assert SearchContext().show() == ["Active Provider: none"]
