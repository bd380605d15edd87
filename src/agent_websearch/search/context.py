"""Per-execution-context search state."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


@dataclass
class SearchContext:
    """Active-provider selection for one execution context (agent, session).

    Contexts are passed explicitly to every service call so that concurrent
    agents never share a selection by accident.

    Attributes:
        context_id: Identifier used in logs and errors
        initial_provider: Selection the context was created with
        provider: Current active selection
    """

    context_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    initial_provider: str | None = None
    provider: str | None = None

    def __post_init__(self) -> None:
        if self.provider is None:
            self.provider = self.initial_provider

    def transfer_from_parent(self, parent: SearchContext) -> None:
        """Inherit the parent's current selection."""
        self.provider = parent.provider

    def reset(self) -> str | None:
        """Restore the initial selection and return it."""
        self.provider = self.initial_provider
        return self.provider

    def show(self) -> list[str]:
        return [f"Active Provider: {self.provider or 'none'}"]
