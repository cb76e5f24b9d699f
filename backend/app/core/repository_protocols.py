"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - The upstream character API is accessed only through CharacterSource
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass a plain fake (ADR: no inheritance hierarchy)
    - Async in Protocol: implementations do network IO; the filter/paginate
      functions that consume the results stay synchronous and pure
"""

from typing import Protocol

from app.core.domain_types import Character


class CharacterSource(Protocol):
    """Read-only contract for the external character API."""

    async def fetch_all(self) -> list[Character]:
        """Full collection. Called once at startup."""
        ...

    async def fetch_by_house(self, house: str) -> list[Character]:
        """House-scoped subset. house is already trimmed and lowercased.

        An empty list is a valid 'no matches' outcome; failures raise
        UpstreamUnavailableError.
        """
        ...
