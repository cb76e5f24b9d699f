"""Catalog Retrieval Engine: snapshot + house fetch + name filter + page window.

Invariants:
    - Snapshot loaded exactly once by load(); a tuple, never mutated afterwards
    - get_page composes filters in a fixed order: house (remote) THEN name (local)
    - house blank/absent -> snapshot; else trimmed+lowercased and fetched fresh
    - Any source failure -> UpstreamUnavailableError; no partial page is ever returned
    - Never logs, retries or degrades: errors propagate to the API error handlers

Design Decisions:
    - Shell orchestrates async IO around pure core functions (filter_by_name, paginate)
      so the page logic is testable without a network (ADR: functional core)
    - Constructed via async classmethod load(): __init__ cannot await the bulk fetch,
      and an engine instance only exists once its snapshot does
"""

from collections.abc import Sequence

from app.core.domain_types import PAGE_SIZE, Character, Page, Snapshot
from app.core.errors import UpstreamUnavailableError
from app.core.filter_characters import filter_by_name, normalize_term
from app.core.paginate import paginate, validate_page
from app.core.repository_protocols import CharacterSource


class CatalogRetrievalEngine:
    """Serves bounded, filtered pages over the character catalog."""

    def __init__(self, source: CharacterSource, snapshot: Snapshot):
        self._source = source
        self._snapshot = snapshot

    @classmethod
    async def load(cls, source: CharacterSource) -> "CatalogRetrievalEngine":
        """Fetch the full collection once and build a ready engine."""
        try:
            characters = await source.fetch_all()
        except Exception as e:
            raise UpstreamUnavailableError("Could not fetch API") from e
        return cls(source, tuple(characters or ()))

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    async def get_page(
        self,
        page: int,
        search: str | None = None,
        house: str | None = None,
    ) -> Page:
        validate_page(page)

        house_term = normalize_term(house)
        if house_term is None:
            base: Sequence[Character] = self._snapshot
        else:
            base = await self._fetch_house(house_term)

        term = normalize_term(search)
        if term is not None:
            base = filter_by_name(base, term)

        return paginate(base, page, PAGE_SIZE)

    async def _fetch_house(self, house: str) -> list[Character]:
        try:
            characters = await self._source.fetch_by_house(house)
        except Exception as e:
            raise UpstreamUnavailableError(
                f"Could not fetch API (house={house})",
            ) from e
        return list(characters or ())
