"""Domain Types: immutable value objects for the character catalog.

Invariants:
    - Character fields are opaque strings copied verbatim from upstream (any may be None)
    - Snapshot is a tuple: written once at startup, never mutated
    - Page satisfies 0 <= len(items) <= size; total counts the whole filtered set
    - PAGE_SIZE (20) is the single source of truth for the page window

Design Decisions:
    - Frozen dataclasses over Pydantic in core: no IO/validation concerns here,
      Pydantic lives at the boundaries (schemas, upstream client)
    - Derived first/last name are properties, not stored: they cannot drift from name
"""

import math
from dataclasses import dataclass
from typing import TypeAlias


PAGE_SIZE: int = 20


@dataclass(frozen=True)
class Character:
    """A single catalog record."""
    id: str | None = None
    name: str | None = None
    house: str | None = None
    patronus: str | None = None
    image: str | None = None

    @property
    def first_name(self) -> str | None:
        if self.name is None:
            return None
        parts = self.name.split()
        return parts[0] if parts else ""

    @property
    def last_name(self) -> str | None:
        if self.name is None:
            return None
        return " ".join(self.name.split()[1:])


Snapshot: TypeAlias = tuple[Character, ...]


@dataclass(frozen=True)
class Page:
    """One bounded slice of a filtered result set."""
    page: int
    size: int
    total: int
    items: tuple[Character, ...]

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0


@dataclass(frozen=True)
class House:
    """Display metadata for one house (view layer only)."""
    name: str
    primary: str
    secondary: str
    symbol: str
    description: str
