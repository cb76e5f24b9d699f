"""Name Filter: pure, order-preserving substring match over characters.

Invariants:
    - normalize_term returns None for absent/blank input, else trimmed + lowercased
    - filter_by_name is stable: retained entries keep their base-set order
    - Characters without a name never match

Design Decisions:
    - Substring containment, not prefix/exact: "potter" matches "Harry Potter"
    - Case folding via str.lower() on both sides, matching how the house segment is normalized
"""

from collections.abc import Iterable

from app.core.domain_types import Character


def normalize_term(value: str | None) -> str | None:
    """Trim and lowercase a free-text term. Blank means 'no filter'."""
    if value is None:
        return None
    value = value.strip()
    return value.lower() if value else None


def filter_by_name(
    characters: Iterable[Character], term: str,
) -> list[Character]:
    """Keep characters whose name contains term (term already normalized)."""
    return [
        c for c in characters
        if c.name is not None and term in c.name.lower()
    ]
