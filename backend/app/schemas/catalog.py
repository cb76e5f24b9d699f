"""Catalog Schemas: Pydantic response models for the JSON API.

Invariants:
    - PageResponse mirrors the core Page: page, size, total, items
    - CharacterResponse exposes derived first_name/last_name alongside name
    - ApiErrorResponse documents the envelope built by core/errors.py
"""

from pydantic import BaseModel

from app.core.domain_types import Character, Page


class CharacterResponse(BaseModel):
    """Public-facing character record."""
    id: str | None = None
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    house: str | None = None
    patronus: str | None = None
    image: str | None = None

    @classmethod
    def from_domain(cls, character: Character) -> "CharacterResponse":
        return cls(
            id=character.id,
            name=character.name,
            first_name=character.first_name,
            last_name=character.last_name,
            house=character.house,
            patronus=character.patronus,
            image=character.image,
        )


class PageResponse(BaseModel):
    """One page of characters."""
    page: int
    size: int
    total: int
    items: list[CharacterResponse]

    @classmethod
    def from_domain(cls, page: Page) -> "PageResponse":
        return cls(
            page=page.page,
            size=page.size,
            total=page.total,
            items=[CharacterResponse.from_domain(c) for c in page.items],
        )


class ApiErrorResponse(BaseModel):
    """Error envelope returned by every global error handler."""
    timestamp: str
    status: int
    error: str
    message: str
    path: str
