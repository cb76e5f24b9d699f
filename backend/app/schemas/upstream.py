"""Upstream Schemas: Pydantic models for the HP API character payload.

Invariants:
    - Only id, name, house, patronus, image are read; other upstream fields ignored
    - Every field optional: presence is checked by the core only where it matters (name)
    - A null body validates to None (treated as zero records by the client)
"""

from pydantic import BaseModel, ConfigDict, TypeAdapter

from app.core.domain_types import Character


class UpstreamCharacter(BaseModel):
    """One character record as served by the HP API."""
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = None
    house: str | None = None
    patronus: str | None = None
    image: str | None = None

    def to_domain(self) -> Character:
        return Character(
            id=self.id, name=self.name, house=self.house,
            patronus=self.patronus, image=self.image,
        )


UPSTREAM_PAYLOAD = TypeAdapter(list[UpstreamCharacter] | None)
