"""HP API Client: httpx-backed CharacterSource for the public character API.

Invariants:
    - GET /api/characters for the full collection, /api/characters/house/{house} per house
    - Non-2xx, transport errors, timeouts and malformed bodies all map to UpstreamUnavailableError
    - JSON null body is an empty result, not an error
    - No retry, no circuit breaking: one attempt bounded by the configured timeout

Design Decisions:
    - Wrapper over raw httpx: isolates transport + parsing from the engine (ADR: single responsibility)
    - Records validated through Pydantic at this boundary, core receives plain Character values
    - Injectable httpx.AsyncClient: tests pass one built on httpx.MockTransport
"""

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.core.domain_types import Character
from app.core.errors import UpstreamUnavailableError
from app.schemas.upstream import UPSTREAM_PAYLOAD

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://hp-api.onrender.com"


class HPApiClient:
    """Fetches character collections from the HP API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.client = client or httpx.AsyncClient(
            base_url=base_url, timeout=timeout_seconds,
        )

    async def fetch_all(self) -> list[Character]:
        return await self._get_characters("/api/characters")

    async def fetch_by_house(self, house: str) -> list[Character]:
        return await self._get_characters(
            f"/api/characters/house/{quote(house, safe='')}",
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _get_characters(self, path: str) -> list[Character]:
        try:
            response = await self.client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Upstream returned {e.response.status_code} for {path}",
                extra={"status_code": e.response.status_code, "path": path},
            )
            raise UpstreamUnavailableError(
                f"Upstream returned HTTP {e.response.status_code}",
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Upstream request failed for {path}: {e!r}")
            raise UpstreamUnavailableError(
                f"Upstream request failed: {type(e).__name__}",
            ) from e
        return self._parse(response, path)

    def _parse(self, response: httpx.Response, path: str) -> list[Character]:
        """Validate the JSON array body into Character values."""
        try:
            records = UPSTREAM_PAYLOAD.validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                f"Malformed upstream payload for {path}: "
                f"{e.error_count()} error(s)",
            )
            raise UpstreamUnavailableError(
                "Upstream returned a malformed payload",
            ) from e
        if records is None:
            return []
        return [r.to_domain() for r in records]
