"""Service test fixtures: fake upstream, loaded engine, FastAPI test client.

Invariants:
    - Every test gets a fresh FakeCharacterSource and engine
    - get_engine dependency overridden; lifespan never runs, so no network
    - app.state.engine set for the readiness probe, restored afterwards

Design Decisions:
    - raise_app_exceptions=False: lets the catch-all handler's 500 reach the client
      instead of re-raising inside the test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_engine
from app.main import app
from app.services.catalog_engine import CatalogRetrievalEngine
from tests.services.fake_source import FakeCharacterSource, make_character, make_characters


@pytest.fixture
def fake_source():
    """45 generic wizards plus a few named characters for search tests."""
    characters = make_characters(45)
    characters[3] = make_character("Harry Potter", "Gryffindor", 3)
    characters[10] = make_character("young HARRY", None, 10)
    characters[20] = make_character("James Potter", "Gryffindor", 20)
    characters[30] = make_character(None, "Slytherin", 30)
    return FakeCharacterSource(
        characters=characters,
        houses={
            "gryffindor": [
                make_character("Harry Potter", "Gryffindor", 3),
                make_character("Hermione Granger", "Gryffindor", 100),
                make_character("Ron Weasley", "Gryffindor", 101),
                make_character("James Potter", "Gryffindor", 20),
            ],
            "hufflepuff": None,
        },
    )


@pytest.fixture
async def engine(fake_source):
    return await CatalogRetrievalEngine.load(fake_source)


@pytest.fixture
async def client(engine):
    """FastAPI test client with the engine dependency overridden."""
    app.dependency_overrides[get_engine] = lambda: engine
    original_engine = getattr(app.state, "engine", None)
    app.state.engine = engine

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.engine = original_engine
