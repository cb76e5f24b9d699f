"""Characters API: GET /api/characters through the full FastAPI stack.

Tests cover:
    - default page, response shape, derived name fields
    - 400 envelope for page < 1, out-of-range and non-integer page
    - 503 envelope when the house fetch fails
    - 500 envelope without internal details for unexpected failures
"""

from datetime import datetime

from app.core.errors import UpstreamUnavailableError


async def test_default_page_is_one(client):
    res = await client.get("/api/characters")
    assert res.status_code == 200
    body = res.json()
    assert (body["page"], body["size"], body["total"]) == (1, 20, 45)
    assert len(body["items"]) == 20


async def test_item_fields(client):
    res = await client.get("/api/characters", params={"search": "harry potter"})
    item = res.json()["items"][0]
    assert item == {
        "id": "id-3",
        "name": "Harry Potter",
        "first_name": "Harry",
        "last_name": "Potter",
        "house": "Gryffindor",
        "patronus": None,
        "image": "https://img.test/3.jpg",
    }


async def test_last_page(client):
    res = await client.get("/api/characters", params={"page": 3})
    assert len(res.json()["items"]) == 5


async def test_house_and_search_combined(client):
    res = await client.get(
        "/api/characters", params={"house": "Gryffindor", "search": "potter"},
    )
    assert [i["name"] for i in res.json()["items"]] == ["Harry Potter", "James Potter"]


async def test_empty_house_is_200(client):
    res = await client.get("/api/characters", params={"house": "ravenclaw"})
    assert res.status_code == 200
    assert res.json() == {"page": 1, "size": 20, "total": 0, "items": []}


async def test_page_zero_is_400(client):
    res = await client.get("/api/characters", params={"page": 0})
    assert res.status_code == 400
    body = res.json()
    assert body["status"] == 400
    assert body["error"] == "Bad request"
    assert body["message"] == "page must be >= 1"
    assert body["path"] == "/api/characters"
    datetime.fromisoformat(body["timestamp"])


async def test_out_of_range_is_400(client):
    res = await client.get("/api/characters", params={"page": 4})
    assert res.status_code == 400
    assert res.json()["message"] == "page is out of range"


async def test_non_integer_page_is_400(client):
    res = await client.get("/api/characters", params={"page": "two"})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Bad request"
    assert body["details"][0]["field"] == "query.page"


async def test_house_fetch_failure_is_503(client, fake_source):
    fake_source.fail_house = UpstreamUnavailableError("Upstream returned HTTP 502")
    res = await client.get("/api/characters", params={"house": "Slytherin"})
    assert res.status_code == 503
    body = res.json()
    assert body["error"] == "External API error"
    assert body["message"] == "Could not fetch API (house=slytherin)"
    assert body["path"] == "/api/characters"


async def test_unexpected_failure_is_500_without_details(client, engine, monkeypatch):
    async def _explode(*args, **kwargs):
        raise KeyError("secret internals")

    monkeypatch.setattr(engine, "get_page", _explode)
    res = await client.get("/api/characters")
    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "Internal server error"
    assert body["message"] == "Something went wrong."
    assert "secret" not in res.text
