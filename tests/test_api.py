import pytest
from httpx import ASGITransport, AsyncClient

from pysbc.api import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_presets_catalog(client: AsyncClient):
    resp = await client.get("/presets")
    assert resp.status_code == 200
    body = resp.json()
    names = [preset["name"] for preset in body["presets"]]
    assert "daily_silver" in names
    assert len(names) == 5
    formations = {formation["name"]: formation for formation in body["formations"]}
    assert formations["4-3-3"]["positions"][0] == "GK"
    assert formations["4-4-2"]["chemistry_bonus"] == 3


@pytest.mark.anyio
async def test_solve_endpoint(client: AsyncClient):
    resp = await client.post(
        "/solve",
        json={"players": 11, "chemistry": 95, "rating": 70, "maxCost": 8000, "rarities": ["silver"]},
    )
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["success"] is True
    assert len(payload["players"]) == 11
    assert payload["players"][0]["position"] == "GK"
    assert payload["players"][0]["rarity"] == "silver"
    assert payload["total_cost"] == 4720
    assert payload["formation"]["name"] == "4-3-3"
    assert len(payload["strategy"]) == 3


@pytest.mark.anyio
async def test_solve_endpoint_returns_structured_failure(client: AsyncClient):
    resp = await client.post("/solve", json={})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["success"] is False
    assert payload["error_type"] == "InvalidRequirementsError"


@pytest.mark.anyio
async def test_solve_endpoint_rejects_bad_json(client: AsyncClient):
    resp = await client.post(
        "/solve",
        content=b"{players: 11",
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert "Invalid requirements JSON" in resp.json()["detail"]


@pytest.mark.anyio
async def test_preset_solve_endpoint(client: AsyncClient):
    resp = await client.post("/presets/daily_bronze/solve")
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["success"] is True
    assert {player["rarity"] for player in payload["players"]} == {"bronze"}

    resp = await client.post("/presets/not_a_real_preset/solve")
    payload = resp.json()
    assert payload["success"] is False
    assert payload["error"] == "Unknown SBC type: not_a_real_preset"


@pytest.mark.anyio
async def test_market_suggestions_endpoint(client: AsyncClient):
    resp = await client.post("/market-suggestions", json={"players": 1, "chemistry": 0})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["success"] is True
    assert len(payload["suggestions"]) == 1
    assert payload["suggestions"][0]["search_filters"]["rating"] == "73-77"

    resp = await client.post("/market-suggestions", json={"players": 1})
    payload = resp.json()
    assert payload["success"] is False
    assert payload["suggestions"] == []
