import pytest

from protestmap.routers.healthz.router import get_store_check


@pytest.mark.asyncio
async def test_health_check(client):
    """Test the health check endpoint returns healthy status."""
    response = await client.get("/healthz/")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "ok"
    assert data["version"] == "0.1.0"


@pytest.mark.asyncio
async def test_health_check_store_down(client_factory):
    """The API stays up and reports the store as unavailable."""

    async def store_down() -> bool:
        return False

    async with client_factory({get_store_check: lambda: store_down}) as client:
        response = await client.get("/healthz/")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["database"] == "unavailable"
