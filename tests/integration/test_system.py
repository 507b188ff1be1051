from httpx import AsyncClient
import pytest

from core.config import settings

pytestmark = pytest.mark.anyio


@pytest.mark.integration
async def test_health(client: AsyncClient):
    resp = await client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["status"] == "ok"


@pytest.mark.integration
async def test_root(client: AsyncClient):
    resp = await client.get("/")

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == f"Welcome to {settings.api_title}"
    assert body["version"] == settings.api_version
