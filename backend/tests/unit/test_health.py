from __future__ import annotations

from hrm.core.config import settings


async def test_health_check(async_client):
    resp = await async_client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "service": settings.APP_NAME}
