"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from portfolio.main import app


@pytest.mark.asyncio
async def test_health_check_returns_ok():
    """Health endpoint answers without touching the store."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
