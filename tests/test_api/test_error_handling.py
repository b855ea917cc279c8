"""Tests for store failures surfacing from the page pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError, ProgrammingError

from tests.conftest import create_test_client

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from httpx import AsyncClient

    from storefront.config import Settings


@pytest.fixture
async def client(test_settings: Settings) -> AsyncGenerator[AsyncClient]:
    async with create_test_client(test_settings) as ac:
        yield ac


def _operational_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("database is locked"))


class TestStoreFailures:
    @pytest.mark.asyncio
    async def test_operational_error_returns_503(self, client: AsyncClient) -> None:
        with patch(
            "storefront.services.content_service.list_published_posts",
            new_callable=AsyncMock,
            side_effect=_operational_error(),
        ):
            resp = await client.get("/blog")

        assert resp.status_code == 503
        assert resp.json() == {"detail": "Database temporarily unavailable"}
        assert "cache-control" not in resp.headers

    @pytest.mark.asyncio
    async def test_other_database_error_returns_500(self, client: AsyncClient) -> None:
        with patch(
            "storefront.services.content_service.get_approved_topic",
            new_callable=AsyncMock,
            side_effect=ProgrammingError("SELECT", {}, Exception("no such column")),
        ):
            resp = await client.get("/forum/anything")

        assert resp.status_code == 500
        assert resp.json() == {"detail": "Internal server error"}

    @pytest.mark.asyncio
    async def test_failure_in_secondary_query_is_not_masked(self, client: AsyncClient) -> None:
        with patch(
            "storefront.services.content_service.list_approved_replies",
            new_callable=AsyncMock,
            side_effect=_operational_error(),
        ), patch(
            "storefront.services.content_service.get_approved_topic",
            new_callable=AsyncMock,
            return_value={"id": 1, "slug": "t", "title": "T"},
        ):
            resp = await client.get("/forum/t")

        assert resp.status_code == 503

    @pytest.mark.asyncio
    async def test_analytics_lookup_failure_propagates(self, client: AsyncClient) -> None:
        with patch(
            "storefront.services.analytics_service.get_setting",
            new_callable=AsyncMock,
            side_effect=_operational_error(),
        ):
            resp = await client.get("/blog/submit")

        assert resp.status_code == 503

    @pytest.mark.asyncio
    async def test_health_reports_degraded(self, client: AsyncClient) -> None:
        with patch(
            "sqlalchemy.ext.asyncio.AsyncSession.execute",
            new_callable=AsyncMock,
            side_effect=_operational_error(),
        ):
            resp = await client.get("/api/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "degraded"
        assert resp.json()["database"] == "error"
