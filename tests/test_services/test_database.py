"""Tests for database engine, session management and schema."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import inspect, text

from storefront.database import create_engine
from storefront.models.base import Base
from tests.conftest import add_topic

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from storefront.config import Settings


class TestDatabase:
    @pytest.mark.asyncio
    async def test_engine_connects(self, db_engine) -> None:  # type: ignore[no-untyped-def]
        async with db_engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            assert result.scalar() == 1

    @pytest.mark.asyncio
    async def test_session_works(self, db_session: AsyncSession) -> None:
        result = await db_session.execute(text("SELECT 42"))
        assert result.scalar() == 42

    @pytest.mark.asyncio
    async def test_schema_tables(self, db_engine) -> None:  # type: ignore[no-untyped-def]
        async with db_engine.connect() as conn:
            tables = await conn.run_sync(lambda sync: inspect(sync).get_table_names())
        assert {"blog_posts", "forum_topics", "forum_replies", "site_settings"} <= set(tables)

    @pytest.mark.asyncio
    async def test_create_engine_session_factory(self, test_settings: Settings) -> None:
        engine, session_factory = create_engine(test_settings)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            async with session_factory() as session:
                result = await session.execute(text("SELECT count(*) FROM blog_posts"))
                assert result.scalar() == 0
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_sqlite_foreign_keys_enabled(self, test_settings: Settings) -> None:
        engine, _ = create_engine(test_settings)
        try:
            async with engine.connect() as conn:
                result = await conn.execute(text("PRAGMA foreign_keys"))
                assert result.scalar() == 1
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_deleting_topic_cascades_to_replies(self, test_settings: Settings) -> None:
        engine, session_factory = create_engine(test_settings)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            async with session_factory() as session:
                await add_topic(session, "doomed", replies=["approved", "pending"])
                await add_topic(session, "kept", replies=["approved"])

                await session.execute(text("DELETE FROM forum_topics WHERE slug = 'doomed'"))
                await session.commit()

                result = await session.execute(text("SELECT count(*) FROM forum_replies"))
                assert result.scalar() == 1
        finally:
            await engine.dispose()
