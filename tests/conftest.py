"""Shared test fixtures for the storefront page server."""

from __future__ import annotations

import json
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from storefront.config import Settings
from storefront.main import create_app
from storefront.models import BlogPost, ForumReply, ForumTopic, SiteSetting
from storefront.models.base import Base
from storefront.services.context import RenderContext

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path

BASE_TIME = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)


def at(days: int) -> datetime:
    """A fixed timestamp ``days`` after the base time."""
    return BASE_TIME + timedelta(days=days)


@asynccontextmanager
async def create_test_client(settings: Settings) -> AsyncGenerator[AsyncClient]:
    """Create an HTTP test client with a fully initialized app.

    Manually performs the work of the application lifespan (engine, schema)
    because ASGITransport does not trigger it.
    """
    from storefront.database import create_engine as create_db_engine

    app = create_app(settings)
    settings.validate_runtime_security()

    engine, session_factory = create_db_engine(settings)
    app.state.engine = engine
    app.state.session_factory = session_factory

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    await engine.dispose()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Create test settings with a temporary database."""
    db_path = tmp_path / "test.db"
    return Settings(
        _env_file=None,
        debug=True,
        database_url=f"sqlite+aiosqlite:///{db_path}",
    )


@pytest.fixture
async def db_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with the schema in place."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(
    db_engine: AsyncEngine,
) -> AsyncGenerator[AsyncSession]:
    """Create a test database session."""
    session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session


@pytest.fixture
def render_ctx(db_session: AsyncSession) -> RenderContext:
    return RenderContext(session=db_session)


async def add_post(
    session: AsyncSession,
    slug: str,
    *,
    title: str | None = None,
    html: str | None = "<p>Body</p>",
    css: str | None = None,
    status: str = "published",
    created_at: datetime | None = None,
    author_name: str | None = None,
) -> BlogPost:
    post = BlogPost(
        slug=slug,
        title=title if title is not None else slug.replace("-", " ").title(),
        html=html,
        css=css,
        status=status,
        created_at=created_at or BASE_TIME,
        author_name=author_name,
    )
    session.add(post)
    await session.commit()
    return post


async def add_topic(
    session: AsyncSession,
    slug: str,
    *,
    title: str | None = None,
    body: str = "Topic body",
    status: str = "approved",
    created_at: datetime | None = None,
    author_name: str | None = "Sam",
    replies: list[str] | None = None,
) -> ForumTopic:
    """Add a topic. ``replies`` lists reply statuses, e.g. ``["approved", "pending"]``."""
    topic = ForumTopic(
        slug=slug,
        title=title if title is not None else slug.replace("-", " ").title(),
        body=body,
        status=status,
        created_at=created_at or BASE_TIME,
        author_name=author_name,
    )
    session.add(topic)
    await session.flush()
    for index, reply_status in enumerate(replies or []):
        session.add(
            ForumReply(
                topic_id=topic.id,
                author_name=f"Replier {index}",
                body=f"Reply {index} ({reply_status})",
                status=reply_status,
                created_at=(created_at or BASE_TIME) + timedelta(hours=index + 1),
            )
        )
    await session.commit()
    return topic


async def set_gtm_id(session: AsyncSession, gtm_id: str) -> None:
    session.add(SiteSetting(key="analytics", value=json.dumps({"gtm_id": gtm_id})))
    await session.commit()
