"""Shared API dependencies: settings, DB session, render context, page registry."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.config import Settings
from storefront.services.context import RenderContext
from storefront.services.page_registry import PageRegistry


def get_settings(request: Request) -> Settings:
    """Get application settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


def get_page_registry(request: Request) -> PageRegistry:
    """Get the page registry built at startup."""
    registry: PageRegistry = request.app.state.page_registry
    return registry


async def get_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """Get a database session."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


def get_render_context(
    session: Annotated[AsyncSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RenderContext:
    """Build the explicit per-request context handed to page renderers."""
    return RenderContext(session=session, latest_limit=settings.latest_items_limit)
