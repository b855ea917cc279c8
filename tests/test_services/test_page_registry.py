"""Tests for the page renderer registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from storefront.services import page_registry as pages
from storefront.services.page_registry import PageRegistry, build_page_registry
from storefront.services.render_service import RenderOutcome, render_blog_post
from tests.conftest import add_post

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from storefront.services.context import RenderContext


async def _static_page(ctx: RenderContext, slug: str | None) -> RenderOutcome:
    return RenderOutcome.document(f"page:{slug}", "no-store")


class TestPageRegistry:
    def test_standard_registry_covers_every_page(self) -> None:
        registry = build_page_registry()
        assert registry.keys() == sorted(
            [
                pages.BLOG_ARCHIVE,
                pages.BLOG_POST,
                pages.BLOG_SUBMIT,
                pages.FORUM_ARCHIVE,
                pages.FORUM_TOPIC,
            ]
        )
        assert registry.resolve(pages.BLOG_POST) is render_blog_post

    def test_duplicate_registration_rejected(self) -> None:
        registry = PageRegistry()
        registry.register("static", _static_page)
        with pytest.raises(ValueError, match="already registered"):
            registry.register("static", _static_page)

    def test_unknown_key(self) -> None:
        registry = PageRegistry()
        assert "missing" not in registry
        with pytest.raises(KeyError, match="missing"):
            registry.resolve("missing")

    @pytest.mark.asyncio
    async def test_render_passes_slug(self, render_ctx: RenderContext) -> None:
        registry = PageRegistry()
        registry.register("static", _static_page)

        outcome = await registry.render("static", render_ctx, "abc")

        assert outcome.body == "page:abc"

    @pytest.mark.asyncio
    async def test_render_through_standard_registry(
        self, db_session: AsyncSession, render_ctx: RenderContext
    ) -> None:
        await add_post(db_session, "hello")
        registry = build_page_registry()

        found = await registry.render(pages.BLOG_POST, render_ctx, "hello")
        missing = await registry.render(pages.BLOG_POST, render_ctx, "bye")

        assert found.status_code == 200
        assert missing.status_code == 404
