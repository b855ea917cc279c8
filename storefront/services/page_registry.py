"""Registration table mapping page route keys to renderers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storefront.services import render_service

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from storefront.services.context import RenderContext
    from storefront.services.render_service import RenderOutcome

    PageRenderer = Callable[[RenderContext, str | None], Awaitable[RenderOutcome]]

logger = logging.getLogger(__name__)

BLOG_ARCHIVE = "blog.archive"
BLOG_SUBMIT = "blog.submit"
BLOG_POST = "blog.post"
FORUM_ARCHIVE = "forum.archive"
FORUM_TOPIC = "forum.topic"


class PageRegistry:
    """Explicit route key -> renderer table built once at startup."""

    def __init__(self) -> None:
        self._renderers: dict[str, PageRenderer] = {}

    def register(self, key: str, renderer: PageRenderer) -> None:
        if key in self._renderers:
            raise ValueError(f"Page renderer already registered for {key!r}")
        self._renderers[key] = renderer

    def resolve(self, key: str) -> PageRenderer:
        try:
            return self._renderers[key]
        except KeyError:
            raise KeyError(f"No page renderer registered for {key!r}") from None

    def keys(self) -> list[str]:
        return sorted(self._renderers)

    def __contains__(self, key: object) -> bool:
        return key in self._renderers

    async def render(self, key: str, ctx: RenderContext, slug: str | None = None) -> RenderOutcome:
        """Look up the renderer for ``key`` and run it."""
        renderer = self.resolve(key)
        return await renderer(ctx, slug)


def build_page_registry() -> PageRegistry:
    """Build the registry of all public community pages."""
    registry = PageRegistry()
    registry.register(BLOG_ARCHIVE, render_service.render_blog_archive)
    registry.register(BLOG_SUBMIT, render_service.render_blog_submit)
    registry.register(BLOG_POST, render_service.render_blog_post)
    registry.register(FORUM_ARCHIVE, render_service.render_forum_archive)
    registry.register(FORUM_TOPIC, render_service.render_forum_topic)
    logger.debug("Registered page renderers: %s", ", ".join(registry.keys()))
    return registry
