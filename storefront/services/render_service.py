"""Page renderers: fetch content, assemble markup, wrap it, describe the response.

Each renderer resolves to exactly one terminal ``RenderOutcome``: either a
document to respond with or a not-found result. Store errors and template
errors are not caught here.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from storefront.rendering import markup, templates
from storefront.services import content_service

if TYPE_CHECKING:
    from storefront.services.context import RenderContext

logger = logging.getLogger(__name__)

HTML_MEDIA_TYPE = "text/html; charset=utf-8"
TEXT_MEDIA_TYPE = "text/plain; charset=utf-8"

# Published slugs never change content, so item pages may be cached for a year.
IMMUTABLE_CACHE_CONTROL = "public, max-age=31536000, immutable"
# Listings gain members as moderation approves new content.
LISTING_CACHE_CONTROL = "public, max-age=300"

NOT_FOUND_BODY = "Not found"


class RenderState(enum.Enum):
    RESPONDING = "responding"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class RenderOutcome:
    """Terminal result of rendering one page."""

    state: RenderState
    status_code: int
    body: str
    media_type: str
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_document(self) -> bool:
        return self.state is RenderState.RESPONDING

    @classmethod
    def document(cls, body: str, cache_control: str) -> RenderOutcome:
        return cls(
            state=RenderState.RESPONDING,
            status_code=200,
            body=body,
            media_type=HTML_MEDIA_TYPE,
            headers={"Content-Type": HTML_MEDIA_TYPE, "Cache-Control": cache_control},
        )

    @classmethod
    def not_found(cls) -> RenderOutcome:
        return cls(
            state=RenderState.NOT_FOUND,
            status_code=404,
            body=NOT_FOUND_BODY,
            media_type=TEXT_MEDIA_TYPE,
            headers={"Content-Type": TEXT_MEDIA_TYPE},
        )


async def render_blog_archive(ctx: RenderContext, slug: str | None = None) -> RenderOutcome:
    """Blog listing with a latest-posts sidebar."""
    posts = await content_service.list_published_posts(ctx)
    page = templates.blog_archive_document(
        markup.build_post_items(posts),
        markup.build_post_latest(posts, limit=ctx.latest_limit),
    )
    return RenderOutcome.document(page, LISTING_CACHE_CONTROL)


async def render_blog_submit(ctx: RenderContext, slug: str | None = None) -> RenderOutcome:
    """Static post submission form."""
    return RenderOutcome.document(templates.blog_submit_document(), LISTING_CACHE_CONTROL)


async def render_blog_post(ctx: RenderContext, slug: str | None) -> RenderOutcome:
    """Single published blog post addressed by its slug."""
    post = await content_service.get_published_post(ctx, slug)
    if post is None:
        logger.debug("No published blog post for slug %r", slug)
        return RenderOutcome.not_found()
    return RenderOutcome.document(templates.blog_post_document(post), IMMUTABLE_CACHE_CONTROL)


async def render_forum_archive(ctx: RenderContext, slug: str | None = None) -> RenderOutcome:
    """Forum listing; each topic shows its approved reply count."""
    topics = await content_service.list_approved_topics(ctx)
    page = templates.forum_archive_document(
        markup.build_topic_items(topics),
        markup.build_topic_latest(topics, limit=ctx.latest_limit),
    )
    return RenderOutcome.document(page, LISTING_CACHE_CONTROL)


async def render_forum_topic(ctx: RenderContext, slug: str | None) -> RenderOutcome:
    """Single forum topic with its approved replies.

    Replies keep arriving after publication, so the page uses the listing
    cache policy rather than the immutable one.
    """
    topic = await content_service.get_approved_topic(ctx, slug)
    if topic is None:
        logger.debug("No approved forum topic for slug %r", slug)
        return RenderOutcome.not_found()
    replies = await content_service.list_approved_replies(ctx, topic["id"])
    latest = await content_service.list_approved_topics(ctx, limit=ctx.latest_limit)
    page = templates.forum_topic_document(
        topic,
        markup.build_reply_items(replies),
        markup.build_topic_latest(latest, limit=ctx.latest_limit),
    )
    return RenderOutcome.document(page, LISTING_CACHE_CONTROL)
