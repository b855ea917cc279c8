"""Content accessors: one status-filtered read per logical resource.

Every query constrains rows to the approved/published status in SQL, so no
unapproved record ever reaches the markup layer. Store errors propagate to the
caller unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, select

from storefront.models.blog import POST_PUBLISHED, BlogPost
from storefront.models.forum import FORUM_APPROVED, ForumReply, ForumTopic
from storefront.models.setting import SiteSetting

if TYPE_CHECKING:
    from sqlalchemy import Select

    from storefront.services.context import RenderContext

ContentRecord = Mapping[str, Any]


def _reply_count_column() -> Any:
    """Correlated count of approved replies for the enclosing topic row."""
    return (
        select(func.count(ForumReply.id))
        .where(ForumReply.topic_id == ForumTopic.id)
        .where(ForumReply.status == FORUM_APPROVED)
        .correlate(ForumTopic)
        .scalar_subquery()
        .label("reply_count")
    )


def _topic_select() -> Select[Any]:
    return select(
        ForumTopic.id,
        ForumTopic.slug,
        ForumTopic.title,
        ForumTopic.body,
        ForumTopic.author_name,
        ForumTopic.created_at,
        _reply_count_column(),
    ).where(ForumTopic.status == FORUM_APPROVED)


async def get_published_post(ctx: RenderContext, slug: str | None) -> ContentRecord | None:
    """Get a published blog post by slug, or None."""
    key = (slug or "").strip()
    if not key:
        return None
    stmt = select(
        BlogPost.slug,
        BlogPost.title,
        BlogPost.html,
        BlogPost.css,
        BlogPost.author_name,
        BlogPost.created_at,
    ).where(BlogPost.slug == key, BlogPost.status == POST_PUBLISHED)
    result = await ctx.session.execute(stmt)
    return result.mappings().first()


async def list_published_posts(ctx: RenderContext, limit: int | None = None) -> list[ContentRecord]:
    """List published blog posts, newest first."""
    stmt = (
        select(
            BlogPost.slug,
            BlogPost.title,
            BlogPost.html,
            BlogPost.author_name,
            BlogPost.created_at,
        )
        .where(BlogPost.status == POST_PUBLISHED)
        .order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
    )
    if limit is not None:
        stmt = stmt.limit(limit)
    result = await ctx.session.execute(stmt)
    return list(result.mappings().all())


async def get_approved_topic(ctx: RenderContext, slug: str | None) -> ContentRecord | None:
    """Get an approved forum topic by slug with its approved reply count, or None."""
    key = (slug or "").strip()
    if not key:
        return None
    stmt = _topic_select().where(ForumTopic.slug == key)
    result = await ctx.session.execute(stmt)
    return result.mappings().first()


async def list_approved_topics(ctx: RenderContext, limit: int | None = None) -> list[ContentRecord]:
    """List approved forum topics, newest first.

    Each record carries ``reply_count``, computed by a correlated subquery in
    the same SELECT so the listing is a single round trip.
    """
    stmt = _topic_select().order_by(ForumTopic.created_at.desc(), ForumTopic.id.desc())
    if limit is not None:
        stmt = stmt.limit(limit)
    result = await ctx.session.execute(stmt)
    return list(result.mappings().all())


async def list_approved_replies(ctx: RenderContext, topic_id: int) -> list[ContentRecord]:
    """List approved replies of a topic, oldest first."""
    stmt = (
        select(
            ForumReply.id,
            ForumReply.author_name,
            ForumReply.body,
            ForumReply.created_at,
        )
        .where(ForumReply.topic_id == topic_id, ForumReply.status == FORUM_APPROVED)
        .order_by(ForumReply.created_at.asc(), ForumReply.id.asc())
    )
    result = await ctx.session.execute(stmt)
    return list(result.mappings().all())


async def get_setting(ctx: RenderContext, key: str) -> str | None:
    """Get a raw site setting value."""
    stmt = select(SiteSetting.value).where(SiteSetting.key == key)
    result = await ctx.session.execute(stmt)
    return result.scalar_one_or_none()
