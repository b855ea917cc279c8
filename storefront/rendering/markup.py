"""Markup assembly: ordered content records -> HTML fragments.

All functions here are pure. Every text field taken from a record is passed
through ``escape_html`` before interpolation, and slugs only ever appear
percent-encoded inside hrefs. Records are read with ``.get`` so missing
optional columns render as defaults instead of failing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storefront.rendering.text import escape_html, format_date, make_excerpt, slug_href

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from storefront.services.content_service import ContentRecord

LATEST_LIMIT = 6
POST_EXCERPT_LENGTH = 240
TOPIC_EXCERPT_LENGTH = 220

EMPTY_POSTS = '<div class="empty">No posts yet.</div>'
EMPTY_TOPICS = '<div class="empty">No topics yet.</div>'
EMPTY_REPLIES = '<div class="empty">No replies yet. Be the first to reply.</div>'


def display_title(record: ContentRecord) -> str:
    """Record title, falling back to its slug."""
    return str(record.get("title") or record.get("slug") or "")


def display_author(record: ContentRecord) -> str:
    return str(record.get("author_name") or "Anonymous")


def reply_count(record: ContentRecord) -> int:
    try:
        return max(0, int(record.get("reply_count") or 0))
    except (TypeError, ValueError):
        return 0


def _join_or_empty(parts: Iterable[str], empty: str) -> str:
    return "".join(parts) or empty


def _side_link(prefix: str, record: ContentRecord) -> str:
    return (
        f'<a class="side-link" href="{escape_html(slug_href(prefix, record.get("slug")))}">'
        f'<div class="side-title">{escape_html(display_title(record))}</div>'
        f'<div class="side-date">{escape_html(format_date(record.get("created_at")))}</div>'
        "</a>"
    )


def build_post_items(records: Sequence[ContentRecord]) -> str:
    """Blog archive cards, one per post, in the order given."""
    items = (
        f'<a class="post" href="{escape_html(slug_href("/blog", p.get("slug")))}">'
        f'<div class="title">{escape_html(display_title(p))}</div>'
        f'<div class="meta">{escape_html(format_date(p.get("created_at")))}</div>'
        f'<div class="desc">{escape_html(make_excerpt(p.get("html"), POST_EXCERPT_LENGTH))}</div>'
        '<div class="read">Read post</div>'
        "</a>"
        for p in records
    )
    return _join_or_empty(items, EMPTY_POSTS)


def build_post_latest(records: Sequence[ContentRecord], limit: int = LATEST_LIMIT) -> str:
    """Sidebar links for the first ``limit`` posts."""
    return _join_or_empty((_side_link("/blog", p) for p in records[:limit]), EMPTY_POSTS)


def build_topic_items(records: Sequence[ContentRecord]) -> str:
    """Forum archive cards annotated with reply counts, in the order given."""
    items = []
    for t in records:
        # Topic bodies are plain text; escaping first keeps markup-like text in the excerpt.
        excerpt = make_excerpt(escape_html(t.get("body")), TOPIC_EXCERPT_LENGTH)
        search = escape_html(f"{t.get('title') or ''} {t.get('body') or ''}")
        items.append(
            f'<a class="topic-card" href="{escape_html(slug_href("/forum", t.get("slug")))}"'
            f' data-search="{search}">'
            '<div class="topic-head">'
            f'<div class="title">{escape_html(display_title(t))}</div>'
            f'<div class="pill">{reply_count(t)} replies</div>'
            "</div>"
            f'<div class="meta">By {escape_html(display_author(t))} - '
            f'{escape_html(format_date(t.get("created_at")))}</div>'
            f'<div class="desc">{escape_html(excerpt)}</div>'
            '<div class="read-more">Read more -&gt;</div>'
            "</a>"
        )
    return _join_or_empty(items, EMPTY_TOPICS)


def build_topic_latest(records: Sequence[ContentRecord], limit: int = LATEST_LIMIT) -> str:
    """Sidebar links for the first ``limit`` topics."""
    return _join_or_empty((_side_link("/forum", t) for t in records[:limit]), EMPTY_TOPICS)


def build_reply_items(records: Sequence[ContentRecord]) -> str:
    """Approved replies of a topic. Reply bodies are plain text."""
    items = (
        '<div class="reply">'
        f'<div class="meta">{escape_html(display_author(r))} - '
        f'{escape_html(format_date(r.get("created_at")))}</div>'
        f'<div class="reply-body">{escape_html(r.get("body"))}</div>'
        "</div>"
        for r in records
    )
    return _join_or_empty(items, EMPTY_REPLIES)
