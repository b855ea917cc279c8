"""Document templates: wrap fragments and record fields in a full HTML page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storefront.rendering.markup import display_author, display_title
from storefront.rendering.styles import (
    ARTICLE_CSS,
    BLOG_ARCHIVE_CSS,
    FONT_LINK_BLOG,
    FONT_LINK_FORUM,
    FORM_CSS,
    FORUM_CSS,
    blog_submit_script,
    forum_archive_script,
    forum_topic_script,
)
from storefront.rendering.text import escape_html, format_date, make_excerpt

if TYPE_CHECKING:
    from storefront.services.content_service import ContentRecord

META_DESCRIPTION_LENGTH = 200


def _document(title: str, head: str, body: str) -> str:
    """Assemble a document. ``title`` must already be escaped."""
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8" />\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1" />\n'
        f"<title>{title}</title>\n"
        f"{head}\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def _style(css: str | None) -> str:
    # Closing tags inside a style block would end it early.
    return "<style>" + (css or "").replace("</", "<\\/") + "</style>"


def build_meta_tags(
    title: str,
    description: str,
    author: str | None = None,
    url: str | None = None,
) -> str:
    """Build Open Graph and Twitter Card meta tags from unescaped values."""
    t = escape_html(title)
    d = escape_html(description[:META_DESCRIPTION_LENGTH])

    tags = [
        f'<meta name="description" content="{d}" />',
        f'<meta property="og:title" content="{t}" />',
        f'<meta property="og:description" content="{d}" />',
        '<meta property="og:type" content="article" />',
        '<meta name="twitter:card" content="summary" />',
        f'<meta name="twitter:title" content="{t}" />',
        f'<meta name="twitter:description" content="{d}" />',
    ]
    if url:
        tags.append(f'<meta property="og:url" content="{escape_html(url)}" />')
    if author:
        tags.append(f'<meta name="author" content="{escape_html(author)}" />')
    return "\n".join(tags)


def blog_archive_document(items_html: str, latest_html: str) -> str:
    body = (
        '<div class="wrap">'
        '<div class="hero"><div><h1>Blog</h1>'
        '<p class="sub">Fresh thoughts, stories, and updates. Explore the latest posts.</p></div>'
        '<a href="/blog/submit" class="submit">Submit a post</a></div>'
        '<div class="layout">'
        f'<div class="list">{items_html}</div>'
        '<aside class="side"><h3>Latest posts</h3>'
        f'<div class="side-links">{latest_html}</div>'
        '<div class="cta">Want to contribute? <a href="/blog/submit">Submit your post</a></div>'
        "</aside></div></div>"
    )
    return _document("Blog", _style(BLOG_ARCHIVE_CSS) + "\n" + FONT_LINK_BLOG, body)


def blog_post_document(record: ContentRecord) -> str:
    """Single post page.

    The post's ``html`` and ``css`` come from moderated, published content and
    are embedded as authored; the title and meta fields are escaped.
    """
    title = display_title(record)
    meta = build_meta_tags(
        title=title,
        description=make_excerpt(record.get("html"), META_DESCRIPTION_LENGTH),
        author=record.get("author_name"),
    )
    head = "\n".join([meta, _style(ARTICLE_CSS), _style(record.get("css"))])
    body = (
        '<div class="wrap">'
        '<a class="back" href="/blog">&lt;- Back to Blog</a>\n'
        f"{record.get('html') or ''}\n"
        "</div>"
    )
    return _document(escape_html(title), head, body)


def blog_submit_document() -> str:
    body = (
        '<div class="wrap">'
        '<a class="back" href="/blog">&lt;- Back to Blog</a>'
        '<div class="card">'
        '<h1 style="margin:0 0 12px;font-size:24px">Submit a blog post</h1>'
        '<label for="blog-name">Name</label>'
        '<input id="blog-name" type="text" placeholder="Your name" />'
        '<label for="blog-email" style="margin-top:10px">Email</label>'
        '<input id="blog-email" type="email" placeholder="you@example.com" />'
        '<label for="blog-title" style="margin-top:10px">Title</label>'
        '<input id="blog-title" type="text" placeholder="Post title" />'
        '<label for="blog-body" style="margin-top:10px">Body</label>'
        '<textarea id="blog-body" placeholder="Write your post..."></textarea>'
        '<button class="btn" id="blog-submit" type="button" style="margin-top:12px">'
        "Submit for approval</button>"
        '<div class="note">Every submission needs admin approval. '
        "Only one pending submission is allowed per email.</div>"
        '<div class="msg" id="blog-msg"></div>'
        "</div></div>"
        f"<script>{blog_submit_script()}</script>"
    )
    return _document("Submit a Blog Post", _style(ARTICLE_CSS + FORM_CSS), body)


def forum_archive_document(items_html: str, latest_html: str) -> str:
    body = (
        '<div class="wrap">'
        '<div class="hero"><div><h1>Community Forum</h1>'
        '<p class="sub">Ask questions, share ideas, and help each other grow.</p>'
        '<div class="chip">Moderated community</div></div></div>'
        '<div class="layout"><div>'
        '<div class="search"><input id="forum-search" type="text" '
        'placeholder="Search discussions..." /></div>'
        f'<div class="list" id="forum-list">{items_html}</div>'
        '<div class="form"><h2 style="margin:0 0 12px;font-size:20px">Start a discussion</h2>'
        '<label for="forum-name">Name</label>'
        '<input id="forum-name" type="text" placeholder="Your name" />'
        '<label for="forum-email" style="margin-top:10px">Email</label>'
        '<input id="forum-email" type="email" placeholder="you@example.com" />'
        '<label for="forum-title" style="margin-top:10px">Title</label>'
        '<input id="forum-title" type="text" placeholder="Topic title" />'
        '<label for="forum-body" style="margin-top:10px">Body</label>'
        '<textarea id="forum-body" placeholder="Write your discussion..."></textarea>'
        '<button class="btn" id="forum-submit" type="button" style="margin-top:12px">'
        "Submit for approval</button>"
        '<div class="note">Every post needs admin approval. '
        "Only one pending submission is allowed per email.</div>"
        '<div class="msg" id="forum-msg"></div></div>'
        "</div>"
        '<aside class="side"><h3>Trending now</h3>'
        f'<div class="side-links">{latest_html}</div>'
        '<div class="note">Be kind - Stay on topic - Help others</div>'
        "</aside></div></div>"
        f"<script>{forum_archive_script()}</script>"
    )
    return _document("Forum", _style(FORUM_CSS) + "\n" + FONT_LINK_FORUM, body)


def forum_topic_document(record: ContentRecord, replies_html: str, latest_html: str) -> str:
    """Single topic page. The topic body is plain text and is escaped."""
    title = display_title(record)
    # Escaping first makes the excerpt treat the plain-text body literally.
    meta = build_meta_tags(
        title=title,
        description=make_excerpt(escape_html(record.get("body")), META_DESCRIPTION_LENGTH),
        author=record.get("author_name"),
    )
    body = (
        '<div class="wrap">'
        '<a class="back" href="/forum">&lt;- Back to Forum</a>'
        '<div class="layout"><div>'
        f'<div class="card"><h1>{escape_html(title)}</h1>'
        f'<div class="meta">By {escape_html(display_author(record))} - '
        f'{escape_html(format_date(record.get("created_at")))}</div>'
        f'<div class="reply-body" style="margin-top:12px">{escape_html(record.get("body"))}</div>'
        "</div>"
        '<div class="card"><h2 style="margin:0 0 12px;font-size:20px">Replies</h2>'
        f"{replies_html}</div>"
        '<div class="form"><h2 style="margin:0 0 12px;font-size:20px">Reply</h2>'
        '<label for="reply-name">Name</label>'
        '<input id="reply-name" type="text" placeholder="Your name" />'
        '<label for="reply-email" style="margin-top:10px">Email</label>'
        '<input id="reply-email" type="email" placeholder="you@example.com" />'
        '<label for="reply-body" style="margin-top:10px">Body</label>'
        '<textarea id="reply-body" placeholder="Write your reply..."></textarea>'
        '<button class="btn" id="reply-submit" type="button" style="margin-top:12px">'
        "Submit for approval</button>"
        '<div class="msg" id="reply-msg"></div></div>'
        "</div>"
        '<aside class="side"><h3>Latest discussions</h3>'
        f'<div class="side-links">{latest_html}</div>'
        '<div class="note">Share context - Be specific - Stay kind</div>'
        "</aside></div></div>"
        f"<script>{forum_topic_script(str(record.get('slug') or ''))}</script>"
    )
    head = "\n".join([meta, _style(FORUM_CSS), FONT_LINK_FORUM])
    return _document(escape_html(title), head, body)
