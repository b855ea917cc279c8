"""Tests for document templates."""

from __future__ import annotations

from storefront.rendering.templates import (
    blog_archive_document,
    blog_post_document,
    blog_submit_document,
    build_meta_tags,
    forum_archive_document,
    forum_topic_document,
)


class TestDocumentShell:
    def test_archive_documents_are_complete_pages(self) -> None:
        for page in (
            blog_archive_document("<a>items</a>", "<a>latest</a>"),
            forum_archive_document("<a>items</a>", "<a>latest</a>"),
            blog_submit_document(),
        ):
            assert page.startswith("<!doctype html>")
            assert "<head>" in page
            assert "</body>" in page
            assert page.rstrip().endswith("</html>")

    def test_archive_embeds_fragments(self) -> None:
        page = blog_archive_document("ITEMS-FRAGMENT", "LATEST-FRAGMENT")
        assert '<div class="list">ITEMS-FRAGMENT</div>' in page
        assert '<div class="side-links">LATEST-FRAGMENT</div>' in page
        assert "<title>Blog</title>" in page

    def test_forum_archive_has_search_box(self) -> None:
        page = forum_archive_document("", "")
        assert 'id="forum-search"' in page
        assert "<title>Forum</title>" in page


class TestBlogPostDocument:
    def test_embeds_body_and_back_link(self) -> None:
        page = blog_post_document({"slug": "s", "title": "Hello", "html": "<p>Post body</p>"})
        assert "<title>Hello</title>" in page
        assert "<p>Post body</p>" in page
        assert 'href="/blog"' in page

    def test_escapes_title(self) -> None:
        page = blog_post_document({"slug": "s", "title": "<script>x</script>", "html": ""})
        assert "<title>&lt;script&gt;x&lt;/script&gt;</title>" in page
        assert "<script>" not in page

    def test_tolerates_missing_optional_fields(self) -> None:
        page = blog_post_document({"slug": "only-slug"})
        assert "<title>only-slug</title>" in page
        assert "<style></style>" in page

    def test_css_override_in_own_style_block(self) -> None:
        page = blog_post_document({"slug": "s", "title": "T", "css": "h1{color:red}"})
        assert "<style>h1{color:red}</style>" in page

    def test_css_cannot_close_style_block(self) -> None:
        page = blog_post_document({"slug": "s", "title": "T", "css": "</style><script>x</script>"})
        assert "</style><script>" not in page

    def test_meta_tags_describe_post(self) -> None:
        page = blog_post_document(
            {"slug": "s", "title": "Launch", "html": "<p>We launched!</p>", "author_name": "Kim"}
        )
        assert '<meta property="og:title" content="Launch" />' in page
        assert '<meta property="og:description" content="We launched!" />' in page
        assert '<meta name="author" content="Kim" />' in page


class TestBuildMetaTags:
    def test_escapes_values(self) -> None:
        tags = build_meta_tags(title='"quoted"', description="<b>", author="<a>")
        assert 'content="&quot;quoted&quot;"' in tags
        assert "<b>" not in tags
        assert "<a>" not in tags

    def test_description_truncated(self) -> None:
        tags = build_meta_tags(title="t", description="x" * 500)
        assert f'content="{"x" * 200}"' in tags
        assert "x" * 201 not in tags

    def test_optional_url_and_author(self) -> None:
        tags = build_meta_tags(title="t", description="d")
        assert "og:url" not in tags
        assert 'name="author"' not in tags
        tags = build_meta_tags(title="t", description="d", url="https://x.test/blog/t")
        assert '<meta property="og:url" content="https://x.test/blog/t" />' in tags


class TestForumTopicDocument:
    def test_renders_topic_and_fragments(self) -> None:
        page = forum_topic_document(
            {"slug": "q", "title": "Question", "body": "Details", "author_name": "Lee"},
            "REPLIES",
            "LATEST",
        )
        assert "<title>Question</title>" in page
        assert "<h1>Question</h1>" in page
        assert "By Lee" in page
        assert "REPLIES" in page
        assert "LATEST" in page
        assert 'href="/forum"' in page

    def test_slug_cannot_break_out_of_script(self) -> None:
        page = forum_topic_document({"slug": "</script><b>x", "title": "T"}, "", "")
        assert "</script><b>" not in page
        assert "\\u003c/script\\u003e\\u003cb\\u003ex" in page
