"""Text helpers shared by the markup assembler and the template wrapper."""

from __future__ import annotations

import html
import re
from datetime import datetime
from html.parser import HTMLParser
from urllib.parse import quote

import pendulum

DATE_FORMAT = "MMM D, YYYY"
_WHITESPACE_RE = re.compile(r"\s+")
_SKIPPED_TAGS: frozenset[str] = frozenset({"script", "style", "template"})
# Integer timestamps above this are milliseconds since the epoch.
_MILLISECOND_THRESHOLD = 100_000_000_000


def escape_html(value: object) -> str:
    """Escape a value for interpolation into HTML text or a quoted attribute.

    ``None`` becomes the empty string.
    """
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def slug_href(prefix: str, slug: object) -> str:
    """Build a link to ``{prefix}/{slug}`` with the slug percent-encoded."""
    return f"{prefix}/{quote(str(slug or ''), safe='')}"


class _TextExtractor(HTMLParser):
    """Collect the text content of an HTML fragment."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _SKIPPED_TAGS:
            self._skip_depth += 1
        else:
            self.parts.append(" ")

    def handle_endtag(self, tag: str) -> None:
        if tag in _SKIPPED_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
        else:
            self.parts.append(" ")

    def handle_data(self, data: str) -> None:
        if not self._skip_depth:
            self.parts.append(data)


def strip_tags(fragment: str | None) -> str:
    """Return the whitespace-normalized text of an HTML fragment."""
    if not fragment:
        return ""
    parser = _TextExtractor()
    parser.feed(fragment)
    parser.close()
    return _WHITESPACE_RE.sub(" ", "".join(parser.parts)).strip()


def make_excerpt(fragment: str | None, max_length: int) -> str:
    """Plain-text excerpt of at most ``max_length`` characters.

    Truncated excerpts end with ``...`` and are cut on a word boundary when
    one exists in the second half of the allowed length.
    """
    text = strip_tags(fragment)
    if len(text) <= max_length:
        return text
    cut = text[: max(0, max_length - 3)]
    boundary = cut.rfind(" ")
    if boundary > len(cut) // 2:
        cut = cut[:boundary]
    return cut.rstrip() + "..."


def format_date(value: object) -> str:
    """Format a stored timestamp for display, e.g. ``Jan 5, 2026``.

    Accepts datetimes, epoch seconds or milliseconds, and date strings. Missing
    or unparseable values format as the empty string.
    """
    if value is None or value == "":
        return ""
    try:
        if isinstance(value, datetime):
            moment = pendulum.instance(value)
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            seconds = value / 1000 if value > _MILLISECOND_THRESHOLD else value
            moment = pendulum.from_timestamp(seconds)
        elif isinstance(value, str):
            parsed = pendulum.parse(value.strip(), strict=False)
            if isinstance(parsed, pendulum.DateTime):
                moment = parsed
            elif isinstance(parsed, pendulum.Date):
                return parsed.format(DATE_FORMAT)
            else:
                return ""
        else:
            return ""
    except (ValueError, OverflowError, OSError):
        # pendulum's ParserError subclasses ValueError
        return ""
    return moment.format(DATE_FORMAT)
