"""Google Tag Manager container lookup and snippet injection."""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING

from storefront.services.content_service import get_setting

if TYPE_CHECKING:
    from storefront.services.context import RenderContext

logger = logging.getLogger(__name__)

ANALYTICS_SETTING_KEY = "analytics"
_GTM_ID_RE = re.compile(r"^GTM-[A-Z0-9]+$", re.IGNORECASE)
_GTM_SCRIPT_MARKER = "googletagmanager.com/gtm.js"


def parse_gtm_id(raw: str | None) -> str:
    """Extract a valid container id from the analytics setting JSON, else ``""``."""
    if not raw:
        return ""
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Ignoring analytics setting that is not valid JSON")
        return ""
    if not isinstance(value, dict):
        return ""
    gtm_id = str(value.get("gtm_id") or "").strip()
    return gtm_id if _GTM_ID_RE.match(gtm_id) else ""


async def get_gtm_id(ctx: RenderContext) -> str:
    """Read the configured tag manager container id for this request."""
    return parse_gtm_id(await get_setting(ctx, ANALYTICS_SETTING_KEY))


def _head_snippet(gtm_id: str) -> str:
    return (
        "\n<!-- Google Tag Manager -->\n"
        "<script>(function(w,d,s,l,i){w[l]=w[l]||[];w[l].push({'gtm.start':"
        "new Date().getTime(),event:'gtm.js'});var f=d.getElementsByTagName(s)[0],"
        "j=d.createElement(s),dl=l!='dataLayer'?'&l='+l:'';j.async=true;j.src="
        "'https://www.googletagmanager.com/gtm.js?id='+i+dl;f.parentNode.insertBefore(j,f);"
        f"}})(window,document,'script','dataLayer','{gtm_id}');</script>\n"
        "<!-- End Google Tag Manager -->\n"
    )


def _body_snippet(gtm_id: str) -> str:
    return (
        "\n<!-- Google Tag Manager (noscript) -->\n"
        f'<noscript><iframe src="https://www.googletagmanager.com/ns.html?id={gtm_id}" '
        'height="0" width="0" style="display:none;visibility:hidden"></iframe></noscript>\n'
        "<!-- End Google Tag Manager (noscript) -->\n"
    )


def inject_tag_manager(document: str, gtm_id: str) -> str:
    """Insert the tag manager snippets before ``</head>`` and ``</body>``.

    Documents that already load the container script are returned unchanged,
    as are all documents when ``gtm_id`` is not a valid container id.
    """
    if not gtm_id or not _GTM_ID_RE.match(gtm_id):
        return document
    if _GTM_SCRIPT_MARKER in document:
        return document
    head, body = _head_snippet(gtm_id), _body_snippet(gtm_id)
    if "</head>" in document:
        document = document.replace("</head>", head + "</head>", 1)
    else:
        document = head + document
    # Authored post bodies may contain the closing tag text; the real one is last.
    end = document.rfind("</body>")
    if end >= 0:
        document = document[:end] + body + document[end:]
    else:
        document = document + body
    return document
