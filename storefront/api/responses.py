"""Convert render outcomes into Starlette responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.responses import Response

if TYPE_CHECKING:
    from storefront.services.render_service import RenderOutcome


def to_response(outcome: RenderOutcome, body: str | None = None) -> Response:
    """Build the HTTP response for ``outcome``, optionally with a replacement body."""
    headers = {k: v for k, v in outcome.headers.items() if k.lower() != "content-type"}
    return Response(
        content=outcome.body if body is None else body,
        status_code=outcome.status_code,
        headers=headers,
        media_type=outcome.media_type,
    )
