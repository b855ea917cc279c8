"""Server-rendered community pages: blog and forum."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from starlette.responses import Response

from storefront.api.deps import get_page_registry, get_render_context, get_settings
from storefront.api.responses import to_response
from storefront.config import Settings
from storefront.services import page_registry as pages
from storefront.services.analytics_service import get_gtm_id, inject_tag_manager
from storefront.services.context import RenderContext
from storefront.services.page_registry import PageRegistry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

_METHODS = ["GET", "HEAD"]

ContextDep = Annotated[RenderContext, Depends(get_render_context)]
RegistryDep = Annotated[PageRegistry, Depends(get_page_registry)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


async def _render(
    key: str,
    ctx: RenderContext,
    registry: PageRegistry,
    settings: Settings,
    slug: str | None = None,
) -> Response:
    outcome = await registry.render(key, ctx, slug)
    if not outcome.is_document or not settings.tag_manager_enabled:
        return to_response(outcome)
    gtm_id = await get_gtm_id(ctx)
    return to_response(outcome, body=inject_tag_manager(outcome.body, gtm_id))


@router.api_route("/blog", methods=_METHODS, include_in_schema=False)
@router.api_route("/blog/", methods=_METHODS, include_in_schema=False)
async def blog_archive(ctx: ContextDep, registry: RegistryDep, settings: SettingsDep) -> Response:
    """Blog archive page."""
    return await _render(pages.BLOG_ARCHIVE, ctx, registry, settings)


@router.api_route("/blog/submit", methods=_METHODS, include_in_schema=False)
@router.api_route("/blog/submit/", methods=_METHODS, include_in_schema=False)
async def blog_submit(ctx: ContextDep, registry: RegistryDep, settings: SettingsDep) -> Response:
    """Blog post submission form."""
    return await _render(pages.BLOG_SUBMIT, ctx, registry, settings)


@router.api_route("/blog/{slug}", methods=_METHODS, include_in_schema=False)
@router.api_route("/blog/{slug}/", methods=_METHODS, include_in_schema=False)
async def blog_post(
    slug: str, ctx: ContextDep, registry: RegistryDep, settings: SettingsDep
) -> Response:
    """Single published blog post."""
    return await _render(pages.BLOG_POST, ctx, registry, settings, slug)


@router.api_route("/forum", methods=_METHODS, include_in_schema=False)
@router.api_route("/forum/", methods=_METHODS, include_in_schema=False)
async def forum_archive(ctx: ContextDep, registry: RegistryDep, settings: SettingsDep) -> Response:
    """Forum archive page."""
    return await _render(pages.FORUM_ARCHIVE, ctx, registry, settings)


@router.api_route("/forum/{slug}", methods=_METHODS, include_in_schema=False)
@router.api_route("/forum/{slug}/", methods=_METHODS, include_in_schema=False)
async def forum_topic(
    slug: str, ctx: ContextDep, registry: RegistryDep, settings: SettingsDep
) -> Response:
    """Single approved forum topic."""
    return await _render(pages.FORUM_TOPIC, ctx, registry, settings, slug)
