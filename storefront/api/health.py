"""Health check endpoint: store reachability and content schema presence."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.deps import get_session
from storefront.config import APP_VERSION
from storefront.models import Base

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    database: str
    missing_tables: list[str] = Field(default_factory=list)


def _missing_content_tables(sync_session: Session) -> list[str]:
    present = set(inspect(sync_session.connection()).get_table_names())
    return sorted(name for name in Base.metadata.tables if name not in present)


@router.get("/api/health", response_model=HealthResponse)
async def health_check(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> HealthResponse:
    """Report whether pages can be rendered.

    ``database`` is ``ok``, ``error`` when the store is unreachable, or
    ``incomplete`` when a content table the pages read from is missing.
    """
    missing: list[str] = []
    try:
        await session.execute(text("SELECT 1"))
        missing = await session.run_sync(_missing_content_tables)
    except (SQLAlchemyError, OSError):
        logger.warning("Health check database query failed", exc_info=True)
        db_status = "error"
    else:
        db_status = "incomplete" if missing else "ok"
        if missing:
            logger.warning("Content tables missing: %s", ", ".join(missing))

    return HealthResponse(
        status="ok" if db_status == "ok" else "degraded",
        version=APP_VERSION,
        database=db_status,
        missing_tables=missing,
    )
