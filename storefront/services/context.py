"""Per-request render context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


@dataclass(frozen=True)
class RenderContext:
    """Everything a page renderer needs from the outside world for one request.

    Built by the HTTP boundary for each request and passed explicitly to the
    accessor and renderer functions; nothing in the pipeline reaches for
    module-level state.
    """

    session: AsyncSession
    latest_limit: int = 6
