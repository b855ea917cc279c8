"""Declarative base and shared column types for all ORM models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


class Base(DeclarativeBase):
    pass


class Timestamp(TypeDecorator[Any]):
    """Creation time stored as ISO-8601 text or as integer epoch milliseconds.

    The submission handlers write ``Date.now()`` style integers; rows created
    through the ORM get UTC ISO text. Integers, including digit-only text left
    by column affinity, are returned as ``int`` for ``format_date`` to interpret.
    """

    impl = String(40)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> Any:
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc)
            return value.isoformat()
        return value

    def process_result_value(self, value: Any, dialect: Any) -> Any:
        if not isinstance(value, str):
            return value
        text = value.strip()
        if text.isdigit():
            return int(text)
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return text
