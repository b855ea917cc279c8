"""Forum topic and reply models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.models.base import Base, Timestamp

FORUM_APPROVED = "approved"


class ForumTopic(Base):
    """A forum discussion. Moderation moves ``status`` from pending to approved."""

    __tablename__ = "forum_topics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    created_at: Mapped[datetime | None] = mapped_column(Timestamp, nullable=True)

    replies: Mapped[list[ForumReply]] = relationship(
        back_populates="topic", cascade="all, delete-orphan"
    )

    __table_args__ = (Index("idx_forum_topics_status_created", "status", "created_at"),)


class ForumReply(Base):
    """A reply to a forum topic, moderated independently of its topic."""

    __tablename__ = "forum_replies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    topic_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("forum_topics.id", ondelete="CASCADE"), nullable=False
    )
    author_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    created_at: Mapped[datetime | None] = mapped_column(Timestamp, nullable=True)

    topic: Mapped[ForumTopic] = relationship(back_populates="replies")

    __table_args__ = (Index("idx_forum_replies_topic_status", "topic_id", "status"),)
