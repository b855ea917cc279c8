"""SQLAlchemy ORM models for the storefront community pages."""

from storefront.models.base import Base
from storefront.models.blog import BlogPost
from storefront.models.forum import ForumReply, ForumTopic
from storefront.models.setting import SiteSetting

__all__ = [
    "Base",
    "BlogPost",
    "ForumReply",
    "ForumTopic",
    "SiteSetting",
]
