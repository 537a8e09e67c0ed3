"""Data models for the personal site."""

from personal_site.models.base import Base
from personal_site.models.content import (
    COLLECTIONS,
    BlogRecord,
    CollectionDefinition,
    ContentRecord,
    PostData,
    TilRecord,
    ValidationResult,
    get_collection_definition,
    validate_record,
    validate_record_or_raise,
)
from personal_site.models.feed import FeedDocument, FeedItem, SiteMetadata
from personal_site.models.post import PostCreate, PostModel

__all__ = [
    "Base",
    "COLLECTIONS",
    "BlogRecord",
    "CollectionDefinition",
    "ContentRecord",
    "PostData",
    "TilRecord",
    "ValidationResult",
    "get_collection_definition",
    "validate_record",
    "validate_record_or_raise",
    "FeedDocument",
    "FeedItem",
    "SiteMetadata",
    "PostCreate",
    "PostModel",
]
