"""
Post repository for database operations.
"""

import json
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from personal_site.models import PostModel
from personal_site.models.post import PostCreate


def _to_utc(value: datetime) -> datetime:
    # SQLite drops the offset, so everything is stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class PostRepository:
    """Repository for Post CRUD operations."""

    def __init__(self, session: Session) -> None:
        """Initialize repository with a database session.

        Args:
            session: SQLAlchemy Session instance
        """
        self.session = session

    def create(self, post_data: PostCreate) -> PostModel:
        """Create a new post.

        Args:
            post_data: Post creation data

        Returns:
            Created PostModel instance
        """
        data_dict = post_data.model_dump()
        data_dict["publish_date"] = _to_utc(data_dict["publish_date"])
        data_dict["tags"] = json.dumps(data_dict["tags"], ensure_ascii=False)

        post = PostModel(**data_dict)
        self.session.add(post)
        self.session.flush()
        self.session.refresh(post)
        return post

    def upsert(self, post_data: PostCreate) -> tuple[PostModel, bool]:
        """Create a post, or replace the fields of an existing one.

        Args:
            post_data: Post data

        Returns:
            Tuple of (post, created)
        """
        existing = self.get_by_slug(post_data.collection, post_data.slug)
        if existing is None:
            return self.create(post_data), True

        existing.title = post_data.title
        existing.description = post_data.description
        existing.author = post_data.author
        existing.publish_date = _to_utc(post_data.publish_date)
        existing.tags = json.dumps(post_data.tags, ensure_ascii=False)
        self.session.flush()
        self.session.refresh(existing)
        return existing, False

    def get_by_slug(self, collection: str, slug: str) -> Optional[PostModel]:
        """Get a post by collection and slug.

        Args:
            collection: Collection name
            slug: Post slug

        Returns:
            PostModel instance or None
        """
        return (
            self.session.query(PostModel)
            .filter(PostModel.collection == collection, PostModel.slug == slug)
            .first()
        )

    def list_by_collection(self, collection: str) -> list[PostModel]:
        """List all posts of a collection in insertion order.

        Args:
            collection: Collection name

        Returns:
            List of PostModel instances
        """
        return (
            self.session.query(PostModel)
            .filter(PostModel.collection == collection)
            .order_by(PostModel.id.asc())
            .all()
        )

    def count(self, collection: Optional[str] = None) -> int:
        """Count posts.

        Args:
            collection: Filter by collection name

        Returns:
            Number of posts
        """
        query = self.session.query(func.count(PostModel.id))
        if collection is not None:
            query = query.filter(PostModel.collection == collection)
        return query.scalar() or 0

    def delete(self, post: PostModel) -> None:
        """Delete a post.

        Args:
            post: PostModel instance to delete
        """
        self.session.delete(post)
        self.session.flush()

    @staticmethod
    def parse_tags(post: PostModel) -> list[str]:
        """Decode the JSON tags column of a post."""
        if post.tags:
            try:
                return json.loads(post.tags)
            except (json.JSONDecodeError, TypeError):
                return []
        return []
