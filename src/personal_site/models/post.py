"""
Post data model for the database content backend.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from sqlalchemy import DateTime, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from personal_site.models.base import Base


class PostModel(Base):
    """SQLAlchemy ORM model for a blog or TIL post."""

    __tablename__ = "posts"

    __table_args__ = (
        UniqueConstraint("collection", "slug", name="uq_posts_collection_slug"),
        Index("ix_posts_collection_published", "collection", "publish_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    collection: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(String(500), nullable=False)

    # Front matter
    title: Mapped[str] = mapped_column(String(1000), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    author: Mapped[str] = mapped_column(String(500), nullable=False)
    publish_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    tags: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # JSON string of tags

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<PostModel(id={self.id}, collection='{self.collection}', slug='{self.slug}')>"


# Pydantic models for the repository


class PostCreate(BaseModel):
    """Schema for creating or replacing a post."""

    collection: str = Field(..., max_length=50, description="Collection name")
    slug: str = Field(..., min_length=1, max_length=500, description="Post slug")
    title: str = Field(..., min_length=1, max_length=1000, description="Post title")
    description: str = Field("", description="Post description")
    author: str = Field(..., max_length=500, description="Post author")
    publish_date: datetime = Field(..., description="Publication date")
    tags: list[str] = Field(default_factory=list, description="Post tags")
