"""
Feed data models: channel metadata, feed items and the rendered document.
"""

from dataclasses import dataclass, field
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

RSS_CONTENT_TYPE = "application/rss+xml; charset=utf-8"


class SiteMetadata(BaseModel):
    """Channel-level metadata of the syndication feed."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Channel title")
    description: str = Field(..., min_length=1, description="Channel description")
    site: str = Field(..., description="Absolute base URL used to resolve item links")

    @field_validator("site")
    @classmethod
    def validate_site(cls, v: str) -> str:
        """Validate the site URL is absolute."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Site URL must be absolute, got {v!r}")
        return v


@dataclass(frozen=True)
class FeedItem:
    """Projection of a content record used for syndication."""

    title: str
    description: str
    publish_date: datetime
    link: str


@dataclass
class FeedDocument:
    """A rendered feed, ready to be returned as an HTTP response body."""

    body: bytes
    items: list[FeedItem] = field(default_factory=list)
    content_type: str = RSS_CONTENT_TYPE

    @property
    def item_count(self) -> int:
        return len(self.items)

    def text(self) -> str:
        """Decode the document body."""
        return self.body.decode("utf-8")
