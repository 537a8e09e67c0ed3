"""Shared fixtures for personal site tests."""

from datetime import datetime, timezone

import pytest

from personal_site.errors import CollectionUnavailable
from personal_site.models import ContentRecord, SiteMetadata, validate_record_or_raise
from personal_site.storage.content_store import ContentStore


class MemoryContentStore(ContentStore):
    """Content store backed by plain lists, optionally failing some collections."""

    def __init__(self, collections: dict, failing: tuple = ()):
        self.collections = collections
        self.failing = set(failing)
        self.calls = []

    def get_collection(self, name: str) -> list[ContentRecord]:
        self.calls.append(name)
        if name in self.failing:
            raise CollectionUnavailable(name, "store offline")
        return list(self.collections.get(name, []))


def make_record(
    collection: str,
    slug: str,
    publish_date,
    title: str = None,
    description: str = "",
    author: str = "Md Sohail",
    tags: list = None,
) -> ContentRecord:
    """Build a validated record for tests."""
    if isinstance(publish_date, str):
        publish_date = datetime.fromisoformat(publish_date).replace(tzinfo=timezone.utc)
    return validate_record_or_raise(
        collection,
        slug,
        {
            "title": title or slug.upper(),
            "description": description,
            "author": author,
            "publishDate": publish_date,
            "tags": tags or [],
        },
    )


@pytest.fixture
def record_factory():
    """Factory for validated content records."""
    return make_record


@pytest.fixture
def site() -> SiteMetadata:
    """Channel metadata used by feed tests."""
    return SiteMetadata(
        title="Md Sohail | Blog & TIL",
        description="Blog and TIL posts.",
        site="https://mdsohail.dev",
    )


@pytest.fixture
def memory_store_class():
    """The in-memory ContentStore implementation."""
    return MemoryContentStore


@pytest.fixture
def content_dir(tmp_path):
    """A content directory with one blog post and one TIL entry."""
    blog = tmp_path / "blog"
    til = tmp_path / "til"
    blog.mkdir()
    til.mkdir()

    (blog / "a.md").write_text(
        "---\n"
        "title: A\n"
        "description: First post\n"
        "author: Md Sohail\n"
        "publishDate: 2024-01-10\n"
        "tags: [intro]\n"
        "---\n"
        "Body of A.\n",
        encoding="utf-8",
    )
    (til / "b.md").write_text(
        "---\n"
        "title: B\n"
        "description: Quick tip\n"
        "author: Md Sohail\n"
        "publishDate: 2024-02-01\n"
        "tags: [tip]\n"
        "---\n"
        "Body of B.\n",
        encoding="utf-8",
    )
    return tmp_path
