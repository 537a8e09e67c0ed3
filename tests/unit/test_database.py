"""Integration tests for the database layer."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from personal_site.models import PostCreate
from personal_site.storage.database import DatabaseManager, build_sqlite_url
from personal_site.storage.repositories.post_repo import PostRepository
from personal_site.storage.sync import sync_collections


@pytest.fixture
def db_manager():
    """Create a test database manager."""
    manager = DatabaseManager(":memory:")
    manager.init_db()
    yield manager
    manager.close()


@pytest.fixture
def db_session(db_manager: DatabaseManager) -> Session:
    """Create a test database session."""
    with db_manager.session() as session:
        yield session


def _post(collection="blog", slug="hello-world", **overrides) -> PostCreate:
    data = {
        "collection": collection,
        "slug": slug,
        "title": "Hello World",
        "description": "First post",
        "author": "Md Sohail",
        "publish_date": datetime(2024, 1, 10, tzinfo=timezone.utc),
        "tags": ["intro", "meta"],
    }
    data.update(overrides)
    return PostCreate(**data)


class TestBuildSqliteUrl:
    """Tests for SQLite URL building."""

    def test_memory(self):
        """Test the in-memory database URL."""
        assert build_sqlite_url(":memory:") == "sqlite://"

    def test_path(self, tmp_path):
        """Test file paths become sqlite URLs."""
        path = tmp_path / "data" / "site.db"

        assert build_sqlite_url(str(path)) == f"sqlite:///{path}"
        assert path.parent.exists()

    def test_url_unchanged(self):
        """Test URLs pass through."""
        assert build_sqlite_url("sqlite:///x.db") == "sqlite:///x.db"


class TestDatabaseManager:
    """Tests for DatabaseManager."""

    def test_session_commits(self, db_manager: DatabaseManager):
        """Test a successful block is committed."""
        with db_manager.session() as session:
            PostRepository(session).create(_post())

        with db_manager.session() as session:
            assert PostRepository(session).count() == 1

    def test_session_rolls_back(self, db_manager: DatabaseManager):
        """Test a failing block is rolled back."""
        with pytest.raises(RuntimeError):
            with db_manager.session() as session:
                PostRepository(session).create(_post())
                raise RuntimeError("boom")

        with db_manager.session() as session:
            assert PostRepository(session).count() == 0

    def test_tables_created(self, db_session: Session):
        """Test init_db creates the posts table."""
        result = db_session.execute(text("SELECT name FROM sqlite_master WHERE type='table'"))

        assert "posts" in {row[0] for row in result}

    def test_file_database(self, tmp_path):
        """Test a file-backed database persists across managers."""
        path = str(tmp_path / "site.db")
        with DatabaseManager(path) as manager:
            manager.init_db()
            with manager.session() as session:
                PostRepository(session).create(_post())

        with DatabaseManager(path) as manager:
            with manager.session() as session:
                assert PostRepository(session).count() == 1


class TestPostRepository:
    """Tests for PostRepository."""

    def test_create(self, db_session: Session):
        """Test creating a post."""
        post = PostRepository(db_session).create(_post())

        assert post.id is not None
        assert post.collection == "blog"
        assert post.slug == "hello-world"
        assert PostRepository.parse_tags(post) == ["intro", "meta"]

    def test_create_stores_utc(self, db_session: Session):
        """Test publish dates are stored as UTC wall time."""
        tz = timezone(timedelta(hours=5, minutes=30))
        repo = PostRepository(db_session)
        repo.create(_post(publish_date=datetime(2024, 1, 10, 5, 30, tzinfo=tz)))

        stored = repo.get_by_slug("blog", "hello-world")

        assert stored.publish_date.replace(tzinfo=None) == datetime(2024, 1, 10, 0, 0)

    def test_unique_collection_slug(self, db_session: Session):
        """Test a slug is unique within its collection."""
        repo = PostRepository(db_session)
        repo.create(_post())

        with pytest.raises(IntegrityError):
            repo.create(_post())
        db_session.rollback()

    def test_same_slug_in_other_collection(self, db_session: Session):
        """Test the same slug may exist in both collections."""
        repo = PostRepository(db_session)
        repo.create(_post(collection="blog", slug="same"))
        repo.create(_post(collection="til", slug="same"))

        assert repo.count() == 2
        assert repo.count(collection="til") == 1

    def test_upsert(self, db_session: Session):
        """Test upsert creates then updates."""
        repo = PostRepository(db_session)

        post, created = repo.upsert(_post())
        assert created is True

        updated, created = repo.upsert(_post(title="Hello Again", tags=["new"]))
        assert created is False
        assert updated.id == post.id
        assert updated.title == "Hello Again"
        assert PostRepository.parse_tags(updated) == ["new"]
        assert repo.count() == 1

    def test_list_by_collection(self, db_session: Session):
        """Test listing filters by collection in insertion order."""
        repo = PostRepository(db_session)
        repo.create(_post(slug="b"))
        repo.create(_post(collection="til", slug="t"))
        repo.create(_post(slug="a"))

        assert [p.slug for p in repo.list_by_collection("blog")] == ["b", "a"]

    def test_delete(self, db_session: Session):
        """Test deleting a post."""
        repo = PostRepository(db_session)
        post = repo.create(_post())

        repo.delete(post)

        assert repo.get_by_slug("blog", "hello-world") is None

    def test_parse_tags_invalid_json(self, db_session: Session):
        """Test broken tag JSON decodes to an empty list."""
        post = PostRepository(db_session).create(_post())
        post.tags = "not json"

        assert PostRepository.parse_tags(post) == []


class TestSyncCollections:
    """Tests for syncing markdown content into the database."""

    def test_sync(self, content_dir, db_manager: DatabaseManager):
        """Test records are created, then updated on a second run."""
        from personal_site.storage.content_store import FileContentStore

        source = FileContentStore(content_dir)

        first = sync_collections(source, db_manager)
        second = sync_collections(source, db_manager)

        assert first.created == {"blog": 1, "til": 1}
        assert second.created == {"blog": 0, "til": 0}
        assert second.updated == {"blog": 1, "til": 1}
        assert second.total == 2

    def test_sync_unavailable_writes_nothing(self, content_dir, db_manager: DatabaseManager):
        """Test a missing collection aborts before any write."""
        from personal_site.errors import CollectionUnavailable
        from personal_site.storage.content_store import FileContentStore

        (content_dir / "til" / "b.md").unlink()
        (content_dir / "til").rmdir()

        with pytest.raises(CollectionUnavailable):
            sync_collections(FileContentStore(content_dir), db_manager)

        with db_manager.session() as session:
            assert PostRepository(session).count() == 0
