"""
Content stores for the blog and til collections.

A store hands out validated records of a named collection in their load
order. Records whose front matter fails the collection schema are logged and
left out; a collection that cannot be read at all raises
:class:`~personal_site.errors.CollectionUnavailable`.
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional

import frontmatter
import yaml
from sqlalchemy.exc import SQLAlchemyError

from personal_site.errors import CollectionUnavailable
from personal_site.logger import get_logger
from personal_site.models import ContentRecord, get_collection_definition, validate_record
from personal_site.storage.database import DatabaseManager
from personal_site.storage.repositories.post_repo import PostRepository

if TYPE_CHECKING:
    from personal_site.config import Config

logger = get_logger(__name__)

MARKDOWN_SUFFIXES = (".md", ".mdx", ".markdown")

_SLUG_UNSAFE = re.compile(r"[^\w\s-]")
_SLUG_SPACES = re.compile(r"\s+")


def slugify_path(relative: Path) -> str:
    """Derive a URL slug from a file path relative to its collection.

    Each path segment is lowercased, runs of whitespace become ``-`` and
    other punctuation is dropped: ``Notes/Hello World!.md`` gives
    ``notes/hello-world``.
    """
    segments = []
    for part in relative.with_suffix("").parts:
        part = _SLUG_UNSAFE.sub("", part.strip().lower())
        segments.append(_SLUG_SPACES.sub("-", part))
    return "/".join(segments)


class ContentStore(ABC):
    """Read-only access to validated content collections."""

    @abstractmethod
    def get_collection(self, name: str) -> list[ContentRecord]:
        """Fetch all valid records of a collection.

        Args:
            name: Collection name ("blog" or "til")

        Returns:
            Records in their original load order

        Raises:
            CollectionUnavailable: If the collection cannot be retrieved
        """

    def get_entry(self, name: str, slug: str) -> Optional[ContentRecord]:
        """Fetch one record of a collection by slug.

        Raises:
            CollectionUnavailable: If the collection cannot be retrieved
        """
        for record in self.get_collection(name):
            if record.slug == slug:
                return record
        return None

    def _keep_valid(self, name: str, candidates: Iterable[tuple[str, str, dict]]) -> list[ContentRecord]:
        records = []
        seen_slugs = set()
        skipped = 0

        for slug, source, metadata in candidates:
            result = validate_record(name, slug, metadata, source=source)
            if not result.success:
                skipped += 1
                logger.warning(f"Skipping invalid {name} record {source}: {'; '.join(result.errors)}")
                continue
            if slug in seen_slugs:
                skipped += 1
                logger.warning(f"Skipping duplicate {name} slug {slug!r} from {source}")
                continue
            seen_slugs.add(slug)
            records.append(result.record)

        logger.debug(f"Loaded {len(records)} {name} records ({skipped} skipped)")
        return records


class FileContentStore(ContentStore):
    """Markdown files with YAML front matter, one directory per collection.

    ``<content_dir>/blog/hello-world.md`` becomes the blog record with slug
    ``hello-world``. Nested directories keep their relative path in the slug,
    and every segment is slugified. A ``slug`` key in the front matter
    overrides the file-derived slug and is used as written.
    """

    def __init__(self, content_dir: str | Path):
        self.content_dir = Path(content_dir)

    def collection_dir(self, name: str) -> Path:
        return self.content_dir / name

    def get_collection(self, name: str) -> list[ContentRecord]:
        get_collection_definition(name)

        directory = self.collection_dir(name)
        if not directory.is_dir():
            raise CollectionUnavailable(name, f"directory not found: {directory}")

        return self._keep_valid(name, self._read_files(name, directory))

    def _read_files(self, name: str, directory: Path):
        paths = sorted(
            p for p in directory.rglob("*") if p.is_file() and p.suffix.lower() in MARKDOWN_SUFFIXES
        )
        for path in paths:
            try:
                post = frontmatter.load(str(path))
            except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
                raise CollectionUnavailable(name, f"cannot read {path}: {e}") from e

            metadata = dict(post.metadata)
            slug = metadata.pop("slug", None) or slugify_path(path.relative_to(directory))
            yield str(slug), str(path), metadata


class DatabaseContentStore(ContentStore):
    """Collections stored in the ``posts`` table."""

    def __init__(self, db_manager: Optional[DatabaseManager] = None):
        self.db_manager = db_manager or DatabaseManager()

    def get_collection(self, name: str) -> list[ContentRecord]:
        get_collection_definition(name)

        try:
            with self.db_manager.session() as session:
                rows = [
                    (
                        post.slug,
                        f"posts#{post.id}",
                        {
                            "title": post.title,
                            "description": post.description,
                            "author": post.author,
                            "publishDate": post.publish_date,
                            "tags": PostRepository.parse_tags(post),
                        },
                    )
                    for post in PostRepository(session).list_by_collection(name)
                ]
        except SQLAlchemyError as e:
            raise CollectionUnavailable(name, f"database error: {e}") from e

        return self._keep_valid(name, rows)


def create_content_store(config: Optional["Config"] = None) -> ContentStore:
    """Create the content store selected by the configuration.

    Args:
        config: Application configuration (defaults to the global config)

    Returns:
        Configured ContentStore
    """
    from personal_site.config import get_config

    config = config or get_config()

    if config.content.backend == "database":
        return DatabaseContentStore(DatabaseManager(db_config=config.database))
    return FileContentStore(config.content.content_dir)
