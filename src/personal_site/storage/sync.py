"""
Copy validated collections from one content store into the database backend.
"""

from dataclasses import dataclass, field
from typing import Iterable

from personal_site.logger import get_logger
from personal_site.models import PostCreate
from personal_site.storage.content_store import ContentStore
from personal_site.storage.database import DatabaseManager
from personal_site.storage.repositories.post_repo import PostRepository

logger = get_logger(__name__)


@dataclass
class SyncStats:
    """Counts of a content sync run, per collection."""

    created: dict = field(default_factory=dict)
    updated: dict = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.created.values()) + sum(self.updated.values())


def sync_collections(
    source: ContentStore,
    db_manager: DatabaseManager,
    collections: Iterable[str] = ("blog", "til"),
) -> SyncStats:
    """Upsert every valid record of the source collections into the database.

    All collections are read before anything is written, so an unavailable
    collection leaves the database untouched.

    Raises:
        CollectionUnavailable: If a source collection cannot be retrieved
    """
    loaded = {name: source.get_collection(name) for name in collections}
    stats = SyncStats()

    with db_manager.session() as session:
        repo = PostRepository(session)
        for name, records in loaded.items():
            stats.created[name] = 0
            stats.updated[name] = 0
            for record in records:
                _, created = repo.upsert(
                    PostCreate(
                        collection=name,
                        slug=record.slug,
                        title=record.data.title,
                        description=record.data.description,
                        author=record.data.author,
                        publish_date=record.data.publish_date,
                        tags=list(record.data.tags),
                    )
                )
                if created:
                    stats.created[name] += 1
                else:
                    stats.updated[name] += 1
            logger.info(
                f"Synced {name}: {stats.created[name]} created, {stats.updated[name]} updated"
            )

    return stats
