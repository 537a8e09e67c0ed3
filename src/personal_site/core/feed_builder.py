"""
Feed builder: merges the content collections into one RSS document.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from personal_site.core.rss import render_rss
from personal_site.core.sorting import sort_posts
from personal_site.logger import get_logger
from personal_site.models import ContentRecord, FeedDocument, FeedItem, SiteMetadata
from personal_site.storage.content_store import ContentStore

if TYPE_CHECKING:
    from personal_site.config import Config

logger = get_logger(__name__)

FEED_COLLECTIONS = ("blog", "til")


def collection_to_items(name: str, records: Iterable[ContentRecord]) -> list[FeedItem]:
    """Project the records of one collection onto feed items.

    Args:
        name: Collection name, used as the first link path segment
        records: Validated records of that collection

    Returns:
        Feed items in the same order as the records
    """
    return [
        FeedItem(
            title=record.data.title,
            description=record.data.description,
            publish_date=record.data.publish_date,
            link=f"/{name}/{record.slug}/",
        )
        for record in records
    ]


def merge_feed_items(*item_lists: Iterable[FeedItem]) -> list[FeedItem]:
    """Concatenate feed item sequences and sort them newest first.

    Items published at the same instant keep their concatenation order.
    """
    combined = [item for items in item_lists for item in items]
    return sort_posts(combined)


class FeedBuilder:
    """Builds the site's RSS feed from its content collections."""

    def __init__(
        self,
        store: ContentStore,
        collections: Sequence[str] = FEED_COLLECTIONS,
        max_workers: int = 2,
    ):
        """Initialize feed builder.

        Args:
            store: Content store the collections are read from
            collections: Collections merged into the feed, in concatenation order
            max_workers: Number of collections read in parallel
        """
        self.store = store
        self.collections = tuple(collections)
        self.max_workers = max_workers

    def fetch_collections(self) -> list[list[ContentRecord]]:
        """Read every configured collection, concurrently.

        Returns:
            One record list per collection, in configuration order

        Raises:
            CollectionUnavailable: If any collection cannot be retrieved
        """
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(self.store.get_collection, name) for name in self.collections]
            return [future.result() for future in futures]

    def build_items(self) -> list[FeedItem]:
        """Build the merged, sorted feed items of all collections.

        Raises:
            CollectionUnavailable: If any collection cannot be retrieved
        """
        collections = self.fetch_collections()
        item_lists = [
            collection_to_items(name, records)
            for name, records in zip(self.collections, collections)
        ]
        return merge_feed_items(*item_lists)

    def build_feed(self, site: SiteMetadata) -> FeedDocument:
        """Build the complete RSS document.

        Either every collection contributes or nothing is rendered.

        Args:
            site: Channel metadata

        Returns:
            Rendered FeedDocument

        Raises:
            CollectionUnavailable: If any collection cannot be retrieved
        """
        items = self.build_items()
        logger.info(f"Rendering feed with {len(items)} items from {', '.join(self.collections)}")
        return FeedDocument(body=render_rss(site, items), items=items)


def create_feed_builder(
    store: Optional[ContentStore] = None,
    config: Optional["Config"] = None,
) -> FeedBuilder:
    """Create a FeedBuilder configured from the application config.

    Args:
        store: Content store override (defaults to the configured backend)
        config: Application configuration (defaults to the global config)

    Returns:
        Configured FeedBuilder
    """
    from personal_site.config import get_config
    from personal_site.storage.content_store import create_content_store

    config = config or get_config()
    return FeedBuilder(
        store or create_content_store(config),
        collections=config.content.collections,
        max_workers=config.content.fetch_workers,
    )
