"""Core feed logic: chronological ordering and RSS assembly."""

from personal_site.core.feed_builder import (
    FEED_COLLECTIONS,
    FeedBuilder,
    collection_to_items,
    create_feed_builder,
    merge_feed_items,
)
from personal_site.core.rss import absolute_url, format_rfc822, render_rss
from personal_site.core.sorting import (
    HasPublishDate,
    compare_by_publish_date,
    sort_blog_posts,
    sort_posts,
    sort_til_posts,
)

__all__ = [
    "FEED_COLLECTIONS",
    "FeedBuilder",
    "collection_to_items",
    "create_feed_builder",
    "merge_feed_items",
    "absolute_url",
    "format_rfc822",
    "render_rss",
    "HasPublishDate",
    "compare_by_publish_date",
    "sort_blog_posts",
    "sort_posts",
    "sort_til_posts",
]
