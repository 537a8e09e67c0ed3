"""
Chronological ordering of content records and feed items.

One comparator serves every collection: anything exposing a ``publish_date``
(directly, or through ``.data`` as content records do) can be ordered.
"""

from datetime import datetime
from functools import cmp_to_key
from typing import Iterable, Protocol, TypeVar, runtime_checkable

from personal_site.models import BlogRecord, TilRecord


@runtime_checkable
class HasPublishDate(Protocol):
    """Anything carrying a publish date."""

    @property
    def publish_date(self) -> datetime: ...


T = TypeVar("T", bound=HasPublishDate)


def _epoch(value: object) -> float:
    publish_date = getattr(value, "publish_date", None)
    if publish_date is None:
        publish_date = value.data.publish_date
    return publish_date.timestamp()


def compare_by_publish_date(a: HasPublishDate, b: HasPublishDate) -> float:
    """Order two records most-recent-first.

    Returns:
        A negative number if ``a`` is newer than ``b``, positive if it is
        older and zero when both were published at the same instant.
    """
    return _epoch(b) - _epoch(a)


def sort_posts(records: Iterable[T]) -> list[T]:
    """Return the records sorted newest first.

    The sort is stable: records with equal publish dates keep their input order.
    """
    return sorted(records, key=cmp_to_key(compare_by_publish_date))


def sort_blog_posts(records: Iterable[BlogRecord]) -> list[BlogRecord]:
    return sort_posts(records)


def sort_til_posts(records: Iterable[TilRecord]) -> list[TilRecord]:
    return sort_posts(records)
