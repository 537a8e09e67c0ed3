"""Storage layer modules for the personal site."""

from personal_site.storage.content_store import (
    ContentStore,
    DatabaseContentStore,
    FileContentStore,
    create_content_store,
)
from personal_site.storage.database import DatabaseManager

__all__ = [
    "ContentStore",
    "DatabaseContentStore",
    "FileContentStore",
    "create_content_store",
    "DatabaseManager",
]
