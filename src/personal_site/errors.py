"""
Exception hierarchy for the personal site.
"""

from typing import Optional


class SiteError(Exception):
    """Base class for all personal site errors."""


class SchemaValidationError(SiteError):
    """A content record does not satisfy its collection schema.

    Raised only at load time; records that fail validation are dropped by the
    content store and never reach the feed builder.
    """

    def __init__(self, source: str, reasons: list[str]):
        self.source = source
        self.reasons = list(reasons)
        super().__init__(f"Invalid content record {source}: {'; '.join(self.reasons)}")


class CollectionUnavailable(SiteError):
    """A named collection could not be retrieved from the content store."""

    def __init__(self, collection: str, reason: Optional[str] = None):
        self.collection = collection
        self.reason = reason
        message = f"Collection {collection!r} is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
