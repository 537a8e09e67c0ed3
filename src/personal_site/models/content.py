"""
Content collection schemas for blog posts and TIL entries.

Every record is validated once, when the content store loads it. Records
that fail validation are reported and dropped, so code downstream of the
store only ever sees valid records.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from personal_site.errors import CollectionUnavailable, SchemaValidationError

# Characters XML 1.0 does not allow in a document
_XML_FORBIDDEN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


class PostData(BaseModel):
    """Front matter shared by the blog and til collections."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    title: str = Field(..., min_length=1, description="Post title")
    description: str = Field(..., description="Short summary, may be empty")
    author: str = Field(..., description="Post author")
    publish_date: datetime = Field(..., alias="publishDate", description="Publication date")
    tags: list[str] = Field(..., description="Post tags, in display order")

    @field_validator("title", "description")
    @classmethod
    def reject_control_characters(cls, v: str) -> str:
        """Refuse text that cannot be written into an XML document."""
        match = _XML_FORBIDDEN.search(v)
        if match:
            raise ValueError(f"contains a character not allowed in XML: {match.group()!r}")
        return v

    @field_validator("publish_date", mode="before")
    @classmethod
    def coerce_calendar_date(cls, v: Any) -> Any:
        """Accept plain calendar dates, as YAML front matter produces them."""
        if isinstance(v, datetime):
            return v
        if isinstance(v, date):
            return datetime(v.year, v.month, v.day, tzinfo=timezone.utc)
        if isinstance(v, str):
            try:
                return datetime.fromisoformat(v.strip().replace("Z", "+00:00"))
            except ValueError:
                return v
        return v

    @field_validator("publish_date")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Treat naive datetimes as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class ContentRecord(BaseModel):
    """A validated content entry with its collection and slug."""

    model_config = ConfigDict(frozen=True)

    collection: str
    slug: str = Field(..., min_length=1)
    data: PostData

    @property
    def publish_date(self) -> datetime:
        return self.data.publish_date

    @property
    def permalink(self) -> str:
        """Site-relative link to the rendered record."""
        return f"/{self.collection}/{self.slug}/"


class BlogRecord(ContentRecord):
    """Record of the ``blog`` collection."""

    collection: Literal["blog"] = "blog"


class TilRecord(ContentRecord):
    """Record of the ``til`` collection."""

    collection: Literal["til"] = "til"


@dataclass(frozen=True)
class CollectionDefinition:
    """A named collection and the record schema its entries must satisfy."""

    name: str
    record_type: type[ContentRecord]


COLLECTIONS: dict[str, CollectionDefinition] = {
    "blog": CollectionDefinition("blog", BlogRecord),
    "til": CollectionDefinition("til", TilRecord),
}


def get_collection_definition(name: str) -> CollectionDefinition:
    """Look up a collection definition by name.

    Raises:
        CollectionUnavailable: If no collection with that name is defined
    """
    try:
        return COLLECTIONS[name]
    except KeyError:
        raise CollectionUnavailable(name, "unknown collection") from None


@dataclass
class ValidationResult:
    """Result of validating one content record."""

    success: bool
    source: str
    record: Optional[ContentRecord] = None
    errors: list[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate result consistency."""
        if self.success and self.errors:
            raise ValueError("Successful validation cannot have errors")
        if self.success and self.record is None:
            raise ValueError("Successful validation must carry a record")
        if not self.success and not self.errors:
            self.errors = ["Unknown error"]


def _format_errors(exc: ValidationError) -> list[str]:
    reasons = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "record"
        reasons.append(f"{location}: {err['msg']}")
    return reasons


def validate_record(
    collection: str,
    slug: str,
    metadata: dict,
    source: Optional[str] = None,
) -> ValidationResult:
    """Validate raw front matter against a collection schema.

    Args:
        collection: Collection name (``blog`` or ``til``)
        slug: Record slug
        metadata: Raw front matter mapping
        source: Human-readable origin of the record, used in error messages

    Returns:
        ValidationResult holding either the record or the failure reasons
    """
    definition = get_collection_definition(collection)
    source = source or f"{collection}/{slug}"

    try:
        record = definition.record_type.model_validate(
            {"collection": collection, "slug": slug, "data": metadata}
        )
    except ValidationError as e:
        return ValidationResult(success=False, source=source, errors=_format_errors(e))

    return ValidationResult(success=True, source=source, record=record)


def validate_record_or_raise(
    collection: str,
    slug: str,
    metadata: dict,
    source: Optional[str] = None,
) -> ContentRecord:
    """Validate raw front matter, raising on failure.

    Raises:
        SchemaValidationError: If the metadata does not satisfy the schema
    """
    result = validate_record(collection, slug, metadata, source=source)
    if not result.success:
        raise SchemaValidationError(result.source, result.errors)
    return result.record
