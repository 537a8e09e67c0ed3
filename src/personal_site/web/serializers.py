"""
Serializer functions for converting content records to dictionaries.
"""

from datetime import datetime
from typing import Any, Optional

from personal_site.models import ContentRecord


def serialize_datetime(dt: Optional[datetime]) -> Optional[str]:
    """Convert datetime to ISO format string.

    Args:
        dt: Datetime object or None

    Returns:
        ISO format string or None
    """
    return dt.isoformat() if dt else None


def record_to_dict(record: ContentRecord) -> dict:
    """Convert a content record to a dictionary.

    Front matter keys keep their authored names (``publishDate``).

    Args:
        record: ContentRecord instance

    Returns:
        Dictionary representation
    """
    return {
        "collection": record.collection,
        "slug": record.slug,
        "link": record.permalink,
        "title": record.data.title,
        "description": record.data.description,
        "author": record.data.author,
        "publishDate": serialize_datetime(record.data.publish_date),
        "tags": list(record.data.tags),
    }


def api_response(
    success: bool = True,
    data: Any = None,
    message: str = None,
    error: str = None,
    status: int = 200
) -> tuple:
    """Standard API response format.

    Args:
        success: Whether the request was successful
        data: Response data
        message: Success message
        error: Error message
        status: HTTP status code

    Returns:
        Flask response with JSON data
    """
    from flask import jsonify

    response_data = {
        "success": success,
        "data": data,
        "message": message,
        "error": error,
    }
    return jsonify(response_data), status
