"""
Collections API blueprint.

Read-only JSON access to the blog and TIL collections, newest first.
"""

from flask import Blueprint

from personal_site.core.sorting import sort_posts
from personal_site.models import COLLECTIONS
from personal_site.storage.content_store import ContentStore
from personal_site.web.serializers import api_response, record_to_dict


class CollectionBlueprint:
    """Blueprint for content collection listings."""

    def __init__(self, store: ContentStore):
        """Initialize the collection blueprint.

        Args:
            store: Content store the collections are read from
        """
        self.store = store
        self.blueprint = Blueprint("collections", __name__, url_prefix="/api")
        self._register_routes()

    def _register_routes(self):
        """Register collection routes."""
        self.blueprint.add_url_rule(
            "/<string:collection>",
            view_func=self._list,
            methods=["GET"]
        )
        self.blueprint.add_url_rule(
            "/<string:collection>/<path:slug>",
            view_func=self._get_by_slug,
            methods=["GET"]
        )

    def _unknown(self, collection: str):
        return api_response(success=False, error=f"Unknown collection: {collection}", status=404)

    def _list(self, collection: str):
        """List a collection, newest first."""
        if collection not in COLLECTIONS:
            return self._unknown(collection)

        records = sort_posts(self.store.get_collection(collection))
        return api_response(success=True, data=[record_to_dict(r) for r in records])

    def _get_by_slug(self, collection: str, slug: str):
        """Get one record of a collection."""
        if collection not in COLLECTIONS:
            return self._unknown(collection)

        record = self.store.get_entry(collection, slug.strip("/"))
        if record is None:
            return api_response(success=False, error=f"Entry not found: {collection}/{slug}", status=404)

        return api_response(success=True, data=record_to_dict(record))
