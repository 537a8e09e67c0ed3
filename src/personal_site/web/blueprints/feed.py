"""
Feed blueprint.

Serves the merged blog and TIL collections as ``/rss.xml``.
"""

from flask import Blueprint, Response

from personal_site.core.feed_builder import FeedBuilder
from personal_site.logger import get_logger
from personal_site.models import SiteMetadata

logger = get_logger(__name__)


class FeedBlueprint:
    """Blueprint for the syndication feed."""

    def __init__(self, builder: FeedBuilder, site: SiteMetadata):
        """Initialize the feed blueprint.

        Args:
            builder: Feed builder used for every request
            site: Channel metadata of the feed
        """
        self.builder = builder
        self.site = site
        self.blueprint = Blueprint("feed", __name__)
        self._register_routes()

    def _register_routes(self):
        """Register feed routes."""
        self.blueprint.add_url_rule("/rss.xml", view_func=self._rss, methods=["GET"])

    def _rss(self):
        """Render the RSS feed.

        CollectionUnavailable propagates to the application error handler,
        so a failed retrieval never yields a partial document.
        """
        document = self.builder.build_feed(self.site)
        return Response(document.body, status=200, content_type=document.content_type)
