"""
Flask application for the personal site.
"""

from typing import Optional

from flask import Flask, Response, request

from personal_site import __version__
from personal_site.config import Config, get_config
from personal_site.core.feed_builder import create_feed_builder
from personal_site.errors import CollectionUnavailable
from personal_site.logger import get_logger
from personal_site.storage.content_store import ContentStore, create_content_store
from personal_site.web.serializers import api_response

logger = get_logger(__name__)


def create_app(
    store: Optional[ContentStore] = None,
    config: Optional[Config] = None,
    debug: bool = False,
) -> Flask:
    """Create and configure Flask application.

    Args:
        store: Content store override (defaults to the configured backend)
        config: Application configuration (defaults to the global config)
        debug: Enable debug mode

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    config = config or get_config()
    app.config["SECRET_KEY"] = config.web.secret_key
    app.config["DEBUG"] = debug or config.web.debug

    store = store or create_content_store(config)
    builder = create_feed_builder(store=store, config=config)

    # ========================================================================
    # Register Blueprints
    # ========================================================================

    from personal_site.web.blueprints import CollectionBlueprint, FeedBlueprint

    app.register_blueprint(FeedBlueprint(builder, config.site_metadata()).blueprint)
    app.register_blueprint(CollectionBlueprint(store).blueprint)

    @app.route("/health")
    def health():
        """Liveness probe."""
        return api_response(success=True, data={"status": "ok", "version": __version__})

    # ========================================================================
    # Error Handlers
    # ========================================================================

    @app.errorhandler(CollectionUnavailable)
    def collection_unavailable(e: CollectionUnavailable):
        """Turn a failed collection retrieval into a server error."""
        logger.error(f"Collection retrieval failed for {request.path}: {e}")
        if request.path.startswith("/api/"):
            return api_response(success=False, error="Content is temporarily unavailable", status=500)
        return Response("Internal Server Error", status=500, content_type="text/plain; charset=utf-8")

    @app.errorhandler(404)
    def not_found(e):
        """Handle 404 errors."""
        if request.path.startswith("/api/"):
            return api_response(success=False, error="Not found", status=404)
        return Response("Not Found", status=404, content_type="text/plain; charset=utf-8")

    logger.info(f"Web app created with {type(store).__name__}")

    return app
