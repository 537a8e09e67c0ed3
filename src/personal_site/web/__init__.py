"""Web layer for the personal site."""

from personal_site.web.app import create_app

__all__ = ["create_app"]
