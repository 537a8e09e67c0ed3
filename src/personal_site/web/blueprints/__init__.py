"""Flask blueprints for the personal site."""

from personal_site.web.blueprints.collections import CollectionBlueprint
from personal_site.web.blueprints.feed import FeedBlueprint

__all__ = [
    "CollectionBlueprint",
    "FeedBlueprint",
]
