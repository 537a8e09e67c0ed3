"""Repository pattern implementations for data access."""

from personal_site.storage.repositories.post_repo import PostRepository

__all__ = [
    "PostRepository",
]
