"""Repository layer for database operations."""

from .episode_repository import EpisodeRepository
from .link_repository import LinkRepository

__all__ = [
    "EpisodeRepository",
    "LinkRepository",
]
