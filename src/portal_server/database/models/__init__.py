"""Database ORM models."""

from .episode import EpisodeLinkORM, EpisodeORM

__all__ = [
    "EpisodeORM",
    "EpisodeLinkORM",
]
