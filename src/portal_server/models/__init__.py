"""Pydantic models for API requests/responses and domain objects."""

from .episode import (
    Episode,
    EpisodeLink,
    EpisodeSort,
    EpisodeStats,
    LinkCreate,
    LinkCreated,
    LinkRecord,
)

__all__ = [
    "Episode",
    "EpisodeLink",
    "EpisodeSort",
    "EpisodeStats",
    "LinkCreate",
    "LinkCreated",
    "LinkRecord",
]
