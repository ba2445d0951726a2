"""Business logic services."""

from .episode_catalog import EpisodeCatalog

__all__ = ["EpisodeCatalog"]
