"""API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portal_server.database import get_db
from portal_server.services.episode_catalog import EpisodeCatalog

# Global service instances
_episode_catalog: EpisodeCatalog | None = None


def init_services(episode_catalog: EpisodeCatalog) -> None:
    """Initialize service instances."""
    global _episode_catalog
    _episode_catalog = episode_catalog


def get_episode_catalog() -> EpisodeCatalog:
    """Get the episode catalog instance."""
    if _episode_catalog is None:
        raise RuntimeError("Services not initialized")
    return _episode_catalog


# Type aliases for dependency injection
EpisodeCatalogDep = Annotated[EpisodeCatalog, Depends(get_episode_catalog)]
DbSessionDep = Annotated[AsyncSession, Depends(get_db)]
