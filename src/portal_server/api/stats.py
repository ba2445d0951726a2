"""Catalog statistics API endpoint."""

from fastapi import APIRouter

from portal_server.api.deps import EpisodeCatalogDep
from portal_server.models.episode import EpisodeStats

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=EpisodeStats)
async def get_stats(
    episode_catalog: EpisodeCatalogDep,
) -> EpisodeStats:
    """Get episode and link counts for the season."""
    return await episode_catalog.get_stats()
