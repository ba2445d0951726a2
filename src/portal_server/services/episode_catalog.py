"""Database-backed episode catalog and link submission service."""

import logging
from datetime import date
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.seed import seed_episodes
from ..database.session import SessionLocal
from ..models.episode import (
    Episode,
    EpisodeSort,
    EpisodeStats,
    LinkCreate,
    LinkRecord,
)
from ..repositories.episode_repository import EpisodeRepository
from ..repositories.link_repository import LinkRepository

logger = logging.getLogger(__name__)


def sort_episodes(episodes: list[Episode], sort: EpisodeSort) -> list[Episode]:
    """Order episodes for display; input is assumed to be in episode order."""
    if sort == EpisodeSort.TITLE:
        return sorted(episodes, key=lambda e: e.title.casefold())
    if sort == EpisodeSort.DATE:
        return sorted(episodes, key=lambda e: (e.air_date is None, e.air_date or date.min))
    if sort == EpisodeSort.LINKS:
        return sorted(episodes, key=lambda e: -len(e.links))
    return list(episodes)


class EpisodeCatalog:
    """Serves one season's episodes and accepts link submissions."""

    def __init__(self, season: int):
        """
        Initialize the catalog.

        Args:
            season: Season number every query is filtered on
        """
        self.season = season

    async def _get_session(self) -> AsyncSession:
        """Get a new database session."""
        return SessionLocal()

    async def seed(self) -> int:
        """Insert the default episodes into an empty database."""
        async with await self._get_session() as session:
            inserted = await seed_episodes(session)
            await session.commit()
            return inserted

    async def list_episodes(
        self,
        search: Optional[str] = None,
        sort: EpisodeSort = EpisodeSort.EPISODE,
    ) -> list[Episode]:
        """Get the season's episodes with links, optionally filtered and re-sorted."""
        async with await self._get_session() as session:
            repo = EpisodeRepository(session)
            episodes = await repo.list_with_links(self.season)

        if search:
            episodes = [e for e in episodes if e.matches(search)]
        return sort_episodes(episodes, sort)

    async def get_stats(self) -> EpisodeStats:
        """Get aggregate counts for the season."""
        async with await self._get_session() as session:
            repo = EpisodeRepository(session)
            return await repo.get_stats(self.season)

    async def add_link(self, episode_id: int, link: LinkCreate) -> Optional[LinkRecord]:
        """
        Store a submitted link for an episode.

        The episode is looked up first; the foreign key still guards the
        insert if the episode disappears in between.

        Args:
            episode_id: Target episode ID
            link: Submitted link with all required fields present

        Returns:
            Created link, or None if the episode does not exist
        """
        async with await self._get_session() as session:
            episodes = EpisodeRepository(session)
            if not await episodes.exists(episode_id):
                return None

            links = LinkRepository(session)
            try:
                link_orm = await links.add(
                    episode_id=episode_id,
                    url=link.url,
                    quality=link.quality,
                    source=link.source,
                )
                await session.commit()
            except IntegrityError:
                await session.rollback()
                logger.warning(f"Episode {episode_id} vanished before link insert")
                return None

            logger.info(f"Link added to episode {episode_id}: {link.quality} / {link.source}")
            return links.to_pydantic(link_orm)
