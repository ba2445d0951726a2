"""Episode repository for database operations."""

from sqlalchemy import case, distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.models.episode import EpisodeLinkORM, EpisodeORM
from ..models.episode import Episode, EpisodeLink, EpisodeStats
from .base import BaseRepository


class EpisodeRepository(BaseRepository[EpisodeORM]):
    """Repository for episode database operations."""

    def __init__(self, session: AsyncSession):
        """Initialize episode repository."""
        super().__init__(EpisodeORM, session)

    async def exists(self, episode_id: int) -> bool:
        """
        Check whether an episode exists.

        Args:
            episode_id: Episode ID

        Returns:
            True if a row with this ID exists
        """
        return await self.get(episode_id) is not None

    async def list_with_links(self, season: int) -> list[Episode]:
        """
        Get all episodes of a season with their links.

        Episodes are left-joined to their links and the rows are folded
        back into one record per episode, so an episode without links
        carries an empty list.

        Args:
            season: Season number to filter on

        Returns:
            Episodes ordered by episode number, links oldest first
        """
        result = await self.session.execute(
            select(EpisodeORM, EpisodeLinkORM)
            .outerjoin(EpisodeLinkORM, EpisodeORM.id == EpisodeLinkORM.episode_id)
            .where(EpisodeORM.season == season)
            .order_by(EpisodeORM.episode, EpisodeORM.id, EpisodeLinkORM.id)
        )

        episodes: dict[int, Episode] = {}
        for episode_orm, link_orm in result.all():
            episode = episodes.get(episode_orm.id)
            if episode is None:
                episode = self.to_pydantic(episode_orm)
                episodes[episode_orm.id] = episode
            if link_orm is not None:
                episode.links.append(
                    EpisodeLink(
                        url=link_orm.url,
                        quality=link_orm.quality,
                        source=link_orm.source,
                    )
                )
        return list(episodes.values())

    async def get_stats(self, season: int) -> EpisodeStats:
        """
        Count episodes, links and episodes having links for a season.

        Args:
            season: Season number to filter on

        Returns:
            Aggregate counts
        """
        result = await self.session.execute(
            select(
                func.count(distinct(EpisodeORM.id)),
                func.count(EpisodeLinkORM.id),
                func.count(
                    distinct(case((EpisodeLinkORM.id.is_not(None), EpisodeORM.id)))
                ),
            )
            .select_from(EpisodeORM)
            .outerjoin(EpisodeLinkORM, EpisodeORM.id == EpisodeLinkORM.episode_id)
            .where(EpisodeORM.season == season)
        )
        total_episodes, total_links, episodes_with_links = result.one()
        return EpisodeStats(
            total_episodes=total_episodes,
            total_links=total_links,
            episodes_with_links=episodes_with_links,
        )

    def to_pydantic(self, episode_orm: EpisodeORM) -> Episode:
        """
        Convert ORM model to Pydantic model.

        Links are not loaded here; callers attach them.

        Args:
            episode_orm: ORM episode instance

        Returns:
            Pydantic Episode model with an empty link list
        """
        return Episode(
            id=episode_orm.id,
            title=episode_orm.title,
            description=episode_orm.description,
            season=episode_orm.season,
            episode=episode_orm.episode,
            air_date=episode_orm.air_date,
        )
