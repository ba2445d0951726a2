"""Episode link repository for database operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from ..database.models.episode import EpisodeLinkORM
from ..models.episode import LinkRecord
from .base import BaseRepository


class LinkRepository(BaseRepository[EpisodeLinkORM]):
    """Repository for episode link database operations."""

    def __init__(self, session: AsyncSession):
        """Initialize link repository."""
        super().__init__(EpisodeLinkORM, session)

    async def add(self, episode_id: int, url: str, quality: str, source: str) -> EpisodeLinkORM:
        """
        Insert a link row for an episode.

        Args:
            episode_id: Owning episode ID
            url: Streaming URL, stored as given
            quality: Quality label (e.g. 1080p)
            source: Source label (e.g. google drive)

        Returns:
            Created link ORM instance
        """
        link_orm = EpisodeLinkORM(
            episode_id=episode_id,
            url=url,
            quality=quality,
            source=source,
        )
        return await self.create(link_orm)

    def to_pydantic(self, link_orm: EpisodeLinkORM) -> LinkRecord:
        """Convert ORM model to Pydantic model."""
        return LinkRecord(
            id=link_orm.id,
            episode_id=link_orm.episode_id,
            url=link_orm.url,
            quality=link_orm.quality,
            source=link_orm.source,
            created_at=link_orm.created_at,
        )
