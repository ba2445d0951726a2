"""Episode and episode link ORM models."""

from datetime import date, datetime
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..base import Base


class EpisodeORM(Base):
    """ORM model for episodes table."""

    __tablename__ = "episodes"
    __table_args__ = (
        UniqueConstraint("season", "episode", name="uq_episodes_season_episode"),
    )

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Basic info
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    season: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    episode: Mapped[int] = mapped_column(Integer, nullable=False)
    air_date: Mapped[Optional[date]] = mapped_column(Date)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    # Relationship to links, oldest first
    links: Mapped[list["EpisodeLinkORM"]] = relationship(
        "EpisodeLinkORM",
        back_populates="episode",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="EpisodeLinkORM.id",
    )


class EpisodeLinkORM(Base):
    """ORM model for episode_links table."""

    __tablename__ = "episode_links"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Foreign key
    episode_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("episodes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Link info
    url: Mapped[str] = mapped_column(Text, nullable=False)
    quality: Mapped[Optional[str]] = mapped_column(String(50))
    source: Mapped[Optional[str]] = mapped_column(String(100))

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    # Relationship to episode
    episode: Mapped["EpisodeORM"] = relationship("EpisodeORM", back_populates="links")
