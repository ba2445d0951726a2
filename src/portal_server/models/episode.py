"""Episode and link models for API requests/responses."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

REQUIRED_LINK_FIELDS = ("url", "quality", "source")


class EpisodeSort(str, Enum):
    """Orderings offered by the episode listing."""

    EPISODE = "episode"
    TITLE = "title"
    DATE = "date"
    LINKS = "links"


class EpisodeLink(BaseModel):
    """A streaming link as shown under its episode."""

    url: str
    quality: Optional[str] = None
    source: Optional[str] = None


class Episode(BaseModel):
    """An episode with its submitted links."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: Optional[str] = None
    season: int
    episode: int
    air_date: Optional[date] = Field(default=None, alias="airDate")
    links: list[EpisodeLink] = Field(default_factory=list)

    def matches(self, query: str) -> bool:
        """Case-insensitive match against title or description."""
        needle = query.lower()
        return needle in self.title.lower() or needle in (self.description or "").lower()


class LinkCreate(BaseModel):
    """Request body for submitting a link.

    Fields are optional; the endpoint answers absent ones with a 400.
    """

    url: Optional[str] = None
    quality: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def from_body(cls, body: Any) -> "LinkCreate":
        """
        Build from a decoded request body of any shape.

        A body that is not a JSON object, and values that are not strings,
        count as absent.
        """
        if not isinstance(body, dict):
            return cls()
        fields = {}
        for name in REQUIRED_LINK_FIELDS:
            value = body.get(name)
            if isinstance(value, str):
                fields[name] = value
        return cls(**fields)

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or empty."""
        return [name for name in REQUIRED_LINK_FIELDS if not getattr(self, name)]


class LinkRecord(BaseModel):
    """A stored link row."""

    id: int
    episode_id: int
    url: str
    quality: Optional[str] = None
    source: Optional[str] = None
    created_at: datetime


class LinkCreated(BaseModel):
    """Response for a successful link submission."""

    message: str = "Link added successfully"
    link: LinkRecord


class EpisodeStats(BaseModel):
    """Aggregate counts over the catalogued season."""

    total_episodes: int = 0
    total_links: int = 0
    episodes_with_links: int = 0
