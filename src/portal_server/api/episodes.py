"""Episode listing and link submission API endpoints."""

import json
import re
from typing import Annotated, Any, Optional

from fastapi import APIRouter, Body, HTTPException, Response

from portal_server.api.deps import EpisodeCatalogDep
from portal_server.models.episode import (
    REQUIRED_LINK_FIELDS,
    Episode,
    EpisodeSort,
    LinkCreate,
    LinkCreated,
)

router = APIRouter(prefix="/api/episodes", tags=["episodes"])

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

# Episode IDs are 32-bit INTEGER columns
_MAX_ID = 2**31 - 1


def parse_episode_id(raw: str) -> Optional[int]:
    """
    Parse the leading integer of a path segment.

    "12" and "12abc" both give 12. Anything without leading ASCII digits, or
    outside the ID column's range, gives None.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    value = int(match.group(1))
    return value if -_MAX_ID - 1 <= value <= _MAX_ID else None


@router.get("", response_model=list[Episode])
async def list_episodes(
    episode_catalog: EpisodeCatalogDep,
    search: Optional[str] = None,
    sort: EpisodeSort = EpisodeSort.EPISODE,
) -> list[Episode]:
    """List the season's episodes, each with its links."""
    return await episode_catalog.list_episodes(search=search, sort=sort)


@router.get("/export")
async def export_episodes(
    episode_catalog: EpisodeCatalogDep,
) -> Response:
    """Download the episode list as a JSON file."""
    episodes = await episode_catalog.list_episodes()
    payload = [e.model_dump(mode="json", by_alias=True) for e in episodes]
    filename = f"season-{episode_catalog.season}-episodes.json"
    return Response(
        content=json.dumps(payload, indent=2),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/{episode_id}/links", response_model=LinkCreated, status_code=201)
async def add_link(
    episode_id: str,
    episode_catalog: EpisodeCatalogDep,
    body: Annotated[Any, Body()] = None,
) -> LinkCreated:
    """Submit a streaming link for an episode."""
    link = LinkCreate.from_body(body)
    if link.missing_fields():
        raise HTTPException(
            status_code=400,
            detail=f"Missing required fields: {', '.join(REQUIRED_LINK_FIELDS)}",
        )

    parsed_id = parse_episode_id(episode_id)
    created = None
    if parsed_id is not None:
        created = await episode_catalog.add_link(parsed_id, link)
    if created is None:
        raise HTTPException(status_code=404, detail="Episode not found")

    return LinkCreated(link=created)
