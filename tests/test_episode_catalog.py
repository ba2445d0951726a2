"""Unit tests for catalog helpers that need no database."""

from datetime import date

import pytest

from portal_server.api.episodes import parse_episode_id
from portal_server.models.episode import Episode, EpisodeLink, EpisodeSort, LinkCreate
from portal_server.services.episode_catalog import sort_episodes


def _episode(number, title, air_date=None, links=0, description=None):
    return Episode(
        id=number,
        title=title,
        description=description,
        season=8,
        episode=number,
        air_date=air_date,
        links=[EpisodeLink(url=f"https://example.com/{i}") for i in range(links)],
    )


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", 12),
        ("12abc", 12),
        (" 7", 7),
        ("-3", -3),
        ("abc", None),
        ("", None),
        ("2147483647", 2147483647),
        ("2147483648", None),
        ("\u0663", None),
        ("\uff11\uff12", None),
    ],
)
def test_parse_episode_id(raw, expected):
    """Test leading-integer parsing of path IDs."""
    assert parse_episode_id(raw) == expected


def test_missing_fields():
    """Test absent and empty fields are both reported."""
    assert LinkCreate(url="https://x", quality="720p", source="mega").missing_fields() == []
    assert LinkCreate(url="", quality="720p").missing_fields() == ["url", "source"]
    assert LinkCreate().missing_fields() == ["url", "quality", "source"]


def test_from_body_keeps_string_fields():
    """Test string values from an object body are taken as given."""
    link = LinkCreate.from_body({"url": "https://x", "quality": "720p", "source": "mega", "extra": 1})
    assert link == LinkCreate(url="https://x", quality="720p", source="mega")


@pytest.mark.parametrize("body", [None, [], "url=https://x", b"url=https://x", 7])
def test_from_body_non_object(body):
    """Test bodies that are not objects have every field missing."""
    assert LinkCreate.from_body(body).missing_fields() == ["url", "quality", "source"]


def test_from_body_drops_non_string_values():
    """Test numbers, lists and booleans count as missing."""
    link = LinkCreate.from_body({"url": 123, "quality": True, "source": ["mega"]})
    assert link.missing_fields() == ["url", "quality", "source"]


def test_episode_matches():
    """Test search matching on title and description."""
    episode = _episode(1, "Hot Rick", description="Letting go of the PAST.")
    assert episode.matches("rick")
    assert episode.matches("past")
    assert not episode.matches("morty")


def test_episode_matches_without_description():
    """Test matching tolerates a missing description."""
    assert not _episode(1, "Hot Rick").matches("past")


def test_episode_serializes_air_date_alias():
    """Test airDate is the wire name."""
    data = _episode(1, "Hot Rick", air_date=date(2025, 7, 27)).model_dump(mode="json", by_alias=True)
    assert data["airDate"] == "2025-07-27"
    assert "air_date" not in data


def test_sort_episodes_default_keeps_order():
    """Test episode order is returned unchanged."""
    episodes = [_episode(1, "B"), _episode(2, "A")]
    assert [e.episode for e in sort_episodes(episodes, EpisodeSort.EPISODE)] == [1, 2]


def test_sort_episodes_by_title():
    """Test case-insensitive title order."""
    episodes = [_episode(1, "beta"), _episode(2, "Alpha"), _episode(3, "gamma")]
    assert [e.title for e in sort_episodes(episodes, EpisodeSort.TITLE)] == ["Alpha", "beta", "gamma"]


def test_sort_episodes_by_date_puts_undated_last():
    """Test air date order with missing dates at the end."""
    episodes = [
        _episode(1, "A", air_date=date(2025, 6, 1)),
        _episode(2, "B"),
        _episode(3, "C", air_date=date(2025, 5, 1)),
    ]
    assert [e.episode for e in sort_episodes(episodes, EpisodeSort.DATE)] == [3, 1, 2]


def test_sort_episodes_by_links():
    """Test most-linked first, ties in episode order."""
    episodes = [_episode(1, "A", links=1), _episode(2, "B", links=3), _episode(3, "C", links=1)]
    assert [e.episode for e in sort_episodes(episodes, EpisodeSort.LINKS)] == [2, 1, 3]
