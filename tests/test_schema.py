"""Tests for the schema built at startup."""

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError


@pytest.mark.parametrize("table", ["episodes", "episode_links"])
def test_created_at_has_database_default(client, sync_engine, table):
    """Test created_at carries a DEFAULT in the table definition."""
    columns = {c["name"]: c for c in inspect(sync_engine).get_columns(table)}
    assert columns["created_at"]["default"] is not None


def test_raw_insert_gets_created_at(client, sync_engine):
    """Test rows inserted outside the ORM are timestamped by the database."""
    with sync_engine.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO episode_links (episode_id, url, quality, source) "
                "VALUES (1, 'https://example.com', '1080p', 'mega')"
            )
        )
        created_at = conn.execute(text("SELECT created_at FROM episode_links")).scalar_one()
    assert created_at is not None


def test_episode_number_unique_within_season(client, sync_engine):
    """Test a second season 8 episode 1 is rejected."""
    with pytest.raises(IntegrityError):
        with sync_engine.begin() as conn:
            conn.execute(
                text("INSERT INTO episodes (title, season, episode) VALUES ('Duplicate', 8, 1)")
            )


def test_same_episode_number_in_other_season(client, sync_engine):
    """Test episode numbers may repeat across seasons."""
    with sync_engine.begin() as conn:
        conn.execute(text("INSERT INTO episodes (title, season, episode) VALUES ('Pilot', 1, 1)"))
        count = conn.execute(text("SELECT COUNT(*) FROM episodes WHERE episode = 1")).scalar_one()
    assert count == 2
