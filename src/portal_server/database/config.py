"""Database configuration."""

from pathlib import Path

from ..core.config import settings


def get_database_url() -> str:
    """
    Get the database URL from settings or default.

    Returns:
        Database URL string
    """
    if settings.database_url:
        return settings.database_url

    # Default to SQLite in the data directory
    db_dir = Path(settings.data_dir)
    db_dir.mkdir(parents=True, exist_ok=True)
    db_path = db_dir / "portal.db"

    return f"sqlite+aiosqlite:///{db_path}"


def get_database_echo() -> bool:
    """
    Check if database query logging is enabled.

    Returns:
        True if SQL queries should be logged
    """
    return settings.database_echo


def is_sqlite(url: str) -> bool:
    """Check whether a database URL points at SQLite."""
    return url.startswith("sqlite")
