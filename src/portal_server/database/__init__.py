"""Database package initialization."""

from .base import Base
from .config import get_database_url
from .session import SessionLocal, dispose_db, engine, get_db, init_db

__all__ = [
    "Base",
    "SessionLocal",
    "dispose_db",
    "engine",
    "get_db",
    "get_database_url",
    "init_db",
]
