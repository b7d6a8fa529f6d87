"""Core package - configuration, errors and storage."""

from .config import Settings, get_settings
from .database import Database, get_db
from .store import UrlStore

__all__ = [
    "Settings",
    "get_settings",
    "Database",
    "get_db",
    "UrlStore",
]
