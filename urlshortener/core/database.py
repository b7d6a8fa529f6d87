"""Database module for URL Shortener Service.

This module handles SQLite database operations and provides
dependency injection for FastAPI endpoints.
"""

import sqlite3
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import Request

from ..models.url import UrlRecord
from .exceptions import DuplicateKeyError, NotFoundError, StorageError
from .store import UrlStore

logger = logging.getLogger(__name__)


def to_timestamp(value: datetime) -> str:
    """Format a datetime as a sortable UTC ISO-8601 string.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


class Database(UrlStore):
    """Database class for managing SQLite connections and operations."""

    def __init__(self, db_path: str):
        """Initialize database connection.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for in-memory database.
        """
        self.db_path = db_path
        self._connection: Optional[sqlite3.Connection] = None

    def _get_connection(self) -> sqlite3.Connection:
        """Create or return the database connection.

        The connection is shared by the worker threads serving requests,
        SQLite serializes access to it.

        Returns:
            SQLite connection.
        """
        if self._connection is None:
            try:
                self._connection = sqlite3.connect(
                    self.db_path,
                    check_same_thread=False,
                )
            except sqlite3.Error as e:
                logger.error(f"Can't connect to database at {self.db_path}: {e}")
                raise StorageError(f"Can't connect to database at {self.db_path}.") from e
            self._connection.row_factory = sqlite3.Row
        return self._connection

    def close(self) -> None:
        """Close database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def init_db(self) -> None:
        """Initialize database tables."""
        create_table_sql = """
        CREATE TABLE IF NOT EXISTS urls (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            short_id TEXT NOT NULL UNIQUE,
            original_url TEXT NOT NULL,
            clicks INTEGER NOT NULL DEFAULT 0,
            created_at TEXT NOT NULL
        )
        """
        create_index_sql = """
        CREATE INDEX IF NOT EXISTS idx_original_url ON urls(original_url);
        CREATE INDEX IF NOT EXISTS idx_created_at ON urls(created_at);
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(create_table_sql)
            cursor.executescript(create_index_sql)
            conn.commit()
            logger.info("Database initialized successfully")
        except sqlite3.Error as e:
            logger.error(f"Database initialization failed: {e}")
            raise StorageError("Database initialization failed.") from e

    def execute(
        self, query: str, params: tuple = (), fetch: bool = False
    ) -> Optional[list[dict]]:
        """Execute a SQL query.

        Args:
            query: SQL query string.
            params: Query parameters.
            fetch: Whether to fetch results.

        Returns:
            Query results if fetch=True, None otherwise.

        Raises:
            DuplicateKeyError: If the query violates the short ID uniqueness.
            StorageError: On any other database failure.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(query, params)
            if fetch:
                results = cursor.fetchall()
                return [dict(row) for row in results]
            conn.commit()
            return None
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if "UNIQUE" in str(e):
                raise DuplicateKeyError() from e
            logger.error(f"Constraint violation: {e}")
            raise StorageError() from e
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"Query execution failed: {e}")
            raise StorageError() from e

    @staticmethod
    def _to_record(row: dict) -> UrlRecord:
        return UrlRecord(
            short_id=row["short_id"],
            original_url=row["original_url"],
            clicks=row["clicks"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    def _find_one(self, query: str, params: tuple) -> Optional[UrlRecord]:
        results = self.execute(query, params, fetch=True)
        return self._to_record(results[0]) if results else None

    def find_by_original_url(self, url: str) -> Optional[UrlRecord]:
        """Get URL record by original URL.

        Args:
            url: The original long URL.

        Returns:
            Oldest record for that URL or None if not found.
        """
        query = "SELECT * FROM urls WHERE original_url = ? ORDER BY id LIMIT 1"
        return self._find_one(query, (url,))

    def find_by_short_id(self, short_id: str) -> Optional[UrlRecord]:
        """Get URL record by short ID.

        Args:
            short_id: The short URL identifier.

        Returns:
            URL record or None if not found.
        """
        query = "SELECT * FROM urls WHERE short_id = ?"
        return self._find_one(query, (short_id,))

    def insert(self, record: UrlRecord) -> UrlRecord:
        """Create a new shortened URL.

        Args:
            record: The record to store.

        Returns:
            Created URL record.

        Raises:
            DuplicateKeyError: If the short ID is already taken.
        """
        query = """
        INSERT INTO urls (short_id, original_url, clicks, created_at)
        VALUES (?, ?, ?, ?)
        """
        self.execute(
            query,
            (
                record.short_id,
                record.original_url,
                record.clicks,
                to_timestamp(record.created_at),
            ),
        )
        logger.info(f"Created short URL: {record.short_id}")
        return record

    def increment_clicks(self, short_id: str) -> UrlRecord:
        """Increment click count for a URL.

        Args:
            short_id: The short URL identifier.

        Returns:
            The record with its updated click count.

        Raises:
            NotFoundError: If no record has this short ID.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE urls SET clicks = clicks + 1 WHERE short_id = ?",
                (short_id,),
            )
            conn.commit()
            updated = cursor.rowcount > 0
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"Click increment failed: {e}")
            raise StorageError() from e

        if not updated:
            raise NotFoundError()
        record = self.find_by_short_id(short_id)
        if record is None:
            raise NotFoundError()
        return record

    def list_all(self) -> list[UrlRecord]:
        """Get all URLs.

        Returns:
            List of URL records, newest first.
        """
        query = "SELECT * FROM urls ORDER BY created_at DESC, id DESC"
        return [self._to_record(row) for row in self.execute(query, fetch=True) or []]


def get_db(request: Request) -> UrlStore:
    """Get the application's store for dependency injection.

    Returns:
        The store the application was created with.
    """
    return request.app.state.store
