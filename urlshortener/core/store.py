"""Abstract base class for URL record stores.

This class establishes the contract every storage backend has to honor so
the services never depend on a particular database driver.

Example:
    >>> from datetime import datetime, timezone
    >>> from urlshortener.core.database import Database
    >>> from urlshortener.models import UrlRecord

    >>> store = Database(":memory:")
    >>> store.init_db()
    >>> record = UrlRecord(
    ...     short_id="a1b2c3d4",
    ...     original_url="https://example.com",
    ...     created_at=datetime.now(timezone.utc),
    ... )
    >>> _ = store.insert(record)
    >>> store.find_by_short_id("a1b2c3d4").original_url
    'https://example.com'
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.url import UrlRecord


class UrlStore(ABC):
    """Interface for URL record stores.

    Methods:
        find_by_original_url(url) -> UrlRecord | None
        find_by_short_id(short_id) -> UrlRecord | None
        insert(record) -> UrlRecord:
            Raises DuplicateKeyError if the short ID already exists.
        increment_clicks(short_id) -> UrlRecord:
            Atomic counter bump. Raises NotFoundError if no record matches.
        list_all() -> list[UrlRecord]:
            All records, most recently created first.

    Every method raises StorageError when the underlying store fails.
    """

    def init_db(self) -> None:
        """Prepare the store for use. Must be idempotent."""

    def close(self) -> None:
        """Release any resources held by the store."""

    @abstractmethod
    def find_by_original_url(self, url: str) -> Optional[UrlRecord]:
        """Get the record pointing at an original URL, if any."""

    @abstractmethod
    def find_by_short_id(self, short_id: str) -> Optional[UrlRecord]:
        """Get the record for a short ID, if any."""

    @abstractmethod
    def insert(self, record: UrlRecord) -> UrlRecord:
        """Persist a new record.

        Raises:
            DuplicateKeyError: If a record with the same short ID exists.
        """

    @abstractmethod
    def increment_clicks(self, short_id: str) -> UrlRecord:
        """Atomically add one click to a record and return the updated record.

        Raises:
            NotFoundError: If no record matches the short ID.
        """

    @abstractmethod
    def list_all(self) -> list[UrlRecord]:
        """Get all records ordered by creation time, newest first."""
