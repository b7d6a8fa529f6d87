"""Shortening service.

Turns a submitted long URL into a short ID, either by reusing the record
already stored for that URL or by minting a new one.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from ..core.exceptions import DuplicateKeyError, InvalidURLError, StorageConflictError
from ..core.store import UrlStore
from ..models.url import UrlRecord
from ..utils.shortener import (
    DEFAULT_SHORT_ID_LENGTH,
    clean_url,
    generate_short_id,
    is_valid_url,
    truncate_url,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5


@dataclass(frozen=True)
class ShortenResult:
    """Outcome of a shortening request.

    Attributes:
        record: The stored record for the URL.
        created: True if the record was minted by this request, False if an
            existing record was reused.
    """

    record: UrlRecord
    created: bool


class ShorteningService:
    """Create or reuse short IDs for original URLs."""

    def __init__(
        self,
        store: UrlStore,
        short_id_length: int = DEFAULT_SHORT_ID_LENGTH,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        generator: Callable[[int], str] = generate_short_id,
    ):
        """Initialize the service.

        Args:
            store: Record store.
            short_id_length: Length of newly generated short IDs.
            max_attempts: How many IDs to try before giving up on a collision.
            generator: Callable producing a random short ID of a given length.
        """
        self.store = store
        self.short_id_length = short_id_length
        self.max_attempts = max_attempts
        self.generator = generator

    def shorten(self, original_url: str | None) -> ShortenResult:
        """Get the short URL record for an original URL.

        Args:
            original_url: The long URL submitted by the client.

        Returns:
            The existing record tagged created=False, or a new record
            tagged created=True.

        Raises:
            InvalidURLError: If the URL is missing or malformed.
            StorageConflictError: If every generated short ID collided.
            StorageError: If the store fails.
        """
        if not original_url:
            raise InvalidURLError("URL is required")
        if not is_valid_url(original_url):
            logger.warning(f"Invalid URL format: {truncate_url(original_url)}")
            raise InvalidURLError("Invalid URL format")
        original_url = clean_url(original_url)

        existing = self.store.find_by_original_url(original_url)
        if existing is not None:
            logger.info(
                f"URL already exists: {existing.short_id} -> {truncate_url(original_url)}"
            )
            return ShortenResult(record=existing, created=False)

        for attempt in range(1, self.max_attempts + 1):
            record = UrlRecord(
                short_id=self.generator(self.short_id_length),
                original_url=original_url,
                clicks=0,
                created_at=datetime.now(timezone.utc),
            )
            try:
                stored = self.store.insert(record)
            except DuplicateKeyError:
                logger.warning(
                    f"Short ID collision on {record.short_id} "
                    f"(attempt {attempt}/{self.max_attempts})"
                )
                continue
            logger.info(
                f"URL shortened: {stored.short_id} -> {truncate_url(original_url)}"
            )
            return ShortenResult(record=stored, created=True)

        logger.error(f"Gave up generating a short ID after {self.max_attempts} attempts")
        raise StorageConflictError()
