"""Redirect service."""

import logging

from ..core.exceptions import NotFoundError
from ..core.store import UrlStore
from ..utils.shortener import truncate_url, validate_short_id

logger = logging.getLogger(__name__)


class RedirectService:
    """Resolve short IDs to original URLs, counting each resolution as a click."""

    def __init__(self, store: UrlStore):
        self.store = store

    def resolve(self, short_id: str) -> str:
        """Record a click and return the original URL for a short ID.

        The click is stored before the URL is returned, a failed increment
        propagates instead of yielding a redirect target.

        Raises:
            NotFoundError: If no record matches.
            StorageError: If the store fails.
        """
        if not validate_short_id(short_id):
            logger.warning(f"Malformed short ID requested: {short_id!r}")
            raise NotFoundError()

        try:
            record = self.store.increment_clicks(short_id)
        except NotFoundError:
            logger.warning(f"URL not found for redirect: {short_id}")
            raise
        logger.info(
            f"Redirecting {short_id} -> {truncate_url(record.original_url)} "
            f"(clicks={record.clicks})"
        )
        return record.original_url
