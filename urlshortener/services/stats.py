"""Stats service."""

import logging

from ..core.exceptions import NotFoundError
from ..core.store import UrlStore
from ..models.url import UrlRecord
from ..utils.shortener import validate_short_id

logger = logging.getLogger(__name__)


class StatsService:
    """Read-only access to a single short URL's metadata."""

    def __init__(self, store: UrlStore):
        self.store = store

    def get_stats(self, short_id: str) -> UrlRecord:
        """Get the record for a short ID without touching its counter.

        Raises:
            NotFoundError: If no record matches.
        """
        record = self.store.find_by_short_id(short_id) if validate_short_id(short_id) else None
        if record is None:
            logger.warning(f"URL not found for stats: {short_id}")
            raise NotFoundError()
        return record
