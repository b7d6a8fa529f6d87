"""Listing service."""

from ..core.store import UrlStore
from ..models.url import UrlRecord


class ListingService:
    """List every stored short URL."""

    def __init__(self, store: UrlStore):
        self.store = store

    def list_urls(self) -> list[UrlRecord]:
        """Get all records, most recently created first."""
        return self.store.list_all()
