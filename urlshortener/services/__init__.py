"""Services package - shortening, redirect, stats and listing logic."""

from .shortening import ShorteningService, ShortenResult
from .redirect import RedirectService
from .stats import StatsService
from .listing import ListingService

__all__ = [
    "ShorteningService",
    "ShortenResult",
    "RedirectService",
    "StatsService",
    "ListingService",
]
