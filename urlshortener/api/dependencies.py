"""FastAPI dependency providers for the URL services."""

from fastapi import Depends, Request

from ..core.config import Settings
from ..core.database import get_db
from ..core.store import UrlStore
from ..services import ListingService, RedirectService, ShorteningService, StatsService


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_shortening_service(
    db: UrlStore = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> ShorteningService:
    return ShorteningService(
        db,
        short_id_length=settings.short_id_length,
        max_attempts=settings.max_short_id_attempts,
    )


def get_redirect_service(db: UrlStore = Depends(get_db)) -> RedirectService:
    return RedirectService(db)


def get_stats_service(db: UrlStore = Depends(get_db)) -> StatsService:
    return StatsService(db)


def get_listing_service(db: UrlStore = Depends(get_db)) -> ListingService:
    return ListingService(db)
