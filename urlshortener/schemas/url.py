"""Response schemas for URL Shortener Service."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ..models.url import CamelModel


class ShortenResponse(CamelModel):
    """Response model for a shortened URL, new or already known."""

    status: str
    short_url: str
    message: Optional[str] = None


class URLStats(CamelModel):
    """Metadata about a single short URL."""

    short_id: str
    original_url: str
    short_url: str
    clicks: int
    created_at: datetime


class URLStatsResponse(BaseModel):
    """Response model for URL stats."""

    status: str = "success"
    data: URLStats


class URLList(BaseModel):
    """All short URLs, most recent first."""

    count: int
    urls: list[URLStats]


class URLListResponse(BaseModel):
    """Response model for URL listing."""

    status: str = "success"
    data: URLList


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
