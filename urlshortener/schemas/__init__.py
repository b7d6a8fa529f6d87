"""Schemas package for URL Shortener Service."""

from .url import (
    ShortenResponse,
    URLStats,
    URLStatsResponse,
    URLList,
    URLListResponse,
    HealthResponse,
)

__all__ = [
    "ShortenResponse",
    "URLStats",
    "URLStatsResponse",
    "URLList",
    "URLListResponse",
    "HealthResponse",
]
