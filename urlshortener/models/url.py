"""Pydantic models for URL Shortener Service."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanging camelCase keys with API clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UrlRecord(CamelModel):
    """A stored mapping from a short ID to its original URL."""

    short_id: str
    original_url: str
    clicks: int = Field(0, ge=0)
    created_at: datetime


class ShortenRequest(CamelModel):
    """Model for creating a short URL."""

    original_url: Optional[str] = Field(
        None, description="The original long URL to shorten"
    )


class ErrorResponse(BaseModel):
    """Model for error responses."""

    status: str = "error"
    message: str
