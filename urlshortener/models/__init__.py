"""Models package for URL Shortener Service."""

from .url import CamelModel, UrlRecord, ShortenRequest, ErrorResponse

__all__ = ["CamelModel", "UrlRecord", "ShortenRequest", "ErrorResponse"]
