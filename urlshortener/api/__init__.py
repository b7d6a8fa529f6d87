"""API package for URL Shortener Service."""

from .routes import index_router, urls_router

__all__ = ["index_router", "urls_router"]
