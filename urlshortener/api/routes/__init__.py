"""API route modules."""

from .index import router as index_router
from .urls import router as urls_router

__all__ = ["index_router", "urls_router"]
