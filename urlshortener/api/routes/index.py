"""API documentation and health check routes."""

from fastapi import APIRouter, Request

from ...schemas.url import HealthResponse

router = APIRouter(tags=["Docs"])

ENDPOINTS = {
    "shortenUrl": {
        "method": "POST",
        "path": "/api/url/shorten",
        "description": "Create a short URL",
        "body": {"originalUrl": "string"},
        "response": {"status": "success", "shortUrl": "string"},
    },
    "redirect": {
        "method": "GET",
        "path": "/api/url/:shortId",
        "description": "Redirect to original URL (302 redirect)",
    },
    "getUrlStats": {
        "method": "GET",
        "path": "/api/url/:shortId/stats",
        "description": "Get URL analytics and statistics",
    },
    "getAllUrls": {
        "method": "GET",
        "path": "/api/url/",
        "description": "Get all shortened URLs with analytics",
    },
}

AVAILABLE_ROUTES = {
    "home": "GET /",
    "health": "GET /health",
    **{name: f"{spec['method']} {spec['path']}" for name, spec in ENDPOINTS.items()},
}


@router.get("/", summary="API documentation")
async def api_index(request: Request) -> dict:
    """Describe the available endpoints."""
    return {
        "status": "success",
        "message": f"{request.app.title} is running",
        "version": request.app.version,
        "endpoints": ENDPOINTS,
    }


@router.get("/health", response_model=HealthResponse, tags=["Health"], summary="Health check")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status.
    """
    return {"status": "healthy"}
