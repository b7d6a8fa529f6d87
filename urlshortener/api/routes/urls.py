"""URL shortening API routes.

This module contains all endpoints for URL operations:
- Create short URL (POST /api/url/shorten)
- Redirect to original URL (GET /api/url/{short_id})
- Get URL stats (GET /api/url/{short_id}/stats)
- List all URLs (GET /api/url/)
"""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import RedirectResponse

from ...models.url import ErrorResponse, ShortenRequest, UrlRecord
from ...schemas.url import (
    ShortenResponse,
    URLList,
    URLListResponse,
    URLStats,
    URLStatsResponse,
)
from ...services import ListingService, RedirectService, ShorteningService, StatsService
from ...utils.shortener import create_short_url
from ..dependencies import (
    get_listing_service,
    get_redirect_service,
    get_shortening_service,
    get_stats_service,
)

URL_PREFIX = "/api/url"

router = APIRouter(prefix=URL_PREFIX, tags=["URLs"])


def get_base_url(request: Request) -> str:
    """Get base URL of the short URL routes from request.

    Args:
        request: FastAPI request object.

    Returns:
        Base URL string, e.g. "http://localhost:5000/api/url".
    """
    return f"{str(request.base_url).rstrip('/')}{URL_PREFIX}"


def to_stats(record: UrlRecord, base_url: str) -> URLStats:
    return URLStats(
        short_id=record.short_id,
        original_url=record.original_url,
        short_url=create_short_url(base_url, record.short_id),
        clicks=record.clicks,
        created_at=record.created_at,
    )


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    response_model_exclude_none=True,
    status_code=201,
    responses={
        200: {"model": ShortenResponse, "description": "URL already shortened"},
        201: {"description": "Short URL created successfully"},
        400: {"model": ErrorResponse, "description": "Missing or invalid URL"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create a short URL",
    description="Create a short URL for a long URL, or return the existing one.",
)
async def shorten_url(
    request: Request,
    response: Response,
    url_data: ShortenRequest,
    service: ShorteningService = Depends(get_shortening_service),
) -> ShortenResponse:
    """Create a short URL from a long URL.

    Args:
        request: FastAPI request object.
        response: Outgoing response, its status is downgraded to 200 on reuse.
        url_data: URL creation data.
        service: Shortening service.

    Returns:
        Short URL, tagged "success" when created or "exists" when reused.
    """
    result = service.shorten(url_data.original_url)
    short_url = create_short_url(get_base_url(request), result.record.short_id)

    if not result.created:
        response.status_code = 200
        return ShortenResponse(
            status="exists",
            message="URL already exists in the database",
            short_url=short_url,
        )
    return ShortenResponse(status="success", short_url=short_url)


@router.get(
    "/",
    response_model=URLListResponse,
    responses={500: {"model": ErrorResponse, "description": "Internal server error"}},
    summary="List all URLs",
    description="List all short URLs, most recent first.",
)
@router.get("", response_model=URLListResponse, include_in_schema=False)
async def list_urls(
    request: Request,
    service: ListingService = Depends(get_listing_service),
) -> URLListResponse:
    """List all URLs."""
    base_url = get_base_url(request)
    urls = [to_stats(record, base_url) for record in service.list_urls()]
    return URLListResponse(data=URLList(count=len(urls), urls=urls))


@router.get(
    "/{short_id}",
    response_class=RedirectResponse,
    status_code=302,
    responses={
        302: {"description": "Redirect to original URL"},
        404: {"model": ErrorResponse, "description": "Short URL not found"},
    },
    summary="Redirect to original URL",
    description="Redirect to the original URL and count the click.",
)
async def redirect_to_url(
    short_id: str,
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectResponse:
    """Redirect to the original URL.

    Args:
        short_id: The short URL identifier.
        service: Redirect service.

    Returns:
        Redirect response to original URL.
    """
    original_url = service.resolve(short_id)
    return RedirectResponse(url=original_url, status_code=302)


@router.get(
    "/{short_id}/stats",
    response_model=URLStatsResponse,
    responses={
        200: {"description": "URL statistics retrieved"},
        404: {"model": ErrorResponse, "description": "Short URL not found"},
    },
    summary="Get URL statistics",
    description="Get click count and creation time of a short URL.",
)
async def get_url_stats(
    short_id: str,
    request: Request,
    service: StatsService = Depends(get_stats_service),
) -> URLStatsResponse:
    """Get URL statistics.

    Args:
        short_id: The short URL identifier.
        request: FastAPI request object.
        service: Stats service.

    Returns:
        URL statistics.
    """
    record = service.get_stats(short_id)
    return URLStatsResponse(data=to_stats(record, get_base_url(request)))
