from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from urlgen.services.url_service import URLService
from urlgen.dependencies import get_url_service

router = APIRouter(tags=["redirect"])


@router.get("/{short_code}")
def redirect_to_long_url(
    short_code: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the original URL.

    Served from the in-memory cache when possible; a miss falls through
    to the database and warms the cache.
    """
    long_url = url_service.get_long_url_for_redirect(short_code)

    if not long_url:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )

    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)
