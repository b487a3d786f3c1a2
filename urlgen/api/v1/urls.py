from fastapi import APIRouter, Depends, HTTPException, status
from urlgen.schemas.url import URLCreate, URLResponse
from urlgen.services.url_service import URLService
from urlgen.dependencies import get_url_service

router = APIRouter(prefix="/urls", tags=["urls"])


@router.post("/", response_model=URLResponse, status_code=status.HTTP_201_CREATED)
def create_short_url(
    url_data: URLCreate,
    url_service: URLService = Depends(get_url_service)
):
    """Create a short URL (returns the existing one for a known long URL)"""
    return url_service.create_short_url(url_data.long_url)


@router.get("/{short_code}", response_model=URLResponse)
def get_url_info(
    short_code: str,
    url_service: URLService = Depends(get_url_service)
):
    """Get information about a short URL"""
    url = url_service.get_url_by_short_code(short_code)
    if not url:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )
    return url


@router.delete("/{short_code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_url(
    short_code: str,
    url_service: URLService = Depends(get_url_service)
):
    """Delete a short URL and invalidate its cache entry"""
    if not url_service.delete_url(short_code):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )
