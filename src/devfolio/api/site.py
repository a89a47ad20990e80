"""Site metadata API routes."""

from fastapi import APIRouter, Depends

from devfolio.core.config import AppSettings, get_app_settings
from devfolio.schemas.site import NavigationResponse

router = APIRouter()


@router.get("/navigation", response_model=NavigationResponse)
async def get_navigation(
    settings: AppSettings = Depends(get_app_settings),  # noqa: B008
):
    """Links rendered in the site navigation bar."""
    return NavigationResponse(links=settings.nav_links)
