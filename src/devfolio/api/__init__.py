"""API routes module.

This module contains FastAPI routers for devfolio:
- github: GitHub profile statistics
- site: Site metadata such as navigation links
"""

from fastapi import APIRouter

from .github import router as github_router
from .site import router as site_router

api_router = APIRouter()

api_router.include_router(github_router, prefix="/github", tags=["github"])
api_router.include_router(site_router, prefix="/site", tags=["site"])

__all__ = ["api_router"]
