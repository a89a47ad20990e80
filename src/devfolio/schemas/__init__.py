"""Pydantic schemas for API responses.

This module contains Pydantic models for:
- stats: GitHub statistics snapshot and repository summaries
- site: Navigation links
"""

from .site import NavigationResponse, NavLink
from .stats import (
    AggregateStats,
    ErrorResponse,
    LanguageCount,
    RepoSummary,
    StatsSnapshot,
    UserProfile,
)

__all__ = [
    # Stats
    "AggregateStats",
    "ErrorResponse",
    "LanguageCount",
    "RepoSummary",
    "StatsSnapshot",
    "UserProfile",
    # Site
    "NavLink",
    "NavigationResponse",
]
