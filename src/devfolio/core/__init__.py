"""Core business logic module.

This module contains the core services and logic for devfolio:
- config: Application configuration
- github_client: GitHub GraphQL API wrapper
- cache: In-memory snapshot cache with TTL
- stats: Stats aggregation and reshaping
"""

from .cache import SnapshotCache, get_snapshot_cache, reset_snapshot_cache
from .config import (
    AppSettings,
    get_app_settings,
    reload_all_settings,
    warn_missing_github_config,
)
from .exceptions import FetchError, UnexpectedError, UpstreamError
from .github_client import GitHubGraphQLClient
from .stats import (
    StatsAggregator,
    close_stats_aggregator,
    create_stats_aggregator,
    get_stats_aggregator,
)

__all__ = [
    # Config
    "AppSettings",
    "get_app_settings",
    "reload_all_settings",
    "warn_missing_github_config",
    # Cache
    "SnapshotCache",
    "get_snapshot_cache",
    "reset_snapshot_cache",
    # Errors
    "FetchError",
    "UpstreamError",
    "UnexpectedError",
    # GitHub
    "GitHubGraphQLClient",
    # Stats
    "StatsAggregator",
    "create_stats_aggregator",
    "get_stats_aggregator",
    "close_stats_aggregator",
]
