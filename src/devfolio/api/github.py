"""GitHub stats API routes.

Serves the portfolio's GitHub profile statistics, or a hand-picked list
of repositories, for the configured GitHub user.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from devfolio.core.config import AppSettings, get_app_settings
from devfolio.core.exceptions import FetchError
from devfolio.core.stats import StatsAggregator, get_stats_aggregator
from devfolio.schemas.stats import ErrorResponse, RepoSummary, StatsSnapshot
from devfolio.utils import get_logger

logger = get_logger(__name__)
router = APIRouter()

FAILURE_MESSAGE = "Failed to fetch GitHub stats"


def parse_repo_list(raw: str) -> list[str]:
    """Split a comma separated ``repos`` parameter, dropping blank entries."""
    return [item.strip() for item in raw.split(",") if item.strip()]


def _error_response(details: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=FAILURE_MESSAGE, details=details).model_dump(),
    )


@router.get("/stats", response_model=StatsSnapshot | list[RepoSummary])
async def get_github_stats(
    response: Response,
    repos: str | None = Query(
        default=None,
        description="Comma separated repository names (name or owner/name)",
    ),
    aggregator: StatsAggregator = Depends(get_stats_aggregator),  # noqa: B008
    settings: AppSettings = Depends(get_app_settings),  # noqa: B008
):
    """Get GitHub stats for the configured user.

    Args:
        response: Outgoing response, used to set caching headers
        repos: When given, only these repositories are returned
        aggregator: Stats aggregator
        settings: Application settings

    Returns:
        A list of repository summaries when ``repos`` is given, otherwise
        the full stats snapshot
    """
    username = settings.github_username

    try:
        if repos:
            result: StatsSnapshot | list[RepoSummary] = (
                await aggregator.fetch_specific_repos(username, parse_repo_list(repos))
            )
        else:
            result = await aggregator.fetch_github_stats(username)
    except FetchError as e:
        logger.opt(exception=e).error(f"GitHub stats API error: {e}")
        return _error_response(str(e))
    except Exception as e:
        logger.opt(exception=e).error(f"Unexpected GitHub stats API error: {e}")
        return _error_response(
            str(e) or "An unexpected error occurred while fetching GitHub stats."
        )

    response.headers["Cache-Control"] = settings.stats_cache_control
    return result
