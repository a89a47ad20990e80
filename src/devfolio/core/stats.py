"""GitHub statistics aggregation.

Fetches a user's profile, repositories, pinned items and contribution
counts from the GitHub GraphQL API and flattens them into a
``StatsSnapshot``. Assembled snapshots are kept in a ``SnapshotCache``.
"""

import asyncio
from collections import Counter
from collections.abc import Iterable
from typing import Any

from devfolio.core.cache import SnapshotCache, get_snapshot_cache
from devfolio.core.config import AppSettings, get_app_settings
from devfolio.core.exceptions import FetchError, UnexpectedError, UpstreamError
from devfolio.core.github_client import (
    SPECIFIC_REPO_QUERY,
    USER_STATS_QUERY,
    GitHubGraphQLClient,
    extract_graphql_errors,
)
from devfolio.schemas.stats import (
    AggregateStats,
    LanguageCount,
    RepoSummary,
    StatsSnapshot,
    UserProfile,
)
from devfolio.utils import get_logger

logger = get_logger(__name__)

TOP_REPOSITORIES_LIMIT = 5


def normalize_repo_name(repo: str) -> str:
    """Reduce ``owner/name`` to ``name``; bare names pass through."""
    if "/" in repo:
        return repo.rsplit("/", 1)[-1] or repo
    return repo


def to_repo_summary(node: dict[str, Any]) -> RepoSummary:
    """Project a GraphQL repository node onto ``RepoSummary``."""
    return RepoSummary(
        name=node["name"],
        description=node.get("description"),
        url=node["url"],
        stars=node.get("stargazerCount") or 0,
        forks=node.get("forkCount") or 0,
    )


def _repo_nodes(connection: dict[str, Any] | None) -> list[dict[str, Any]]:
    # GraphQL connections may contain null nodes, and pinned items that are
    # not repositories come back as empty objects.
    nodes = (connection or {}).get("nodes") or []
    return [node for node in nodes if node and node.get("name")]


def _total_count(connection: dict[str, Any] | None) -> int:
    return (connection or {}).get("totalCount") or 0


def _repo_languages(node: dict[str, Any]) -> list[str]:
    edges = (node.get("languages") or {}).get("edges") or []
    names = [
        edge["node"]["name"]
        for edge in edges
        if edge and edge.get("node") and edge["node"].get("name")
    ]
    # A language counts once per repository
    return list(dict.fromkeys(names))


def build_language_histogram(nodes: Iterable[dict[str, Any]]) -> list[LanguageCount]:
    """Count, per repository, each of its top languages once.

    Returns:
        Languages sorted by count descending; ties keep first-seen order
    """
    counter: Counter[str] = Counter()
    for node in nodes:
        counter.update(_repo_languages(node))
    return [
        LanguageCount(name=name, count=count) for name, count in counter.most_common()
    ]


def build_snapshot(user: dict[str, Any]) -> StatsSnapshot:
    """Flatten the ``user`` object of a stats query into a snapshot."""
    repositories = user.get("repositories") or {}
    repo_nodes = _repo_nodes(repositories)
    contributions = user.get("contributionsCollection") or {}

    return StatsSnapshot(
        user=UserProfile(
            name=user.get("name"),
            login=user["login"],
            avatar_url=user.get("avatarUrl"),
            bio=user.get("bio"),
            company=user.get("company"),
            location=user.get("location"),
            website_url=user.get("websiteUrl"),
            twitter_username=user.get("twitterUsername"),
            followers=_total_count(user.get("followers")),
            following=_total_count(user.get("following")),
        ),
        stats=AggregateStats(
            repositories=_total_count(repositories),
            stars=sum(node.get("stargazerCount") or 0 for node in repo_nodes),
            forks=sum(node.get("forkCount") or 0 for node in repo_nodes),
            contributions=contributions.get("totalCommitContributions") or 0,
            pull_requests=contributions.get("totalPullRequestContributions") or 0,
            issues=contributions.get("totalIssueContributions") or 0,
        ),
        languages=build_language_histogram(repo_nodes),
        top_repositories=[
            to_repo_summary(node) for node in repo_nodes[:TOP_REPOSITORIES_LIMIT]
        ],
        pinned_repositories=[
            to_repo_summary(node) for node in _repo_nodes(user.get("pinnedItems"))
        ],
    )


class StatsAggregator:
    """Cached access to a user's GitHub statistics.

    Usage:
        aggregator = StatsAggregator(client, SnapshotCache(ttl_seconds=600))
        snapshot = await aggregator.fetch_github_stats("octocat")
        repos = await aggregator.fetch_specific_repos("octocat", ["hello-world"])
    """

    def __init__(self, client: GitHubGraphQLClient, cache: SnapshotCache):
        self.client = client
        self.cache = cache

    async def fetch_github_stats(self, username: str) -> StatsSnapshot:
        """Return the stats snapshot for a user.

        A live cache entry is returned without touching the network. On a
        miss the snapshot is fetched, assembled and cached.

        Args:
            username: GitHub login

        Returns:
            Assembled snapshot

        Raises:
            UpstreamError: Non-success status or no ``user`` in the payload
            UnexpectedError: Any other failure
        """
        cached = self.cache.get(username)
        if cached is not None:
            logger.debug(f"Stats cache hit for '{username}'")
            return cached

        try:
            response = await self.client.execute(
                USER_STATS_QUERY, {"username": username}
            )

            if not response.is_success:
                logger.error(
                    f"GitHub API responded with status: {response.status_code} "
                    f"{response.reason_phrase} for user stats of '{username}'. "
                    f"Body: {response.text}"
                )
                raise UpstreamError(
                    f"Failed to fetch from GitHub API (status {response.status_code}). "
                    "Check server logs for details.",
                    status_code=response.status_code,
                )

            payload = response.json()
            data = payload.get("data") if isinstance(payload, dict) else None
            user = data.get("user") if isinstance(data, dict) else None

            if not user:
                errors = extract_graphql_errors(payload)
                logger.warning(
                    f"GitHub API returned invalid or empty data structure for user "
                    f"'{username}'. This could be due to an incorrect username, or the "
                    f"user not existing. Errors: {errors or 'none'}"
                )
                raise UpstreamError(
                    "GitHub API returned invalid data for user stats.",
                    status_code=response.status_code,
                )

            snapshot = build_snapshot(user)
        except FetchError:
            raise
        except Exception as e:
            logger.exception(f"Error fetching GitHub stats for {username}: {e}")
            raise UnexpectedError(str(e) or e.__class__.__name__) from e

        self.cache.set(username, snapshot)
        logger.info(
            f"Cached stats snapshot for '{username}' "
            f"({snapshot.stats.repositories} repos, {snapshot.stats.stars} stars)"
        )
        return snapshot

    async def fetch_specific_repos(
        self,
        username: str,
        repo_names: list[str],
    ) -> list[RepoSummary]:
        """Fetch the named repositories of a user concurrently.

        A repository that cannot be fetched is left out of the result; the
        others are unaffected.

        Args:
            username: Repository owner
            repo_names: Bare names or ``owner/name`` identifiers

        Returns:
            Summaries of the fetched repositories, in input order
        """
        names = [normalize_repo_name(name) for name in repo_names]
        results = await asyncio.gather(
            *(self._fetch_repo(username, name) for name in names)
        )
        return [repo for repo in results if repo is not None]

    async def _fetch_repo(self, username: str, repo_name: str) -> RepoSummary | None:
        try:
            response = await self.client.execute(
                SPECIFIC_REPO_QUERY,
                {"username": username, "repoName": repo_name},
            )

            if not response.is_success:
                logger.warning(
                    f"Could not fetch repo {username}/{repo_name}: Status "
                    f"{response.status_code} {response.reason_phrase}. Body: {response.text}"
                )
                return None

            payload = response.json()
            repository = (payload.get("data") or {}).get("repository")
            if not repository:
                logger.warning(
                    f"Repository {username}/{repo_name} not found or not accessible. "
                    f"Errors: {extract_graphql_errors(payload) or 'none'}"
                )
                return None

            return to_repo_summary(repository)
        except Exception as e:
            logger.warning(f"Error fetching repo {username}/{repo_name}: {e}")
            return None

    async def close(self) -> None:
        """Close the underlying GitHub client."""
        await self.client.close()


def create_stats_aggregator(
    settings: AppSettings | None = None,
    cache: SnapshotCache | None = None,
) -> StatsAggregator:
    """Build an aggregator from settings.

    Args:
        settings: Optional settings override. If not provided, uses global settings.
        cache: Optional cache. If not provided, uses the process-wide cache.
    """
    settings = settings or get_app_settings()
    client = GitHubGraphQLClient(
        access_token=settings.github_token,
        endpoint=settings.github_graphql_url,
        timeout=settings.github_timeout,
    )
    if cache is None:
        cache = get_snapshot_cache()
    return StatsAggregator(client=client, cache=cache)


# Global aggregator instance
_stats_aggregator: StatsAggregator | None = None


async def get_stats_aggregator() -> StatsAggregator:
    """Get global stats aggregator instance.

    Runs on the event loop, so creation never interleaves with another request.
    """
    global _stats_aggregator
    if _stats_aggregator is None:
        _stats_aggregator = create_stats_aggregator()
    return _stats_aggregator


async def close_stats_aggregator() -> None:
    """Close global stats aggregator."""
    global _stats_aggregator
    if _stats_aggregator is not None:
        await _stats_aggregator.close()
        _stats_aggregator = None
