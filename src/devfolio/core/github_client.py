"""GitHub GraphQL API client wrapper.

This module provides the queries used for the portfolio stats and an
async client that posts them to the GitHub GraphQL endpoint.
"""

from typing import Any

import httpx

from devfolio.utils import get_logger

logger = get_logger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"

USER_STATS_QUERY = """
query getUserStats($username: String!) {
  user(login: $username) {
    name
    login
    avatarUrl
    bio
    company
    location
    websiteUrl
    twitterUsername
    followers {
      totalCount
    }
    following {
      totalCount
    }
    repositories(first: 100, ownerAffiliations: [OWNER], privacy: PUBLIC, orderBy: {field: STARGAZERS, direction: DESC}) {
      totalCount
      nodes {
        name
        description
        url
        stargazerCount
        forkCount
        languages(first: 5, orderBy: {field: SIZE, direction: DESC}) {
          edges {
            node {
              name
            }
          }
        }
      }
    }
    pinnedItems(first: 6, types: REPOSITORY) {
      nodes {
        ... on Repository {
          name
          description
          url
          stargazerCount
          forkCount
        }
      }
    }
    contributionsCollection {
      totalCommitContributions
      totalPullRequestContributions
      totalIssueContributions
    }
  }
}
"""

SPECIFIC_REPO_QUERY = """
query getSpecificRepo($username: String!, $repoName: String!) {
  repository(owner: $username, name: $repoName) {
    name
    description
    url
    stargazerCount
    forkCount
  }
}
"""


class GitHubGraphQLClient:
    """Async GitHub GraphQL client.

    Supports Personal Access Token authentication. Status handling is left
    to callers, which decide whether a failure is fatal or skippable.

    Usage:
        async with GitHubGraphQLClient(access_token="ghp_xxx") as client:
            response = await client.execute(USER_STATS_QUERY, {"username": "octocat"})
    """

    def __init__(
        self,
        access_token: str,
        endpoint: str = GITHUB_GRAPHQL_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize GitHub client.

        Args:
            access_token: Personal Access Token for GitHub API
            endpoint: GraphQL endpoint URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._access_token = access_token
        self._endpoint = endpoint
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            if self._access_token:
                headers["Authorization"] = f"Bearer {self._access_token}"

            self._client = httpx.AsyncClient(
                headers=headers,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Post a GraphQL query.

        Args:
            query: GraphQL document
            variables: Query variables

        Returns:
            Raw HTTP response

        Raises:
            httpx.HTTPError: On transport failures
        """
        return await self.client.post(
            self._endpoint,
            json={"query": query, "variables": variables or {}},
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GitHubGraphQLClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()


def extract_graphql_errors(payload: Any) -> list[str]:
    """Collect error messages from a GraphQL response payload."""
    if not isinstance(payload, dict):
        return []
    errors = payload.get("errors") or []
    return [
        str(error.get("message", error)) if isinstance(error, dict) else str(error)
        for error in errors
    ]
