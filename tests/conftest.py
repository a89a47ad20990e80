"""Shared fixtures: builders for GitHub GraphQL payloads."""

import pytest


def _repo_node(
    name: str,
    stars: int = 0,
    forks: int = 0,
    languages: list[str] | None = None,
    description: str | None = "desc",
) -> dict:
    return {
        "name": name,
        "description": description,
        "url": f"https://github.com/octocat/{name}",
        "stargazerCount": stars,
        "forkCount": forks,
        "languages": {"edges": [{"node": {"name": lang}} for lang in languages or []]},
    }


def _user_payload(
    repos: list[dict] | None = None,
    pinned: list[dict] | None = None,
    login: str = "octocat",
) -> dict:
    repos = repos or []
    return {
        "name": "The Octocat",
        "login": login,
        "avatarUrl": "https://avatars.githubusercontent.com/u/583231",
        "bio": None,
        "company": "@github",
        "location": "San Francisco",
        "websiteUrl": "https://github.blog",
        "twitterUsername": None,
        "followers": {"totalCount": 42},
        "following": {"totalCount": 7},
        "repositories": {"totalCount": len(repos), "nodes": repos},
        "pinnedItems": {"nodes": pinned or []},
        "contributionsCollection": {
            "totalCommitContributions": 120,
            "totalPullRequestContributions": 15,
            "totalIssueContributions": 4,
        },
    }


@pytest.fixture
def repo_node():
    """Builder for a GraphQL repository node."""
    return _repo_node


@pytest.fixture
def user_payload():
    """Builder for the ``user`` object of the stats query."""
    return _user_payload
