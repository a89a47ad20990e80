"""GitHub statistics schemas.

Snapshot models are frozen and serialize with camelCase keys, which is the
shape the frontend consumes.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class RepoSummary(_CamelModel):
    """Flat projection of a GitHub repository."""

    name: str = Field(..., description="Repository name")
    description: str | None = Field(None, description="Repository description")
    url: str = Field(..., description="GitHub URL")
    stars: int = Field(default=0, description="Stargazer count")
    forks: int = Field(default=0, description="Fork count")


class LanguageCount(_CamelModel):
    """How many repositories list a language among their top languages."""

    name: str
    count: int


class UserProfile(_CamelModel):
    """Public profile fields of a GitHub user."""

    name: str | None = None
    login: str
    avatar_url: str | None = None
    bio: str | None = None
    company: str | None = None
    location: str | None = None
    website_url: str | None = None
    twitter_username: str | None = None
    followers: int = 0
    following: int = 0


class AggregateStats(_CamelModel):
    """Counters summed or copied from the GitHub payload."""

    repositories: int = Field(default=0, description="Owned public repositories")
    stars: int = Field(default=0, description="Stars across fetched repositories")
    forks: int = Field(default=0, description="Forks across fetched repositories")
    contributions: int = Field(default=0, description="Commit contributions")
    pull_requests: int = Field(default=0, description="Pull request contributions")
    issues: int = Field(default=0, description="Issue contributions")


class StatsSnapshot(_CamelModel):
    """Flattened GitHub statistics for one user."""

    user: UserProfile
    stats: AggregateStats
    languages: list[LanguageCount] = Field(default_factory=list)
    top_repositories: list[RepoSummary] = Field(default_factory=list)
    pinned_repositories: list[RepoSummary] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error envelope returned on internal failures."""

    error: str
    details: str
