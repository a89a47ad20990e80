"""Site-level schemas."""

from pydantic import BaseModel, Field


class NavLink(BaseModel):
    """A link in the site navigation bar."""

    href: str = Field(..., description="Target path or URL")
    label: str = Field(..., description="Text shown for the link")


class NavigationResponse(BaseModel):
    """Schema for the navigation endpoint."""

    links: list[NavLink] = Field(default_factory=list)
