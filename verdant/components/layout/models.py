"""
Layout component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from verdant.domain.entities import AuthUser, Category

SITE_TITLE = "Verdant Market"
SITE_DESCRIPTION = "Fresh and organic products delivered to you."


@dataclass(frozen=True)
class PrimeLayoutInput:
    """Session token of the current request, if any."""

    access_token: str | None = None


@dataclass(frozen=True)
class LayoutData:
    """Data every page's navigation is rendered with."""

    user: AuthUser | None
    categories: list[Category] = field(default_factory=list)
    title: str = SITE_TITLE
    description: str = SITE_DESCRIPTION
