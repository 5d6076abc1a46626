"""
Layout component - Per-request data for the root layout.

Shell Layer - resolves the signed-in user and the category navigation.
"""

from __future__ import annotations

import logging

from verdant.components.catalog import run_list_categories
from verdant.domain.entities import AuthUser
from verdant.ports.backend import BackendError, BackendPort

from .models import LayoutData, PrimeLayoutInput

logger = logging.getLogger(__name__)


def _current_user(access_token: str | None, backend: BackendPort) -> AuthUser | None:
    if not access_token:
        return None
    try:
        return backend.get_user(access_token)
    except BackendError as e:
        logger.warning("Could not resolve current user: %s", e)
        return None


def run_prime_layout(input_data: PrimeLayoutInput, backend: BackendPort) -> LayoutData:
    """
    Fetch the current user and all categories ordered by name.

    A failed category query yields no categories; a failed user lookup
    renders the page signed out.
    """
    return LayoutData(
        user=_current_user(input_data.access_token, backend),
        categories=run_list_categories(backend),
    )
