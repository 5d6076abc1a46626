"""
Catalog component - Port interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol

from verdant.ports.backend import Row


class CatalogBackendPort(Protocol):
    """Read access to the products and categories tables."""

    def select(
        self,
        table: str,
        columns: str = "*",
        *,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
    ) -> list[Row]: ...
