"""
Product actions component - Port interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol

from verdant.ports.backend import Row


class ProductWriteBackendPort(Protocol):
    """Write access to the products table and the image bucket."""

    def insert(self, table: str, row: Row) -> Row: ...

    def update(self, table: str, row: Row, *, filters: dict[str, Any]) -> list[Row]: ...

    def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> str: ...

    def public_url(self, bucket: str, path: str) -> str: ...
