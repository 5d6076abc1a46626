"""
Supabase backend adapter.

Wraps a supabase-py client behind BackendPort. Every SDK failure is
re-raised as BackendError so callers only deal with one exception type.
"""

from __future__ import annotations

import logging
from typing import Any

from supabase import Client, create_client

from verdant.domain.entities import AuthUser
from verdant.ports.backend import BackendError, Row

logger = logging.getLogger(__name__)


class SupabaseBackend:
    """BackendPort implementation over a supabase-py Client."""

    def __init__(self, client: Client):
        self.client = client

    @classmethod
    def connect(cls, url: str, key: str) -> SupabaseBackend:
        if not url or not key:
            raise BackendError("Supabase URL and key must be configured")
        return cls(create_client(url, key))

    def select(
        self,
        table: str,
        columns: str = "*",
        *,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
    ) -> list[Row]:
        query = self.client.table(table).select(columns)
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        if order_by:
            query = query.order(order_by, desc=not ascending)
        try:
            response = query.execute()
        except Exception as e:
            raise BackendError(str(e), table=table) from e
        return list(response.data or [])

    def insert(self, table: str, row: Row) -> Row:
        try:
            response = self.client.table(table).insert(row).execute()
        except Exception as e:
            raise BackendError(str(e), table=table) from e
        data = response.data or []
        return data[0] if data else row

    def update(self, table: str, row: Row, *, filters: dict[str, Any]) -> list[Row]:
        query = self.client.table(table).update(row)
        for column, value in filters.items():
            query = query.eq(column, value)
        try:
            response = query.execute()
        except Exception as e:
            raise BackendError(str(e), table=table) from e
        return list(response.data or [])

    def get_user(self, access_token: str) -> AuthUser | None:
        try:
            response = self.client.auth.get_user(access_token)
        except Exception as e:
            raise BackendError(f"Auth lookup failed: {e}") from e
        if response is None or response.user is None:
            return None
        user = response.user
        return AuthUser(id=user.id, email=user.email, created_at=user.created_at)

    def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        try:
            self.client.storage.from_(bucket).upload(
                path, data, {"content-type": content_type}
            )
        except Exception as e:
            raise BackendError(str(e)) from e
        logger.info("Uploaded %s (%d bytes) to bucket %s", path, len(data), bucket)
        return path

    def public_url(self, bucket: str, path: str) -> str:
        url: str = self.client.storage.from_(bucket).get_public_url(path)
        return url
