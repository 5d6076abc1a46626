from typing import Any, Protocol

from verdant.domain.entities import AuthUser

Row = dict[str, Any]


class BackendError(Exception):
    """Raised by backend adapters when a query, auth or storage call fails."""

    def __init__(self, message: str, *, table: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.table = table


class BackendPort(Protocol):
    """Table queries, auth lookup and file storage of the hosted backend."""

    def select(
        self,
        table: str,
        columns: str = "*",
        *,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
    ) -> list[Row]:
        """Select rows. Raises BackendError."""
        ...

    def insert(self, table: str, row: Row) -> Row:
        """Insert a row and return it as stored."""
        ...

    def update(self, table: str, row: Row, *, filters: dict[str, Any]) -> list[Row]:
        """Update matching rows and return them."""
        ...

    def get_user(self, access_token: str) -> AuthUser | None:
        """Resolve the authenticated user for a session token."""
        ...

    def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        """Store a file and return its storage path."""
        ...

    def public_url(self, bucket: str, path: str) -> str: ...
