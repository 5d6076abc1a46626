"""
In-memory backend adapter (dev/tests).

Stub implementation of BackendPort holding tables as lists of dicts.
Supports the subset of the query language the app uses: column lists,
one-level embedded resources such as ``categories ( name )``, equality
filters and single-column ordering.

Failures can be injected per table to exercise the read-path fallbacks.
"""

from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from verdant.domain.entities import AuthUser
from verdant.ports.backend import BackendError, Row

logger = logging.getLogger(__name__)

_EMBED_RE = re.compile(r"^(?P<table>\w+)\s*\((?P<columns>.*)\)$", re.DOTALL)

# embedded table -> foreign key column on the parent row
DEFAULT_RELATIONS = {"categories": "category_id", "user_profiles": "user_id"}


def split_columns(columns: str) -> list[str]:
    """Split a select list on top-level commas."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in columns:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return [p for p in parts if p]


@dataclass
class InMemoryBackend:
    tables: dict[str, list[Row]] = field(default_factory=dict)
    users: dict[str, AuthUser] = field(default_factory=dict)
    files: dict[tuple[str, str], bytes] = field(default_factory=dict)
    relations: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_RELATIONS))
    failing_tables: set[str] = field(default_factory=set)
    fail_auth: bool = False
    fail_storage: bool = False
    base_url: str = "http://localhost:54321"

    def fail_table(self, table: str) -> None:
        self.failing_tables.add(table)

    def _check(self, table: str) -> None:
        if table in self.failing_tables:
            raise BackendError(f'relation "public.{table}" is unavailable', table=table)

    def _project(self, row: Row, columns: str) -> Row:
        if columns.strip() == "*":
            return copy.deepcopy(row)
        out: Row = {}
        for col in split_columns(columns):
            match = _EMBED_RE.match(col)
            if match:
                embedded = match.group("table")
                out[embedded] = self._embed(row, embedded, match.group("columns"))
            else:
                out[col] = copy.deepcopy(row.get(col))
        return out

    def _embed(self, row: Row, table: str, columns: str) -> Row | None:
        fk = self.relations.get(table)
        if fk is None:
            raise BackendError(f"No relationship to '{table}'", table=table)
        self._check(table)
        for candidate in self.tables.get(table, []):
            if candidate.get("id") == row.get(fk):
                return self._project(candidate, columns)
        return None

    def select(
        self,
        table: str,
        columns: str = "*",
        *,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
    ) -> list[Row]:
        self._check(table)
        rows = [
            r
            for r in self.tables.get(table, [])
            if all(r.get(k) == v for k, v in (filters or {}).items())
        ]
        if order_by:
            rows = sorted(
                rows,
                key=lambda r: (r.get(order_by) is None, r.get(order_by)),
                reverse=not ascending,
            )
        return [self._project(r, columns) for r in rows]

    def insert(self, table: str, row: Row) -> Row:
        self._check(table)
        stored = {"id": str(uuid4()), **copy.deepcopy(row)}
        self.tables.setdefault(table, []).append(stored)
        return copy.deepcopy(stored)

    def update(self, table: str, row: Row, *, filters: dict[str, Any]) -> list[Row]:
        self._check(table)
        updated = []
        for existing in self.tables.get(table, []):
            if all(existing.get(k) == v for k, v in filters.items()):
                existing.update(copy.deepcopy(row))
                updated.append(copy.deepcopy(existing))
        return updated

    def get_user(self, access_token: str) -> AuthUser | None:
        if self.fail_auth:
            raise BackendError("Auth service unavailable")
        return self.users.get(access_token)

    def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        if self.fail_storage:
            raise BackendError(f"Bucket '{bucket}' rejected upload")
        self.files[(bucket, path)] = data
        logger.debug("Stored %s in memory bucket %s (%s)", path, bucket, content_type)
        return path

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{bucket}/{path}"
