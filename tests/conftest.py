"""
Shared test fixtures.

Provides an in-memory data service (tables, identity lookups, call log), a client
factory over it, and an async HTTP client wrapping the app via ASGITransport.
"""

from __future__ import annotations

import copy
import itertools
from collections import defaultdict
from collections.abc import Mapping, Sequence
from typing import Any

import httpx
import pytest
import pytest_asyncio

from scrapco_admin.api.app import create_app
from scrapco_admin.credentials import Project
from scrapco_admin.data_service.client import DataServiceError, Order, Row
from scrapco_admin.settings import Settings

ADMIN_TOKEN = "admin-token"
ADMIN_ID = "user-admin"


class FakeStore:
    def __init__(self) -> None:
        self.tables: dict[str, list[Row]] = defaultdict(list)
        self.users: dict[str, Any] = {}
        self.calls: list[tuple[str, str]] = []
        self.failures: dict[tuple[str, str], Exception] = {}
        self._ids = itertools.count(1)

    def seed(self, table: str, *rows: Row) -> None:
        for row in rows:
            stored = dict(row)
            stored.setdefault("id", next(self._ids))
            self.tables[table].append(stored)

    def fail(self, method: str, table: str, error: Exception | str) -> None:
        if isinstance(error, str):
            error = DataServiceError(error, status_code=400)
        self.failures[(method, table)] = error

    def rows(self, table: str, **match: Any) -> list[Row]:
        return [r for r in self.tables[table] if all(r.get(k) == v for k, v in match.items())]

    def record(self, method: str, table: str) -> None:
        self.calls.append((method, table))
        error = self.failures.get((method, table))
        if error is not None:
            raise error

    def next_id(self) -> int:
        return next(self._ids)


def _project(row: Row, columns: str) -> Row:
    if columns.strip() == "*":
        return copy.deepcopy(row)
    return {c.strip(): copy.deepcopy(row.get(c.strip())) for c in columns.split(",")}


def _matches(row: Row, filters: Mapping[str, Any] | None) -> bool:
    return all(str(row.get(k)) == str(v) for k, v in (filters or {}).items())


class FakeDataService:
    def __init__(self, store: FakeStore, *, jwt: str | None = None) -> None:
        self._store = store
        self._jwt = jwt

    async def select_rows(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Mapping[str, Any] | None = None,
        order: Sequence[Order] = (),
        limit: int | None = None,
    ) -> list[Row]:
        self._store.record("select", table)
        rows = [r for r in self._store.tables[table] if _matches(r, filters)]
        for o in reversed(order):
            present = [r for r in rows if r.get(o.column) is not None]
            missing = [r for r in rows if r.get(o.column) is None]
            present.sort(key=lambda r: r[o.column], reverse=not o.ascending)
            rows = missing + present if o.nulls_first else present + missing
        if limit is not None:
            rows = rows[:limit]
        return [_project(r, columns) for r in rows]

    async def insert_rows(
        self, table: str, rows: Sequence[Mapping[str, Any]], *, returning: str = "*"
    ) -> list[Row]:
        self._store.record("insert", table)
        inserted = []
        for row in rows:
            stored = dict(row)
            stored.setdefault("id", self._store.next_id())
            self._store.tables[table].append(stored)
            inserted.append(_project(stored, returning))
        return inserted

    async def update_rows(
        self,
        table: str,
        patch: Mapping[str, Any],
        *,
        filters: Mapping[str, Any],
        returning: str = "*",
    ) -> list[Row]:
        self._store.record("update", table)
        updated = []
        for row in self._store.tables[table]:
            if _matches(row, filters):
                row.update(patch)
                updated.append(_project(row, returning))
        return updated

    async def get_user(self) -> Row:
        self._store.record("get_user", "auth")
        user = self._store.users.get(self._jwt or "")
        if isinstance(user, Exception):
            raise user
        if user is None:
            raise DataServiceError("invalid JWT: unable to parse or verify signature", status_code=401)
        return dict(user)


class FakeClientFactory:
    def __init__(self, store: FakeStore) -> None:
        self.store = store
        self.projects: list[Project] = []
        self.bearer_tokens: list[str] = []

    def service_client(self, project: Project = Project.default) -> FakeDataService:
        self.projects.append(project)
        return FakeDataService(self.store)

    def bearer_scoped_client(self, jwt: str) -> FakeDataService:
        self.bearer_tokens.append(jwt)
        return FakeDataService(self.store, jwt=jwt)


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "allow_admin_portal": True,
        "allow_dev_bypass": False,
        "supabase_url": "https://default.example.co",
        "supabase_anon_key": "default-anon",
        "supabase_service_role_key": "default-service",
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def store() -> FakeStore:
    s = FakeStore()
    s.users[ADMIN_TOKEN] = {"id": ADMIN_ID, "email": "ops@example.com"}
    s.seed("profiles", {"id": ADMIN_ID, "role": "admin"})
    return s


@pytest.fixture
def factory(store: FakeStore) -> FakeClientFactory:
    return FakeClientFactory(store)


@pytest.fixture
def settings_for():
    """Build isolated Settings (no .env) with test credentials plus overrides."""
    return make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app_for(factory: FakeClientFactory):
    """Build an app over the fake factory with the given settings."""

    def _build(settings: Settings):
        return create_app(settings=settings, client_factory=factory)

    return _build


@pytest_asyncio.fixture
async def client(settings: Settings, factory: FakeClientFactory):
    app = create_app(settings=settings, client_factory=factory)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
