"""
scrapco_admin.data_service.client

HTTP client boundary for the remote data/identity service.

Responsibilities:
- Select/insert/update rows through the PostgREST API (`/rest/v1/<table>`).
- Verify bearer credentials against the identity endpoint (`/auth/v1/user`).
- Raise `DataServiceError` with the service's own message on rejected requests.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

Row = dict[str, Any]


class DataServiceError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass(frozen=True, slots=True)
class Order:
    column: str
    ascending: bool = True
    nulls_first: bool = False

    def render(self) -> str:
        direction = "asc" if self.ascending else "desc"
        nulls = "nullsfirst" if self.nulls_first else "nullslast"
        return f"{self.column}.{direction}.{nulls}"


class DataService(Protocol):
    """
    Narrow interface the services depend on. Filters are column equality matches.
    """

    async def select_rows(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Mapping[str, Any] | None = None,
        order: Sequence[Order] = (),
        limit: int | None = None,
    ) -> list[Row]: ...

    async def insert_rows(
        self, table: str, rows: Sequence[Mapping[str, Any]], *, returning: str = "*"
    ) -> list[Row]: ...

    async def update_rows(
        self,
        table: str,
        patch: Mapping[str, Any],
        *,
        filters: Mapping[str, Any],
        returning: str = "*",
    ) -> list[Row]: ...

    async def get_user(self) -> Row: ...


def _filter_value(value: Any) -> str:
    if value is None:
        return "is.null"
    if isinstance(value, bool):
        return f"eq.{str(value).lower()}"
    return f"eq.{value}"


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "msg", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return response.text or response.reason_phrase or f"HTTP {response.status_code}"


class DataServiceClient:
    """
    One handle = one (endpoint, credential) pair. Holds no session state; the
    underlying `httpx.AsyncClient` is shared and owned by the caller.
    """

    def __init__(
        self,
        *,
        http: httpx.AsyncClient,
        endpoint: str,
        api_key: str,
        bearer: str | None = None,
    ) -> None:
        self._http = http
        self._endpoint = endpoint.rstrip("/")
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {bearer or api_key}",
        }

    async def select_rows(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Mapping[str, Any] | None = None,
        order: Sequence[Order] = (),
        limit: int | None = None,
    ) -> list[Row]:
        params: list[tuple[str, str]] = [("select", columns)]
        params += self._filters(filters)
        if order:
            params.append(("order", ",".join(o.render() for o in order)))
        if limit is not None:
            params.append(("limit", str(limit)))
        r = await self._request("GET", self._rest(table), params=params)
        return r.json()

    async def insert_rows(
        self, table: str, rows: Sequence[Mapping[str, Any]], *, returning: str = "*"
    ) -> list[Row]:
        r = await self._request(
            "POST",
            self._rest(table),
            params=[("select", returning)],
            json=[dict(row) for row in rows],
            headers={"Prefer": "return=representation"},
        )
        return r.json()

    async def update_rows(
        self,
        table: str,
        patch: Mapping[str, Any],
        *,
        filters: Mapping[str, Any],
        returning: str = "*",
    ) -> list[Row]:
        # PostgREST would update every row without a filter; refuse that outright.
        if not filters:
            raise ValueError("update_rows requires at least one filter")
        r = await self._request(
            "PATCH",
            self._rest(table),
            params=[("select", returning), *self._filters(filters)],
            json=dict(patch),
            headers={"Prefer": "return=representation"},
        )
        return r.json()

    async def get_user(self) -> Row:
        r = await self._request("GET", f"{self._endpoint}/auth/v1/user")
        return r.json()

    def _rest(self, table: str) -> str:
        return f"{self._endpoint}/rest/v1/{table}"

    @staticmethod
    def _filters(filters: Mapping[str, Any] | None) -> list[tuple[str, str]]:
        return [(column, _filter_value(value)) for column, value in (filters or {}).items()]

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: list[tuple[str, str]] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        r = await self._http.request(
            method,
            url,
            params=params,
            json=json,
            headers={**self._headers, **(headers or {})},
        )
        if r.is_error:
            raise DataServiceError(_error_message(r), status_code=r.status_code)
        return r


# --- Module Notes -----------------------------------------------------------
# Transport failures (`httpx.HTTPError`) are not translated here; callers decide
# whether they are a rejected credential or an unexpected outage.
