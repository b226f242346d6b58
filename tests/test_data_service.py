"""
PostgREST/identity client and factory tests against `httpx.MockTransport`.
"""

from __future__ import annotations

import json

import httpx
import pytest

from scrapco_admin.credentials import CredentialResolver, Project
from scrapco_admin.data_service.client import DataServiceClient, DataServiceError, Order
from scrapco_admin.data_service.factory import HttpClientFactory
from scrapco_admin.errors import ConfigurationError


def _recording_transport(seen: list[httpx.Request], status: int = 200, payload=None):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status, json=[] if payload is None else payload)

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_select_builds_postgrest_query() -> None:
    seen: list[httpx.Request] = []
    async with httpx.AsyncClient(transport=_recording_transport(seen)) as http:
        client = DataServiceClient(http=http, endpoint="https://db.example.co/", api_key="svc")
        rows = await client.select_rows(
            "site_stats",
            columns="id,label",
            filters={"is_active": True, "label": "Tons"},
            order=(Order("sort_order"),),
            limit=500,
        )

    assert rows == []
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/rest/v1/site_stats"
    params = request.url.params
    assert params["select"] == "id,label"
    assert params["is_active"] == "eq.true"
    assert params["label"] == "eq.Tons"
    assert params["order"] == "sort_order.asc.nullslast"
    assert params["limit"] == "500"
    assert request.headers["apikey"] == "svc"
    assert request.headers["authorization"] == "Bearer svc"


@pytest.mark.asyncio
async def test_insert_and_update_request_representation() -> None:
    seen: list[httpx.Request] = []
    payload = [{"id": 1, "name": "Copper"}]
    async with httpx.AsyncClient(transport=_recording_transport(seen, 201, payload)) as http:
        client = DataServiceClient(http=http, endpoint="https://db.example.co", api_key="svc")
        inserted = await client.insert_rows("scrap_types", [{"name": "Copper"}], returning="id,name")
        await client.update_rows(
            "scrap_rates",
            {"is_active": False},
            filters={"scrap_type_id": "7", "is_active": True},
        )

    assert inserted == [{"id": 1, "name": "Copper"}]
    insert, update = seen
    assert insert.method == "POST"
    assert json.loads(insert.content) == [{"name": "Copper"}]
    assert insert.headers["prefer"] == "return=representation"
    assert update.method == "PATCH"
    assert json.loads(update.content) == {"is_active": False}
    assert update.url.params["scrap_type_id"] == "eq.7"
    assert update.url.params["is_active"] == "eq.true"


@pytest.mark.asyncio
async def test_update_without_filters_is_refused() -> None:
    seen: list[httpx.Request] = []
    async with httpx.AsyncClient(transport=_recording_transport(seen)) as http:
        client = DataServiceClient(http=http, endpoint="https://db.example.co", api_key="svc")
        with pytest.raises(ValueError):
            await client.update_rows("site_stats", {"label": "x"}, filters={})
    assert seen == []


@pytest.mark.asyncio
async def test_rejection_carries_store_message() -> None:
    payload = {"code": "23502", "message": 'null value in column "name" violates not-null'}
    async with httpx.AsyncClient(transport=_recording_transport([], 400, payload)) as http:
        client = DataServiceClient(http=http, endpoint="https://db.example.co", api_key="svc")
        with pytest.raises(DataServiceError) as exc:
            await client.select_rows("scrap_types")

    assert exc.value.status_code == 400
    assert "violates not-null" in exc.value.message


@pytest.mark.asyncio
async def test_bearer_client_verifies_against_auth_project(settings_for) -> None:
    seen: list[httpx.Request] = []
    payload = {"id": "user-1", "aud": "authenticated"}
    settings = settings_for(
        admin_auth_supabase_url="https://auth.example.co",
        admin_auth_supabase_anon_key="auth-anon",
        vendor_supabase_url="https://vendor.example.co",
    )
    async with httpx.AsyncClient(transport=_recording_transport(seen, 200, payload)) as http:
        factory = HttpClientFactory(resolver=CredentialResolver(settings), http=http)
        user = await factory.bearer_scoped_client("caller-jwt").get_user()

    assert user["id"] == "user-1"
    request = seen[0]
    assert request.url.host == "auth.example.co"
    assert request.url.path == "/auth/v1/user"
    assert request.headers["apikey"] == "auth-anon"
    assert request.headers["authorization"] == "Bearer caller-jwt"


@pytest.mark.asyncio
async def test_service_client_uses_project_service_key(settings_for) -> None:
    seen: list[httpx.Request] = []
    settings = settings_for(
        vendor_supabase_url="https://vendor.example.co",
        vendor_supabase_service_role_key="vendor-service",
    )
    async with httpx.AsyncClient(transport=_recording_transport(seen)) as http:
        factory = HttpClientFactory(resolver=CredentialResolver(settings), http=http)
        await factory.service_client(Project.vendor).select_rows("vendor_backends", limit=1)

    assert seen[0].url.host == "vendor.example.co"
    assert seen[0].headers["authorization"] == "Bearer vendor-service"


def test_factory_fails_without_credentials(settings_for) -> None:
    settings = settings_for(supabase_service_role_key=None)
    factory = HttpClientFactory(resolver=CredentialResolver(settings), http=httpx.AsyncClient())
    with pytest.raises(ConfigurationError) as exc:
        factory.service_client()
    assert exc.value.name == "SUPABASE_SERVICE_ROLE_KEY"
