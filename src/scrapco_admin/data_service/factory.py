"""
scrapco_admin.data_service.factory

Builds data service handles scoped to a logical project and credential.

Responsibilities:
- `service_client(project)`: privileged handle for administrative reads/writes.
- `bearer_scoped_client(jwt)`: anon handle carrying the caller's bearer token, always
  bound to the auth (issuer) project.
"""

from __future__ import annotations

from typing import Protocol

import httpx

from scrapco_admin.credentials import CredentialResolver, KeyScope, Project
from scrapco_admin.data_service.client import DataService, DataServiceClient


class ClientFactory(Protocol):
    def service_client(self, project: Project = Project.default) -> DataService: ...

    def bearer_scoped_client(self, jwt: str) -> DataService: ...


class HttpClientFactory:
    def __init__(self, *, resolver: CredentialResolver, http: httpx.AsyncClient) -> None:
        self._resolver = resolver
        self._http = http

    def service_client(self, project: Project = Project.default) -> DataService:
        # Resolution errors propagate: no partially configured handle is returned.
        cred = self._resolver.resolve(project, KeyScope.service)
        return DataServiceClient(http=self._http, endpoint=cred.endpoint, api_key=cred.key)

    def bearer_scoped_client(self, jwt: str) -> DataService:
        # Tokens must be verified by the project that issued them, whichever
        # project serves the data.
        cred = self._resolver.resolve(Project.auth, KeyScope.anon)
        return DataServiceClient(
            http=self._http,
            endpoint=cred.endpoint,
            api_key=cred.key,
            bearer=jwt,
        )
