"""
scrapco_admin.auth.deps

FastAPI dependency functions for authentication and authorization.

Responsibilities:
- Gate the admin surface behind its feature flag.
- Exchange a bearer token for a verified identity at the issuing project.
- Elevate the identity to a role-checked `Principal` via the stored profile role.
"""

from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from scrapco_admin.api.deps import client_factory_dep, settings_dep
from scrapco_admin.auth.models import Principal, Role, VerifiedIdentity
from scrapco_admin.data_service.client import DataServiceError
from scrapco_admin.data_service.factory import ClientFactory
from scrapco_admin.errors import (
    AdminApiError,
    AuthenticationError,
    AuthorizationError,
    UnexpectedError,
    UpstreamError,
)
from scrapco_admin.observability.logging import get_logger
from scrapco_admin.settings import Settings

log = get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)

PORTAL_DISABLED = (
    "Admin portal is disabled on server. "
    "Set ALLOW_ADMIN_PORTAL=true (or ALLOW_DEV_BYPASS=true) in admin_backend/.env."
)
INVALID_TOKEN = "Invalid or expired token"


async def verify_identity(factory: ClientFactory, jwt: str) -> VerifiedIdentity:
    try:
        user = await factory.bearer_scoped_client(jwt).get_user()
    except DataServiceError as e:
        log.info("admin_token_rejected", upstream_status=e.status_code)
        raise AuthenticationError(INVALID_TOKEN) from e
    except AdminApiError:
        raise
    except Exception as e:
        log.exception("admin_auth_check_failed")
        raise UnexpectedError("Auth check failed") from e

    user_id = str(user.get("id") or "") if isinstance(user, dict) else ""
    if not user_id:
        raise AuthenticationError(INVALID_TOKEN)
    return VerifiedIdentity(user_id=user_id)


async def lookup_role(factory: ClientFactory, identity: VerifiedIdentity) -> Role | None:
    try:
        rows = await factory.service_client().select_rows(
            "profiles",
            columns="role",
            filters={"id": identity.user_id},
            limit=1,
        )
    except DataServiceError as e:
        raise UpstreamError(e.message) from e
    except AdminApiError:
        raise
    except Exception as e:
        log.exception("admin_role_check_failed", user_id=identity.user_id)
        raise UnexpectedError("Admin check failed") from e

    if not rows:
        return None
    return Role.parse(rows[0].get("role"))


def require_roles(*allowed: Role):
    async def _dep(
        creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
        settings: Settings = Depends(settings_dep),
        factory: ClientFactory = Depends(client_factory_dep),
    ) -> Principal:
        # Feature gate first: no credential inspection while the surface is off.
        if not settings.admin_portal_enabled:
            raise AuthorizationError(PORTAL_DISABLED)

        if creds is None or not creds.credentials:
            raise AuthenticationError("Missing Authorization: Bearer <token>")

        identity = await verify_identity(factory, creds.credentials)
        role = await lookup_role(factory, identity)
        principal = Principal(user_id=identity.user_id, role=role) if role else None
        if principal is None or not principal.has_role(*allowed):
            log.info("admin_access_denied", user_id=identity.user_id)
            raise AuthorizationError("Admin access required")
        return principal

    return _dep


require_admin = require_roles(Role.admin)


# --- Module Notes -----------------------------------------------------------
# Every request re-verifies from scratch; there is no token or role cache.
