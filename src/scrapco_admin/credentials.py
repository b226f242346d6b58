"""
scrapco_admin.credentials

Credential resolution for the logical backing projects.

Responsibilities:
- Resolve the {endpoint, key} pair for a logical project from the settings snapshot.
- Apply the layered fallback chain: explicit variable -> legacy shared variable ->
  (non-auth projects) the auth project's resolved value.
- Fail loudly with `ConfigurationError` instead of substituting blanks.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from scrapco_admin.errors import ConfigurationError
from scrapco_admin.settings import Settings


class Project(enum.StrEnum):
    auth = "auth"
    customer = "customer"
    vendor = "vendor"
    default = "default"


class KeyScope(enum.StrEnum):
    anon = "anon"
    service = "service"


@dataclass(frozen=True, slots=True)
class ProjectCredential:
    project: Project
    endpoint: str
    key: str
    scope: KeyScope


# (project, field) -> (explicit variable, legacy variable). Missing entries mean the
# project has no variable of its own for that field and uses the auth chain.
_VARIABLES: dict[tuple[Project, str], tuple[str, str | None]] = {
    (Project.auth, "url"): ("ADMIN_AUTH_SUPABASE_URL", "SUPABASE_URL"),
    (Project.auth, KeyScope.anon): ("ADMIN_AUTH_SUPABASE_ANON_KEY", "SUPABASE_ANON_KEY"),
    (Project.auth, KeyScope.service): (
        "ADMIN_AUTH_SUPABASE_SERVICE_ROLE_KEY",
        "SUPABASE_SERVICE_ROLE_KEY",
    ),
    (Project.customer, "url"): ("CUSTOMER_SUPABASE_URL", None),
    (Project.customer, KeyScope.service): ("CUSTOMER_SUPABASE_SERVICE_ROLE_KEY", None),
    (Project.vendor, "url"): ("VENDOR_SUPABASE_URL", None),
    (Project.vendor, KeyScope.service): ("VENDOR_SUPABASE_SERVICE_ROLE_KEY", None),
    (Project.default, "url"): ("SUPABASE_URL", None),
    (Project.default, KeyScope.anon): ("SUPABASE_ANON_KEY", None),
    (Project.default, KeyScope.service): ("SUPABASE_SERVICE_ROLE_KEY", None),
}

# Credentials the running service needs; used by the readiness probe.
REQUIRED: tuple[tuple[Project, KeyScope], ...] = (
    (Project.auth, KeyScope.anon),
    (Project.default, KeyScope.service),
    (Project.customer, KeyScope.service),
    (Project.vendor, KeyScope.service),
)


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def resolve_value(name: str, explicit: str | None, fallback: str | None) -> str:
    """
    Return `explicit` when it is non-blank, else `fallback` when non-blank.

    Whitespace-only counts as absent. Raises `ConfigurationError(name)` when neither
    source yields a value.
    """

    if not _blank(explicit):
        return explicit  # type: ignore[return-value]
    if not _blank(fallback):
        return fallback  # type: ignore[return-value]
    raise ConfigurationError(name)


class CredentialResolver:
    """
    Pure resolver over an immutable `Settings` snapshot; performs no I/O.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def resolve(self, project: Project, scope: KeyScope = KeyScope.service) -> ProjectCredential:
        return ProjectCredential(
            project=project,
            endpoint=self._field(project, "url").rstrip("/"),
            key=self._field(project, scope),
            scope=scope,
        )

    def missing(self) -> list[str]:
        names: list[str] = []
        for project, scope in REQUIRED:
            for field in ("url", scope):
                try:
                    self._field(project, field)
                except ConfigurationError as e:
                    if e.name not in names:
                        names.append(e.name)
        return names

    def _field(self, project: Project, field: str) -> str:
        variables = _VARIABLES.get((project, field))
        if variables is None:
            return self._field(Project.auth, field)

        explicit_name, legacy_name = variables
        explicit = self._lookup(explicit_name)
        fallback = self._lookup(legacy_name)
        if project is not Project.auth and _blank(fallback):
            try:
                fallback = self._field(Project.auth, field)
            except ConfigurationError:
                fallback = None
        return resolve_value(explicit_name, explicit, fallback)

    def _lookup(self, name: str | None) -> str | None:
        if name is None:
            return None
        return getattr(self._settings, name.lower())


# --- Module Notes -----------------------------------------------------------
# Single-project deployments only set SUPABASE_*; every logical project then
# resolves to the same endpoint through the fallback chain.
