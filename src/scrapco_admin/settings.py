"""
scrapco_admin.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Carry every backing-project credential under its deployment variable name.
- Hide secrets from repr/logging (service role and anon keys).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Immutable snapshot of the process configuration.

    Field names match the deployment variables (case-insensitive, no prefix), so
    `ADMIN_AUTH_SUPABASE_URL` populates `admin_auth_supabase_url`. Empty variables
    are ignored and behave as if unset.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    service_name: str = "scrapco-admin-backend"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    port: int = 3007
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Feature gate for the whole admin surface. Either flag enables it.
    allow_admin_portal: bool = False
    allow_dev_bypass: bool = False

    # Legacy single-project variables; also the "default" data project.
    supabase_url: str | None = None
    supabase_anon_key: str | None = Field(default=None, repr=False)
    supabase_service_role_key: str | None = Field(default=None, repr=False)

    # Issuer of admin bearer tokens.
    admin_auth_supabase_url: str | None = None
    admin_auth_supabase_anon_key: str | None = Field(default=None, repr=False)
    admin_auth_supabase_service_role_key: str | None = Field(default=None, repr=False)

    customer_supabase_url: str | None = None
    customer_supabase_service_role_key: str | None = Field(default=None, repr=False)

    vendor_supabase_url: str | None = None
    vendor_supabase_service_role_key: str | None = Field(default=None, repr=False)

    data_service_timeout_seconds: float = 10.0

    @property
    def admin_portal_enabled(self) -> bool:
        return self.allow_admin_portal or self.allow_dev_bypass


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Credential fallback rules live in `scrapco_admin.credentials`; this module only
# records what the deployment supplied.
