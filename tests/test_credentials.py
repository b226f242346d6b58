from __future__ import annotations

import pytest

from scrapco_admin.credentials import CredentialResolver, KeyScope, Project, resolve_value
from scrapco_admin.errors import ConfigurationError


class TestResolveValue:
    def test_explicit_value_is_returned_verbatim(self) -> None:
        assert resolve_value("X_URL", "https://explicit.example.co", "fallback") == (
            "https://explicit.example.co"
        )

    @pytest.mark.parametrize("blank", [None, "", "   ", "\t\n"])
    def test_blank_explicit_uses_fallback(self, blank) -> None:
        assert resolve_value("X_URL", blank, "fallback") == "fallback"

    @pytest.mark.parametrize("fallback", [None, "", "  "])
    def test_both_absent_raises_with_name(self, fallback) -> None:
        with pytest.raises(ConfigurationError) as exc:
            resolve_value("X_URL", None, fallback)
        assert exc.value.name == "X_URL"
        assert "X_URL" in exc.value.message


class TestCredentialResolver:
    def test_single_project_setup_resolves_every_project(self, settings_for) -> None:
        resolver = CredentialResolver(settings_for())
        for project in Project:
            cred = resolver.resolve(project)
            assert cred.endpoint == "https://default.example.co"
            assert cred.key == "default-service"
            assert cred.scope is KeyScope.service

    def test_auth_project_prefers_explicit_variables(self, settings_for) -> None:
        resolver = CredentialResolver(
            settings_for(
                admin_auth_supabase_url="https://auth.example.co/",
                admin_auth_supabase_anon_key="auth-anon",
            )
        )
        cred = resolver.resolve(Project.auth, KeyScope.anon)
        assert cred.endpoint == "https://auth.example.co"
        assert cred.key == "auth-anon"

    def test_vendor_falls_back_to_auth_project(self, settings_for) -> None:
        resolver = CredentialResolver(
            settings_for(
                admin_auth_supabase_url="https://auth.example.co",
                admin_auth_supabase_service_role_key="auth-service",
            )
        )
        cred = resolver.resolve(Project.vendor)
        assert cred.endpoint == "https://auth.example.co"
        assert cred.key == "auth-service"

    def test_customer_explicit_wins_over_auth(self, settings_for) -> None:
        resolver = CredentialResolver(
            settings_for(
                customer_supabase_url="https://customer.example.co",
                customer_supabase_service_role_key="customer-service",
            )
        )
        cred = resolver.resolve(Project.customer)
        assert cred.endpoint == "https://customer.example.co"
        assert cred.key == "customer-service"

    def test_blank_explicit_falls_back(self, settings_for) -> None:
        resolver = CredentialResolver(settings_for(vendor_supabase_url="   "))
        assert resolver.resolve(Project.vendor).endpoint == "https://default.example.co"

    def test_missing_everything_names_requested_variable(self, settings_for) -> None:
        resolver = CredentialResolver(
            settings_for(supabase_url=None, supabase_service_role_key=None)
        )
        with pytest.raises(ConfigurationError) as exc:
            resolver.resolve(Project.customer)
        assert exc.value.name == "CUSTOMER_SUPABASE_URL"

    def test_missing_reports_unresolvable_names(self, settings_for) -> None:
        assert CredentialResolver(settings_for()).missing() == []

        resolver = CredentialResolver(settings_for(supabase_url=None))
        assert resolver.missing() == [
            "ADMIN_AUTH_SUPABASE_URL",
            "SUPABASE_URL",
            "CUSTOMER_SUPABASE_URL",
            "VENDOR_SUPABASE_URL",
        ]

    def test_settings_repr_hides_keys(self, settings_for) -> None:
        assert "default-service" not in repr(settings_for())
