"""Unit tests for per-call tenant credentials."""

import pytest
from pydantic import ValidationError

from xero_mcp.credentials import TenantCredentials, credentials_from_headers
from xero_mcp.errors import MissingCredentialError


class TestCredentialsFromHeaders:
    """Tests for resolving credentials from request headers."""

    def test_complete_headers(self, tenant_headers):
        credentials = credentials_from_headers(tenant_headers)

        assert credentials.access_token == "test_access_token"
        assert credentials.tenant_id == "tenant-123"
        assert credentials.base_url is None

    def test_header_names_case_insensitive(self):
        credentials = credentials_from_headers({
            "X-XERO-ACCESS-TOKEN": "tok",
            "X-Xero-Tenant-Id": "ten",
        })

        assert credentials.access_token == "tok"
        assert credentials.tenant_id == "ten"

    def test_base_url_override_trailing_slash(self, tenant_headers):
        tenant_headers["x-xero-base-url"] = "https://proxy.example/xero/"

        credentials = credentials_from_headers(tenant_headers)

        assert credentials.base_url == "https://proxy.example/xero"

    def test_missing_token(self):
        with pytest.raises(MissingCredentialError, match="X-Xero-Access-Token"):
            credentials_from_headers({"x-xero-tenant-id": "tenant-123"})

    def test_blank_tenant(self):
        with pytest.raises(MissingCredentialError, match="X-Xero-Tenant-Id"):
            credentials_from_headers({"x-xero-access-token": "tok", "x-xero-tenant-id": "   "})

    def test_no_headers(self):
        """Test stdio calls (no HTTP request) are rejected."""
        with pytest.raises(MissingCredentialError):
            credentials_from_headers(None)


class TestTenantCredentials:
    """Tests for the credentials model."""

    def test_require_complete_passes(self, credentials):
        credentials.require_complete()

    def test_require_complete_empty_token(self):
        credentials = TenantCredentials(access_token="", tenant_id="tenant-123")
        with pytest.raises(MissingCredentialError):
            credentials.require_complete()

    def test_frozen(self, credentials):
        with pytest.raises(ValidationError):
            credentials.tenant_id = "other"

    def test_repr_hides_token(self, credentials):
        assert "test_access_token" not in repr(credentials)
        assert "tenant-123" in repr(credentials)
        assert "test_access_token" not in str(credentials)
