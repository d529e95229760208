"""Pytest configuration and shared fixtures.

Provides common fixtures for:
- Mock environment variables and settings
- Tenant credentials
- A mock Xero API wired into XeroClient and the tools
- A fake MCP tool context carrying request headers
"""

import functools
from types import SimpleNamespace

import pytest

from xero_mcp.client import XeroClient
from xero_mcp.config import Settings
from xero_mcp.credentials import TenantCredentials

from tests.fixtures.xero_fixtures import TEST_BASE_URL, MockXeroAPI


# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set up mock environment variables for testing.

    Clears anything the developer's shell might export under the
    same prefix so Settings sees a known configuration.
    """
    for name in (
        "XERO_MCP_SERVER_NAME",
        "XERO_MCP_HOST",
        "XERO_MCP_PORT",
        "XERO_MCP_TRANSPORT",
        "XERO_MCP_API_BASE_URL",
        "XERO_MCP_REQUEST_TIMEOUT",
        "XERO_MCP_CHARACTER_LIMIT",
        "XERO_MCP_LOG_LEVEL",
        "XERO_MCP_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XERO_MCP_API_BASE_URL", TEST_BASE_URL)
    monkeypatch.setenv("XERO_MCP_LOG_LEVEL", "DEBUG")


@pytest.fixture
def settings(mock_env_vars):
    """Settings built from the mock environment."""
    return Settings(_env_file=None)


# =============================================================================
# CREDENTIALS
# =============================================================================

@pytest.fixture
def credentials():
    return TenantCredentials(access_token="test_access_token", tenant_id="tenant-123")


@pytest.fixture
def tenant_headers():
    """Inbound request headers naming a tenant."""
    return {
        "x-xero-access-token": "test_access_token",
        "x-xero-tenant-id": "tenant-123",
    }


# =============================================================================
# MOCK XERO API
# =============================================================================

@pytest.fixture
def xero_api():
    return MockXeroAPI()


@pytest.fixture
def make_client(xero_api, credentials, settings):
    """Factory for a XeroClient that talks to the mock API."""
    def _make(creds=None):
        return XeroClient(creds or credentials, settings, http_transport=xero_api.transport())
    return _make


@pytest.fixture
def patched_tools(monkeypatch, mock_env_vars, xero_api):
    """Route every tool call through the mock API."""
    monkeypatch.setattr(
        "xero_mcp.tools.base.XeroClient",
        functools.partial(XeroClient, http_transport=xero_api.transport()),
    )
    return xero_api


@pytest.fixture
def make_ctx():
    """Factory for a fake tool context carrying the given request headers."""
    def _make(headers=None):
        request = SimpleNamespace(headers=headers or {})
        return SimpleNamespace(request_context=SimpleNamespace(request=request))
    return _make
