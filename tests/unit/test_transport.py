"""Unit tests for the Xero HTTP transport.

Tests verify that:
- Requests carry the bearer token and tenant header
- Responses are classified into data or typed errors
- Validation errors are flattened into one message
- Incomplete credentials never reach the network
"""

import httpx
import pytest

from xero_mcp.credentials import TenantCredentials
from xero_mcp.errors import (
    MissingCredentialError,
    XeroAPIError,
    XeroAuthError,
    XeroRateLimitError,
)
from xero_mcp.transport import XeroTransport, extract_error_message, parse_retry_after

from tests.fixtures.xero_fixtures import TEST_BASE_URL, XERO_ERROR_MESSAGE, XERO_ERROR_VALIDATION


class TestParseRetryAfter:
    """Tests for Retry-After parsing."""

    def test_seconds(self):
        assert parse_retry_after("30") == 30

    def test_missing_header_defaults_to_sixty(self):
        assert parse_retry_after(None) == 60

    def test_unparseable_defaults_to_sixty(self):
        assert parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") == 60

    def test_negative_defaults_to_sixty(self):
        assert parse_retry_after("-5") == 60

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf", "Infinity"])
    def test_non_finite_defaults_to_sixty(self, value):
        assert parse_retry_after(value) == 60


class TestExtractErrorMessage:
    """Tests for error message extraction."""

    def test_top_level_message(self):
        response = httpx.Response(400, json=XERO_ERROR_MESSAGE)
        assert extract_error_message(response) == "Invalid JSON in request body"

    def test_validation_messages_joined(self):
        response = httpx.Response(400, json=XERO_ERROR_VALIDATION)
        assert extract_error_message(response) == (
            "The amount being allocated exceeds the remaining credit; "
            "Allocation date is before the credit note date"
        )

    def test_unparseable_body(self):
        response = httpx.Response(502, content=b"<html>Bad gateway</html>")
        assert extract_error_message(response) == "Xero API error: 502"

    def test_body_without_messages(self):
        response = httpx.Response(400, json={"Elements": [{"ValidationErrors": []}]})
        assert extract_error_message(response) == "Xero API error: 400"


class TestTransportRequests:
    """Tests for request construction."""

    @pytest.mark.asyncio
    async def test_headers_and_url(self, xero_api, credentials, settings):
        """Test auth headers are attached and the base URL is applied."""
        xero_api.add_response("GET", "/Contacts", json_body={"Contacts": []})

        async with XeroTransport(credentials, settings, xero_api.transport()) as transport:
            await transport.send("GET", "/Contacts")

        request = xero_api.requests[0]
        assert str(request.url) == f"{TEST_BASE_URL}/Contacts"
        assert request.headers["Authorization"] == "Bearer test_access_token"
        assert request.headers["Xero-Tenant-Id"] == "tenant-123"
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_none_params_dropped(self, xero_api, credentials, settings):
        xero_api.add_response("GET", "/Invoices", json_body={"Invoices": []})

        async with XeroTransport(credentials, settings, xero_api.transport()) as transport:
            await transport.send("GET", "/Invoices", params={"page": 2, "where": None})

        assert dict(xero_api.requests[0].url.params) == {"page": "2"}

    @pytest.mark.asyncio
    async def test_base_url_override(self, xero_api, settings):
        """Test a per-tenant base URL replaces the configured root."""
        credentials = TenantCredentials(
            access_token="token", tenant_id="tenant", base_url="https://proxy.example/xero"
        )
        xero_api.add_response("GET", "/Organisation", json_body={"Organisations": []})

        async with XeroTransport(credentials, settings, xero_api.transport()) as transport:
            await transport.send("GET", "/Organisation")

        assert str(xero_api.requests[0].url) == "https://proxy.example/xero/Organisation"

    @pytest.mark.asyncio
    async def test_empty_tenant_sends_nothing(self, xero_api, settings):
        """Test incomplete credentials fail before any request."""
        credentials = TenantCredentials(access_token="token", tenant_id="")

        async with XeroTransport(credentials, settings, xero_api.transport()) as transport:
            with pytest.raises(MissingCredentialError):
                await transport.send("GET", "/Contacts")

        assert xero_api.requests == []

    @pytest.mark.asyncio
    async def test_send_outside_context_manager(self, credentials, settings):
        transport = XeroTransport(credentials, settings)
        with pytest.raises(XeroAPIError, match="not initialized"):
            await transport.send("GET", "/Contacts")


class TestTransportClassification:
    """Tests for response classification."""

    @pytest.mark.asyncio
    async def test_rate_limit_with_retry_after(self, xero_api, credentials, settings):
        xero_api.add_response("GET", "/Invoices", status_code=429, headers={"Retry-After": "30"})

        async with XeroTransport(credentials, settings, xero_api.transport()) as transport:
            with pytest.raises(XeroRateLimitError) as exc_info:
                await transport.send("GET", "/Invoices")

        assert exc_info.value.retry_after == 30
        assert exc_info.value.retryable is True
        assert len(xero_api.requests) == 1

    @pytest.mark.asyncio
    async def test_rate_limit_without_retry_after(self, xero_api, credentials, settings):
        xero_api.add_response("GET", "/Invoices", status_code=429)

        async with XeroTransport(credentials, settings, xero_api.transport()) as transport:
            with pytest.raises(XeroRateLimitError) as exc_info:
                await transport.send("GET", "/Invoices")

        assert exc_info.value.retry_after == 60

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 403])
    async def test_auth_errors(self, xero_api, credentials, settings, status_code):
        xero_api.add_response("GET", "/Contacts", status_code=status_code, json_body={"Message": "nope"})

        async with XeroTransport(credentials, settings, xero_api.transport()) as transport:
            with pytest.raises(XeroAuthError) as exc_info:
                await transport.send("GET", "/Contacts")

        assert exc_info.value.status_code == status_code
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_validation_error(self, xero_api, credentials, settings):
        xero_api.add_response("PUT", "/Allocations", status_code=400, json_body=XERO_ERROR_VALIDATION)

        async with XeroTransport(credentials, settings, xero_api.transport()) as transport:
            with pytest.raises(XeroAPIError) as exc_info:
                await transport.send("PUT", "/CreditNotes/cn-1/Allocations", json_data={})

        assert exc_info.value.status_code == 400
        assert "exceeds the remaining credit" in exc_info.value.message
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_server_error_is_retryable(self, xero_api, credentials, settings):
        xero_api.add_response("GET", "/Contacts", status_code=503, json_body={"Message": "Down"})

        async with XeroTransport(credentials, settings, xero_api.transport()) as transport:
            with pytest.raises(XeroAPIError) as exc_info:
                await transport.send("GET", "/Contacts")

        assert exc_info.value.retryable is True

    @pytest.mark.asyncio
    async def test_no_content(self, xero_api, credentials, settings):
        xero_api.add_response("DELETE", "/Items/i-1", status_code=204)

        async with XeroTransport(credentials, settings, xero_api.transport()) as transport:
            result = await transport.send("DELETE", "/Items/i-1")

        assert result is None

    @pytest.mark.asyncio
    async def test_network_failure(self, credentials, settings):
        """Test connection errors become retryable API errors."""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with XeroTransport(credentials, settings, httpx.MockTransport(handler)) as transport:
            with pytest.raises(XeroAPIError) as exc_info:
                await transport.send("GET", "/Contacts")

        assert exc_info.value.status_code is None
        assert exc_info.value.retryable is True
