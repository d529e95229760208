"""HTTP transport for the Xero Accounting API.

Issues exactly one request per call and classifies the response into
data or one of the error types from ``errors``. Nothing is retried here:
rate limits and transient failures go back to the caller.
"""

import logging
import math
from typing import Any, Dict, List, Optional

import httpx

from .config import Settings, get_settings
from .constants import DEFAULT_RETRY_AFTER, XERO_TENANT_HEADER
from .credentials import TenantCredentials
from .errors import XeroAPIError, XeroAuthError, XeroRateLimitError

logger = logging.getLogger(__name__)


def parse_retry_after(value: Optional[str]) -> float:
    """Parse a Retry-After header in seconds, falling back to the default."""
    if value is None:
        return DEFAULT_RETRY_AFTER
    try:
        seconds = float(value.strip())
    except ValueError:
        return DEFAULT_RETRY_AFTER
    if not math.isfinite(seconds) or seconds < 0:
        return DEFAULT_RETRY_AFTER
    return seconds


def extract_error_message(response: httpx.Response) -> str:
    """Best-effort error message from a failed Xero response.

    Xero reports either a top-level ``Message`` or, for validation
    failures, a list of ``Elements`` each carrying ``ValidationErrors``.

    Args:
        response: The non-2xx response

    Returns:
        The top-level message, the joined validation messages, or a
        generic message naming the status
    """
    generic = f"Xero API error: {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return generic
    if not isinstance(body, dict):
        return generic

    message = body.get("Message")
    if message:
        return str(message)

    validation_messages: List[str] = []
    for element in body.get("Elements") or []:
        if not isinstance(element, dict):
            continue
        for error in element.get("ValidationErrors") or []:
            if isinstance(error, dict) and error.get("Message"):
                validation_messages.append(str(error["Message"]))
    if validation_messages:
        return "; ".join(validation_messages)

    return generic


class XeroTransport:
    """Async HTTP transport bound to one tenant's credentials."""

    def __init__(
        self,
        credentials: TenantCredentials,
        settings: Optional[Settings] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the transport.

        Args:
            credentials: Tenant credentials for every request
            settings: Server settings (loaded from environment if omitted)
            http_transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.credentials = credentials
        self.settings = settings or get_settings()
        self.base_url = (credentials.base_url or self.settings.api_base_url).rstrip("/")
        self._http_transport = http_transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "XeroTransport":
        """Async context manager entry."""
        self._client = httpx.AsyncClient(
            timeout=self.settings.request_timeout,
            transport=self._http_transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _headers(self) -> Dict[str, str]:
        self.credentials.require_complete()
        return {
            "Authorization": f"Bearer {self.credentials.access_token}",
            XERO_TENANT_HEADER: self.credentials.tenant_id,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Any] = None,
    ) -> Optional[Any]:
        """Make a single API request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path relative to the base URL (e.g., "/Invoices")
            params: Query parameters; None values are dropped
            json_data: JSON body for POST/PUT

        Returns:
            Decoded JSON body, or None for 204 No Content

        Raises:
            MissingCredentialError: If the credentials are incomplete
            XeroRateLimitError: On 429
            XeroAuthError: On 401 or 403
            XeroAPIError: On any other non-2xx status or a network failure
        """
        headers = self._headers()
        if not self._client:
            raise XeroAPIError("Transport not initialized. Use async context manager.")

        url = f"{self.base_url}{path}"
        query = {key: value for key, value in (params or {}).items() if value is not None}

        logger.debug(f"Xero API call: {method} {path} (tenant: {self.credentials.tenant_id})")

        try:
            response = await self._client.request(
                method=method,
                url=url,
                params=query or None,
                json=json_data,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Xero request timeout: {method} {path}")
            raise XeroAPIError(f"Request timeout: {e}") from e
        except httpx.RequestError as e:
            logger.warning(f"Xero request error: {method} {path}: {e}")
            raise XeroAPIError(f"Request failed: {e}") from e

        return self._handle_response(method, path, response)

    def _handle_response(self, method: str, path: str, response: httpx.Response) -> Optional[Any]:
        status = response.status_code

        if status == 429:
            retry_after = parse_retry_after(response.headers.get("Retry-After"))
            logger.warning(f"Xero rate limit hit on {method} {path}, retry after {retry_after}s")
            raise XeroRateLimitError(retry_after=retry_after)
        if status == 401:
            logger.warning(f"Xero rejected access token on {method} {path}")
            raise XeroAuthError(
                "Authentication failed. The access token is invalid or expired.",
                status_code=401,
            )
        if status == 403:
            logger.warning(f"Xero denied access to tenant on {method} {path}")
            raise XeroAuthError(
                "Access forbidden. The token does not grant access to this tenant or scope.",
                status_code=403,
            )
        if not 200 <= status < 300:
            message = extract_error_message(response)
            logger.info(f"Xero API error {status} on {method} {path}: {message}")
            raise XeroAPIError(message, status_code=status)
        if status == 204 or not response.content:
            return None
        return response.json()
