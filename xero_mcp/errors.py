"""Error taxonomy for Xero API calls.

Every failure a tool can report is one of these classes. The transport
raises them, the client lets them propagate untouched, and the tool
surface turns them into error payloads via ``to_dict()``.
"""

from typing import Any, Dict, Optional

from .constants import DEFAULT_RETRY_AFTER


class XeroError(Exception):
    """Base exception for everything raised on purpose by this package."""

    error_type = "xero_error"
    retryable = False

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialisable details for an error payload."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "retryable": self.retryable,
        }


class MissingCredentialError(XeroError):
    """Raised when the access token or tenant id is missing for a call."""

    error_type = "missing_credentials"


class XeroAPIError(XeroError):
    """Raised when Xero answers with a non-2xx status.

    A ``status_code`` of ``None`` means the request never got a response
    (timeout or connection failure).
    """

    error_type = "api_error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        return self.status_code is None or self.status_code >= 500

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["status_code"] = self.status_code
        return data


class XeroNotFoundError(XeroAPIError):
    """Raised when a lookup by id returns an empty collection."""

    error_type = "not_found"

    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class XeroAuthError(XeroAPIError):
    """Raised on 401 (bad or expired token) and 403 (no access to tenant)."""

    error_type = "authentication_failed"

    @property
    def retryable(self) -> bool:
        return False


class XeroRateLimitError(XeroAPIError):
    """Raised when rate limit is exceeded."""

    error_type = "rate_limited"

    def __init__(self, retry_after: float = DEFAULT_RETRY_AFTER):
        self.retry_after = retry_after
        super().__init__(
            f"Rate limit exceeded. Retry after {retry_after:g}s", status_code=429
        )

    @property
    def retryable(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["retry_after"] = self.retry_after
        return data
