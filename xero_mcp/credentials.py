"""Per-call tenant credentials.

One server deployment serves many Xero organisations, so every inbound
request names its own access token and tenant id in HTTP headers. The
resolved credentials live only as long as the call that carried them.
"""

import logging
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

from .constants import HEADER_ACCESS_TOKEN, HEADER_BASE_URL, HEADER_TENANT_ID
from .errors import MissingCredentialError

logger = logging.getLogger(__name__)


class TenantCredentials(BaseModel):
    """Identity used for every Xero request made on behalf of one call."""

    model_config = ConfigDict(frozen=True)

    access_token: str
    tenant_id: str
    base_url: Optional[str] = None

    def require_complete(self) -> None:
        """Fail before any network activity if a mandatory field is empty.

        Raises:
            MissingCredentialError: If the token or tenant id is blank
        """
        if not self.access_token or not self.access_token.strip():
            raise MissingCredentialError(
                f"Missing {HEADER_ACCESS_TOKEN} header. "
                "Provide a valid OAuth 2.0 access token."
            )
        if not self.tenant_id or not self.tenant_id.strip():
            raise MissingCredentialError(
                f"Missing {HEADER_TENANT_ID} header. Provide a valid Xero tenant ID."
            )

    def __repr__(self) -> str:
        # Keep tokens out of logs and tracebacks
        return f"TenantCredentials(tenant_id={self.tenant_id!r}, base_url={self.base_url!r})"

    __str__ = __repr__


def credentials_from_headers(headers: Optional[Mapping[str, str]]) -> TenantCredentials:
    """Resolve tenant credentials from inbound request headers.

    Header names are matched case-insensitively.

    Args:
        headers: Request headers, or None when the transport has none (stdio)

    Returns:
        Complete TenantCredentials

    Raises:
        MissingCredentialError: If the token or tenant id header is absent or empty
    """
    lowered = {key.lower(): value for key, value in (headers or {}).items()}

    base_url = (lowered.get(HEADER_BASE_URL.lower()) or "").strip() or None
    credentials = TenantCredentials(
        access_token=(lowered.get(HEADER_ACCESS_TOKEN.lower()) or "").strip(),
        tenant_id=(lowered.get(HEADER_TENANT_ID.lower()) or "").strip(),
        base_url=base_url.rstrip("/") if base_url else None,
    )
    credentials.require_complete()

    logger.debug(f"Resolved credentials for tenant {credentials.tenant_id}")
    return credentials
