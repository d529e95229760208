"""Constants for the Xero MCP server.

Protocol-level values shared by the credential resolver, the transport
and the tool surface.
"""

# =============================================================================
# XERO API
# =============================================================================

XERO_API_BASE_URL = "https://api.xero.com/api.xro/2.0"

# Xero caps paged collections at 100 records per page
XERO_PAGE_SIZE = 100

# Seconds to wait when a 429 arrives without a usable Retry-After header
DEFAULT_RETRY_AFTER = 60.0

# =============================================================================
# TENANT CREDENTIAL HEADERS
# =============================================================================
# Each inbound MCP request carries the identity of the Xero organisation it
# acts on. Nothing here is ever read from the process environment.

HEADER_ACCESS_TOKEN = "X-Xero-Access-Token"
HEADER_TENANT_ID = "X-Xero-Tenant-Id"
HEADER_BASE_URL = "X-Xero-Base-URL"

# Outbound header naming the organisation for the Xero API
XERO_TENANT_HEADER = "Xero-Tenant-Id"

# =============================================================================
# RESPONSE RENDERING
# =============================================================================

DEFAULT_CHARACTER_LIMIT = 50000
