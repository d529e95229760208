"""Organisation, connection and user tools."""

import json
from typing import Optional

from mcp.server.fastmcp import Context

from ..errors import XeroError
from ..models import ConnectionStatus
from .base import ResponseFormat, execute_operation, run_query


async def xero_test_connection(ctx: Context) -> str:
    """Check that the supplied access token and tenant id can reach Xero.

    Returns {"connected": true|false, "message": ...}.
    """
    try:
        status = await execute_operation(ctx, lambda client: client.test_connection())
    except XeroError as e:
        status = ConnectionStatus(connected=False, message=e.message)
    return json.dumps(status.model_dump(mode="json", exclude_none=True), indent=2)


async def xero_get_organisation(ctx: Context, format: ResponseFormat = "json") -> str:
    """Get the organisation's name, base currency, tax settings and year end."""
    return await run_query(ctx, lambda client: client.get_organisation(), "organisation", format)


async def xero_list_users(
    ctx: Context,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List the users of the organisation."""
    return await run_query(ctx, lambda client: client.list_users(where, order), "users", format)


async def xero_get_user(ctx: Context, user_id: str, format: ResponseFormat = "json") -> str:
    """Get a user by UserID."""
    return await run_query(ctx, lambda client: client.get_user(user_id), "user", format)


TOOLS = [
    xero_test_connection,
    xero_get_organisation,
    xero_list_users,
    xero_get_user,
]
