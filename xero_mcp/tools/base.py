"""Shared plumbing for MCP tools.

Every tool call resolves the tenant from the inbound request headers,
opens a fresh XeroClient, runs exactly one operation and renders the
result. Failures are rendered too; nothing raises out of a tool.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Literal, Mapping, Optional

from mcp.server.fastmcp import Context

from ..client import XeroClient
from ..config import get_settings
from ..credentials import credentials_from_headers
from ..formatters import format_error, format_response, to_jsonable, truncate

logger = logging.getLogger(__name__)

ResponseFormat = Literal["json", "markdown"]

Operation = Callable[[XeroClient], Awaitable[Any]]


def request_headers(ctx: Context) -> Optional[Mapping[str, str]]:
    """Headers of the HTTP request behind this tool call, if any.

    Returns None outside a request or on the stdio transport.
    """
    try:
        request_context = ctx.request_context
    except ValueError:
        return None
    request = getattr(request_context, "request", None)
    if request is None:
        return None
    return request.headers


async def execute_operation(ctx: Context, operation: Operation) -> Any:
    settings = get_settings()
    credentials = credentials_from_headers(request_headers(ctx))
    async with XeroClient(credentials, settings) as client:
        return await operation(client)


async def run_query(
    ctx: Context,
    operation: Operation,
    entity_type: str,
    response_format: ResponseFormat = "json",
) -> str:
    """Run a read operation and render its result in the requested format."""
    try:
        result = await execute_operation(ctx, operation)
    except Exception as e:
        return format_error(e)
    return format_response(result, response_format, entity_type, get_settings().character_limit)


async def run_command(
    ctx: Context,
    operation: Operation,
    message: str,
    result_key: Optional[str] = None,
) -> str:
    """Run a write operation and render a success payload.

    Args:
        ctx: Tool context carrying the inbound request
        operation: Facade call to run
        message: Human-readable success message
        result_key: Key under which to return the operation's result

    Returns:
        JSON text: {"success": true, "message": ..., <result_key>: ...}
    """
    try:
        result = await execute_operation(ctx, operation)
    except Exception as e:
        return format_error(e)

    payload = {"success": True, "message": message}
    if result_key is not None and result is not None:
        payload[result_key] = to_jsonable(result)
    return truncate(json.dumps(payload, indent=2), get_settings().character_limit)
