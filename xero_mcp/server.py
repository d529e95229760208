#!/usr/bin/env python3
"""Entry point for the Xero MCP server.

Usage:
    xero-mcp                                  # streamable HTTP on 127.0.0.1:8000
    xero-mcp --transport stdio                # stdio, for local MCP clients
    xero-mcp --host 0.0.0.0 --port 9000       # bind elsewhere

Every tool call carries its own tenant credentials in the X-Xero-* request
headers, so one server instance serves any number of Xero organisations.
"""

import argparse
import logging
import sys

from mcp.server.fastmcp import FastMCP
from pythonjsonlogger.json import JsonFormatter
from starlette.requests import Request
from starlette.responses import JSONResponse

from .config import Settings, get_settings
from .tools import (
    accounts,
    banking,
    contacts,
    invoices,
    items,
    journals,
    linked_transactions,
    organisation,
    payments,
    purchase_orders,
    quotes,
    repeating_invoices,
    reports,
)
from .tools import settings as settings_tools

logger = logging.getLogger(__name__)

TOOL_MODULES = [
    organisation,
    contacts,
    accounts,
    invoices,
    payments,
    banking,
    items,
    purchase_orders,
    quotes,
    journals,
    settings_tools,
    repeating_invoices,
    linked_transactions,
    reports,
]

INSTRUCTIONS = """
Xero accounting tools. Each request must carry the tenant's credentials in
the headers X-Xero-Access-Token and X-Xero-Tenant-Id (X-Xero-Base-URL is
optional).

- Start with xero_test_connection to confirm the credentials work.
- List tools return 100 items per page; has_more/next_page tell you whether
  to ask for the next page.
- Query tools accept format="markdown" for a readable table.
- Update tools only change the fields you pass.
"""


def setup_logging(settings: Settings) -> None:
    """Configure logging for the server.

    Console output goes to stderr so the stdio transport stays clean.

    Args:
        settings: Server settings
    """
    console_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))
    root_logger.addHandler(console_handler)

    # File handler (JSON format for parsing)
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        json_formatter = JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
        file_handler = logging.FileHandler(settings.log_file)
        file_handler.setFormatter(json_formatter)
        root_logger.addHandler(file_handler)

    # Reduce noise from httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_server(settings: Settings) -> FastMCP:
    """Create the MCP server and register every Xero tool.

    Args:
        settings: Server settings

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        settings.server_name,
        instructions=INSTRUCTIONS,
        host=settings.host,
        port=settings.port,
        stateless_http=True,
    )

    for module in TOOL_MODULES:
        for tool in module.TOOLS:
            mcp.add_tool(tool)

    @mcp.custom_route("/health", methods=["GET"])
    async def health(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok", "server": settings.server_name})

    return mcp


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Xero accounting MCP server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        help="MCP transport (default from XERO_MCP_TRANSPORT)",
    )
    parser.add_argument("--host", help="Bind address for HTTP transports")
    parser.add_argument("--port", type=int, help="Bind port for HTTP transports")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the MCP server.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_args(argv)

    try:
        settings = get_settings()
    except Exception as e:
        print(f"Failed to load settings: {e}", file=sys.stderr)
        return 1

    overrides = {
        key: value
        for key, value in {
            "transport": args.transport,
            "host": args.host,
            "port": args.port,
            "log_level": args.log_level,
        }.items()
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)

    setup_logging(settings)

    mcp = create_server(settings)
    tool_count = sum(len(module.TOOLS) for module in TOOL_MODULES)
    logger.info(f"Starting {settings.server_name} with {tool_count} tools over {settings.transport}")
    if settings.transport != "stdio":
        logger.info(f"Listening on {settings.host}:{settings.port}")

    try:
        mcp.run(transport=settings.transport)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
