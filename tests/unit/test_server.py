"""Unit tests for server assembly and command line parsing."""

import pytest

from xero_mcp.server import TOOL_MODULES, create_server, parse_args


class TestCreateServer:
    """Tests for tool registration."""

    @pytest.mark.asyncio
    async def test_every_tool_registered(self, settings):
        mcp = create_server(settings)

        tools = await mcp.list_tools()

        names = {tool.name for tool in tools}
        expected = {tool.__name__ for module in TOOL_MODULES for tool in module.TOOLS}
        assert names == expected
        assert len(tools) == len(expected)

    @pytest.mark.asyncio
    async def test_tool_names_prefixed(self, settings):
        tools = await create_server(settings).list_tools()

        assert all(tool.name.startswith("xero_") for tool in tools)

    @pytest.mark.asyncio
    async def test_context_not_in_schema(self, settings):
        tools = {tool.name: tool for tool in await create_server(settings).list_tools()}

        schema = tools["xero_list_contacts"].inputSchema
        assert "ctx" not in schema["properties"]
        assert "page" in schema["properties"]

    def test_core_tools_present(self):
        names = {tool.__name__ for module in TOOL_MODULES for tool in module.TOOLS}

        for name in (
            "xero_test_connection",
            "xero_list_invoices",
            "xero_create_invoice",
            "xero_allocate_credit_note",
            "xero_create_payment",
            "xero_get_balance_sheet",
            "xero_list_tax_rates",
        ):
            assert name in names


class TestParseArgs:
    """Tests for command line parsing."""

    def test_defaults_are_unset(self):
        args = parse_args([])

        assert args.transport is None
        assert args.port is None

    def test_overrides(self):
        args = parse_args(["--transport", "stdio", "--port", "9000", "--log-level", "DEBUG"])

        assert args.transport == "stdio"
        assert args.port == 9000
        assert args.log_level == "DEBUG"

    def test_invalid_transport(self):
        with pytest.raises(SystemExit):
            parse_args(["--transport", "carrier-pigeon"])
