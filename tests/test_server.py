"""Tests for the MCP server wiring."""

from __future__ import annotations

from mcp import types

from conftest import API_KEY, BASE_URL
from leadmagic_mcp import SERVER_NAME, __version__
from leadmagic_mcp.server import LeadMagicMCPServer


async def _list_tools(app: LeadMagicMCPServer) -> list[types.Tool]:
    handler = app.server.request_handlers[types.ListToolsRequest]
    result = await handler(types.ListToolsRequest(method="tools/list"))
    return result.root.tools


async def _call_tool(app: LeadMagicMCPServer, name: str, arguments: dict | None) -> types.CallToolResult:
    handler = app.server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = await handler(request)
    return result.root


class TestServerHandlers:
    async def test_list_tools(self, client):
        app = LeadMagicMCPServer(client)

        tools = await _list_tools(app)

        assert len(tools) == 19
        assert "validate_email" in {tool.name for tool in tools}

    async def test_call_tool_returns_text(self, client, api):
        api.respond(200, {"credits": 10})
        app = LeadMagicMCPServer(client)

        result = await _call_tool(app, "get_credits", {})

        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text.startswith("Available credits: 10")

    async def test_invalid_arguments_rendered_by_tool(self, client, api):
        app = LeadMagicMCPServer(client)

        result = await _call_tool(app, "validate_email", {"email": 42})

        text = result.content[0].text
        assert text.startswith("Invalid input:")
        assert "**Troubleshooting:**" in text
        assert api.call_count == 0

    async def test_unknown_tool_rendered(self, client, api):
        app = LeadMagicMCPServer(client)

        result = await _call_tool(app, "no_such_tool", None)

        assert "Unknown tool: no_such_tool" in result.content[0].text
        assert api.call_count == 0


class TestServerInfo:
    def test_get_server_info(self, client):
        info = LeadMagicMCPServer(client).get_server_info()

        assert info["name"] == SERVER_NAME
        assert info["version"] == __version__
        assert info["tool_count"] == 19
        assert info["api_key_masked"] == "lm_test_..."
        assert info["client_config"]["base_url"] == BASE_URL
        assert API_KEY not in repr(info)

    async def test_connection_success(self, client, api):
        api.respond(200, {"credits": 250})

        assert await LeadMagicMCPServer(client).test_connection() == {
            "success": True,
            "credits": 250,
        }

    async def test_connection_failure_does_not_raise(self, client, api):
        api.respond(401, {"error": "UNAUTHORIZED", "message": "Invalid API key"})

        result = await LeadMagicMCPServer(client).test_connection()

        assert result == {"success": False, "error": "Invalid API key"}
