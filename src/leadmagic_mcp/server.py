"""MCP server exposing the LeadMagic tool registry."""

from __future__ import annotations

from typing import Any

from mcp import types
from mcp.server import Server

from leadmagic_mcp import SERVER_NAME, __version__
from leadmagic_mcp.common.logging import get_logger
from leadmagic_mcp.integrations.errors import LeadMagicError
from leadmagic_mcp.integrations.leadmagic import LeadMagicClient
from leadmagic_mcp.tools.registry import ToolRegistry, build_registry

log = get_logger(__name__)


def create_server(registry: ToolRegistry) -> Server:
    """Build a low-level MCP server backed by ``registry``."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return registry.definitions()

    # Arguments are validated by the tools themselves so that failures come
    # back as formatted guidance rather than a bare SDK error.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        text = await registry.call(name, arguments)
        return [types.TextContent(type="text", text=text)]

    return server


class LeadMagicMCPServer:
    """The MCP server, its tools and the API client they share."""

    def __init__(self, client: LeadMagicClient) -> None:
        self._client = client
        self.registry = build_registry(client)
        self.server = create_server(self.registry)

    def get_server_info(self) -> dict[str, Any]:
        return {
            "name": SERVER_NAME,
            "version": __version__,
            "tool_count": len(self.registry),
            "api_key_masked": self._client.config.masked_api_key,
            "client_config": self._client.get_config(),
        }

    async def test_connection(self) -> dict[str, Any]:
        """Check the API key against the credits endpoint without raising."""
        try:
            return await self._client.test_connection()
        except LeadMagicError as exc:
            log.warning("connection_test_failed", code=exc.code, status=exc.status)
            return {"success": False, "error": exc.message}
