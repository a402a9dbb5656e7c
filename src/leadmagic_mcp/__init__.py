"""LeadMagic MCP server — the LeadMagic B2B data API exposed as MCP tools."""

__version__ = "1.0.2"

SERVER_NAME = "leadmagic-mcp-server"
