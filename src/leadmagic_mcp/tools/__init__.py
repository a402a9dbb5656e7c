"""LeadMagic operations exposed as MCP tools."""

from leadmagic_mcp.tools.base import BaseTool
from leadmagic_mcp.tools.registry import ALL_TOOLS, ToolRegistry, build_registry

__all__ = ["ALL_TOOLS", "BaseTool", "ToolRegistry", "build_registry"]
