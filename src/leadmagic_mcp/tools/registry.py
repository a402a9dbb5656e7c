"""Tool registry and dispatch."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from mcp import types

from leadmagic_mcp.common.logging import get_logger
from leadmagic_mcp.integrations.errors import UnknownError
from leadmagic_mcp.integrations.leadmagic import LeadMagicClient
from leadmagic_mcp.tools.ads import (
    GetB2BAdDetailsTool,
    SearchB2BAdsTool,
    SearchGoogleAdsTool,
    SearchMetaAdsTool,
)
from leadmagic_mcp.tools.base import BaseTool
from leadmagic_mcp.tools.companies import GetCompanyFundingTool
from leadmagic_mcp.tools.credits import GetCreditsTool
from leadmagic_mcp.tools.email import (
    FindEmailTool,
    FindPersonalEmailTool,
    SocialToWorkEmailTool,
    ValidateEmailTool,
)
from leadmagic_mcp.tools.formatting import format_error
from leadmagic_mcp.tools.jobs import (
    FindEmployeesTool,
    FindJobsTool,
    FindRoleTool,
    GetJobCountriesTool,
    GetJobTypesTool,
)
from leadmagic_mcp.tools.profiles import (
    EmailToProfileTool,
    FindMobileTool,
    SearchCompanyTool,
    SearchProfileTool,
)

log = get_logger(__name__)

ALL_TOOLS: tuple[type[BaseTool], ...] = (
    # Credits
    GetCreditsTool,
    # Email
    ValidateEmailTool,
    FindEmailTool,
    FindPersonalEmailTool,
    SocialToWorkEmailTool,
    # Profiles & companies
    SearchProfileTool,
    SearchCompanyTool,
    EmailToProfileTool,
    FindMobileTool,
    # Jobs & people
    FindJobsTool,
    FindRoleTool,
    FindEmployeesTool,
    GetJobCountriesTool,
    GetJobTypesTool,
    # Company intelligence
    GetCompanyFundingTool,
    # Advertisements
    SearchGoogleAdsTool,
    SearchMetaAdsTool,
    SearchB2BAdsTool,
    GetB2BAdDetailsTool,
)


class ToolRegistry:
    """Name-to-tool mapping for one server instance."""

    def __init__(self, secret: str | None = None) -> None:
        self._tools: dict[str, BaseTool] = {}
        self._secret = secret

    def register(self, tool: BaseTool) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool
        log.debug("tool_registered", tool=tool.name)

    def get(self, name: str) -> BaseTool | None:
        return self._tools.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[BaseTool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def definitions(self) -> list[types.Tool]:
        """MCP definitions for every registered tool."""
        return [tool.to_tool_definition() for tool in self._tools.values()]

    async def call(self, name: str, arguments: Mapping[str, Any] | None) -> str:
        """Run a tool by name and return its rendered text."""
        tool = self._tools.get(name)
        if tool is None:
            log.warning("tool_unknown", tool=name)
            return format_error(
                UnknownError(None, "UNKNOWN_TOOL", f"Unknown tool: {name}"),
                secret=self._secret,
            )

        log.info("tool_executing", tool=name)
        return await tool.run(arguments)


def build_registry(client: LeadMagicClient) -> ToolRegistry:
    """Register every LeadMagic tool against ``client``."""
    registry = ToolRegistry(secret=client.config.api_key.get_secret_value())
    for tool_cls in ALL_TOOLS:
        registry.register(tool_cls(client))
    log.info("all_tools_registered", count=len(registry))
    return registry
