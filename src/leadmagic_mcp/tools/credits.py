"""Credit balance tool."""

from __future__ import annotations

from typing import Any

from leadmagic_mcp.schemas.responses import CreditsResponse
from leadmagic_mcp.tools.base import BaseTool, fmt_number


class GetCreditsTool(BaseTool):
    name = "get_credits"
    title = "Get API Credits"
    description = (
        "Check the number of available API credits for your LeadMagic account. "
        "Essential for monitoring usage and planning API calls. Does not consume credits."
    )
    response_model = CreditsResponse

    async def invoke(self, request: Any) -> Any:
        return await self._client.get_credits()

    def summarize(self, request: Any, result: CreditsResponse) -> tuple[str, str | None]:
        return f"Available credits: {fmt_number(result.credits)}", None
