"""Company intelligence tools."""

from __future__ import annotations

from typing import Any

from leadmagic_mcp.schemas.requests import CompanyFundingRequest
from leadmagic_mcp.schemas.responses import CompanyFundingResponse
from leadmagic_mcp.tools.base import BaseTool, credits_used, fmt_text


class GetCompanyFundingTool(BaseTool):
    name = "get_company_funding"
    title = "Company Funding"
    description = (
        "Get funding, revenue, headcount and top competitors for a company identified "
        "by domain or name."
    )
    request_model = CompanyFundingRequest
    response_model = CompanyFundingResponse

    async def invoke(self, request: CompanyFundingRequest) -> Any:
        return await self._client.get_company_funding(request)

    def summarize(
        self, request: CompanyFundingRequest, result: CompanyFundingResponse
    ) -> tuple[str, str | None]:
        financial = result.financialInfo
        size = result.companySize
        funding = fmt_text(getattr(financial, "formattedFunding", None))
        revenue = fmt_text(getattr(financial, "formattedRevenue", None))
        employees = fmt_text(getattr(size, "employeeRange", None))
        return (
            "Company funding analysis completed",
            f"Funding: {funding}, Revenue: {revenue}, Employees: {employees}, "
            f"{credits_used(result)}",
        )
