"""Profile, company and contact lookup tools."""

from __future__ import annotations

from typing import Any

from leadmagic_mcp.schemas.requests import (
    B2BProfileRequest,
    CompanySearchRequest,
    MobileFinderRequest,
    ProfileSearchRequest,
)
from leadmagic_mcp.schemas.responses import (
    B2BProfileResponse,
    CompanySearchResponse,
    MobileFinderResponse,
    ProfileSearchResponse,
)
from leadmagic_mcp.tools.base import BaseTool, credits_used, fmt_number, fmt_text


class SearchProfileTool(BaseTool):
    name = "search_profile"
    title = "Profile Search"
    description = (
        "Get full profile details from a B2B profile URL (e.g. LinkedIn): work history, "
        "education and company details. Rate limit: 300 requests/minute."
    )
    request_model = ProfileSearchRequest
    response_model = ProfileSearchResponse

    async def invoke(self, request: ProfileSearchRequest) -> Any:
        return await self._client.search_profile(request)

    def summarize(
        self, request: ProfileSearchRequest, result: ProfileSearchResponse
    ) -> tuple[str, str | None]:
        return (
            "Profile search completed",
            f"Profile: {fmt_text(result.full_name)} at {fmt_text(result.company_name)}, "
            f"{credits_used(result)}",
        )


class SearchCompanyTool(BaseTool):
    name = "search_company"
    title = "Company Search"
    description = (
        "Search for company details by domain, name or company profile URL (any of them). "
        "Returns employee count, locations, industry and company metadata."
    )
    request_model = CompanySearchRequest
    response_model = CompanySearchResponse

    async def invoke(self, request: CompanySearchRequest) -> Any:
        return await self._client.search_company(request)

    def summarize(
        self, request: CompanySearchRequest, result: CompanySearchResponse
    ) -> tuple[str, str | None]:
        return (
            "Company search completed",
            f"Company: {fmt_text(result.company_name)} "
            f"({fmt_number(result.employee_count)} employees), {credits_used(result)}",
        )


class EmailToProfileTool(BaseTool):
    name = "email_to_profile"
    title = "Email to B2B Profile"
    description = "Reverse lookup: find the B2B profile URL that belongs to a work email address."
    request_model = B2BProfileRequest
    response_model = B2BProfileResponse

    async def invoke(self, request: B2BProfileRequest) -> Any:
        return await self._client.email_to_profile(request)

    def summarize(
        self, request: B2BProfileRequest, result: B2BProfileResponse
    ) -> tuple[str, str | None]:
        return (
            f"Profile lookup completed for {request.work_email}",
            f"Profile URL: {fmt_text(result.profile_url, 'Not found')}, {credits_used(result)}",
        )


class FindMobileTool(BaseTool):
    name = "find_mobile"
    title = "Mobile Finder"
    description = (
        "Find a mobile phone number from a B2B profile URL, work email or personal email "
        "(any of them)."
    )
    request_model = MobileFinderRequest
    response_model = MobileFinderResponse

    async def invoke(self, request: MobileFinderRequest) -> Any:
        return await self._client.find_mobile(request)

    def summarize(
        self, request: MobileFinderRequest, result: MobileFinderResponse
    ) -> tuple[str, str | None]:
        return (
            "Mobile number search completed",
            f"Mobile: {fmt_text(result.mobile_number, 'Not found')}, {credits_used(result)}",
        )
