"""Advertisement intelligence tools."""

from __future__ import annotations

from typing import Any

from leadmagic_mcp.schemas.requests import AdsSearchRequest, B2BAdDetailsRequest
from leadmagic_mcp.schemas.responses import (
    B2BAdDetailsResponse,
    B2BAdsResponse,
    GoogleAdsResponse,
    MetaAdsResponse,
)
from leadmagic_mcp.tools.base import BaseTool, count, credits_used, fmt_text


class _AdsSearchTool(BaseTool):
    request_model = AdsSearchRequest
    network: str

    def summarize(self, request: AdsSearchRequest, result: Any) -> tuple[str, str | None]:
        found = count(getattr(result, "ads", None))
        return (
            f"{self.network} Ads search completed",
            f"Found {found} {self.network} ads, {credits_used(result)}",
        )


class SearchGoogleAdsTool(_AdsSearchTool):
    name = "search_google_ads"
    title = "Google Ads Search"
    description = (
        "Find Google search ads run by a company, identified by domain or name: "
        "creatives, formats and first/last seen dates."
    )
    response_model = GoogleAdsResponse
    network = "Google"

    async def invoke(self, request: AdsSearchRequest) -> Any:
        return await self._client.search_google_ads(request)


class SearchMetaAdsTool(_AdsSearchTool):
    name = "search_meta_ads"
    title = "Meta Ads Search"
    description = (
        "Find Meta (Facebook/Instagram) ads run by a company, identified by domain or name."
    )
    response_model = MetaAdsResponse
    network = "Meta"

    async def invoke(self, request: AdsSearchRequest) -> Any:
        return await self._client.search_meta_ads(request)


class SearchB2BAdsTool(_AdsSearchTool):
    name = "search_b2b_ads"
    title = "B2B Ads Search"
    description = (
        "Find B2B ad campaigns run by a company, identified by domain or name. Use the "
        "returned ad_id with get_b2b_ad_details."
    )
    response_model = B2BAdsResponse
    network = "B2B"

    async def invoke(self, request: AdsSearchRequest) -> Any:
        return await self._client.search_b2b_ads(request)


class GetB2BAdDetailsTool(BaseTool):
    name = "get_b2b_ad_details"
    title = "B2B Ad Details"
    description = "Get details and campaign information for one B2B ad by its ad_id."
    request_model = B2BAdDetailsRequest
    response_model = B2BAdDetailsResponse

    async def invoke(self, request: B2BAdDetailsRequest) -> Any:
        return await self._client.get_b2b_ad_details(request)

    def summarize(
        self, request: B2BAdDetailsRequest, result: B2BAdDetailsResponse
    ) -> tuple[str, str | None]:
        return (
            f"B2B Ad details retrieved for ad {request.ad_id}",
            f"Title: {fmt_text(result.ad_title)}, Company: {fmt_text(result.company_name)}, "
            f"{credits_used(result)}",
        )
