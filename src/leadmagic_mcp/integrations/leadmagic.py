"""LeadMagic API client — B2B data enrichment integration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from leadmagic_mcp import SERVER_NAME, __version__
from leadmagic_mcp.common.logging import get_logger
from leadmagic_mcp.integrations._base import BaseAPIClient

if TYPE_CHECKING:
    from leadmagic_mcp.schemas.requests import (
        AdsSearchRequest,
        B2BAdDetailsRequest,
        B2BProfileRequest,
        B2BSocialEmailRequest,
        CompanyFundingRequest,
        CompanySearchRequest,
        EmailFinderRequest,
        EmailValidationRequest,
        EmployeeFinderRequest,
        JobsFinderRequest,
        MobileFinderRequest,
        PersonalEmailFinderRequest,
        ProfileSearchRequest,
        RequestModel,
        RoleFinderRequest,
    )

log = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.leadmagic.io"
DEFAULT_TIMEOUT = 30.0  # seconds
USER_AGENT = f"{SERVER_NAME}/{__version__}"


def mask_secret(secret: str) -> str:
    """Show only a short prefix of a credential."""
    if len(secret) <= 12:
        return "***"
    return f"{secret[:8]}..."


class ClientConfig(BaseModel):
    """Immutable connection settings shared by every tool."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    debug: bool = False

    @field_validator("api_key", mode="before")
    @classmethod
    def _require_api_key(cls, value: Any) -> Any:
        raw = value.get_secret_value() if isinstance(value, SecretStr) else value
        if not isinstance(raw, str) or not raw.strip():
            raise ValueError("LeadMagic API key is required")
        return raw.strip()

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/") or DEFAULT_BASE_URL

    @property
    def masked_api_key(self) -> str:
        return mask_secret(self.api_key.get_secret_value())


async def _log_request(request: httpx.Request) -> None:
    log.debug("leadmagic_request", method=request.method, path=request.url.path)


async def _log_response(response: httpx.Response) -> None:
    log.debug(
        "leadmagic_response",
        method=response.request.method,
        path=response.request.url.path,
        status_code=response.status_code,
    )


class LeadMagicClient(BaseAPIClient):
    """Typed access to the 19 LeadMagic endpoints.

    Use as ``async with LeadMagicClient(config) as client``.  Every method
    sends exactly one request; there is no retry.  Cancelling the awaiting
    task aborts the in-flight request.
    """

    _integration_name = "LeadMagic"

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _build_client(self) -> httpx.AsyncClient:
        config = self._config
        event_hooks = (
            {"request": [_log_request], "response": [_log_response]} if config.debug else None
        )
        return httpx.AsyncClient(
            base_url=config.base_url,
            headers={
                "X-API-Key": config.api_key.get_secret_value(),
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=config.timeout,
            transport=self._transport,
            event_hooks=event_hooks,
        )

    async def _post_model(self, path: str, request: RequestModel) -> Any:
        return await self.post(path, json=request.to_body())

    # -- Credits -------------------------------------------------------------

    async def get_credits(self) -> Any:
        return await self.post("/credits", json={})

    # -- Email validation & finding ------------------------------------------

    async def validate_email(self, request: EmailValidationRequest) -> Any:
        return await self._post_model("/email-validate", request)

    async def find_email(self, request: EmailFinderRequest) -> Any:
        return await self._post_model("/email-finder", request)

    async def find_personal_email(self, request: PersonalEmailFinderRequest) -> Any:
        return await self._post_model("/personal-email-finder", request)

    async def social_to_work_email(self, request: B2BSocialEmailRequest) -> Any:
        return await self._post_model("/b2b-social-email", request)

    # -- Profiles & companies ------------------------------------------------

    async def search_profile(self, request: ProfileSearchRequest) -> Any:
        """Full profile from a B2B profile URL.  Server-side limit: 300 requests/minute."""
        return await self._post_model("/profile-search", request)

    async def search_company(self, request: CompanySearchRequest) -> Any:
        return await self._post_model("/company-search", request)

    async def email_to_profile(self, request: B2BProfileRequest) -> Any:
        return await self._post_model("/b2b-profile", request)

    async def find_mobile(self, request: MobileFinderRequest) -> Any:
        return await self._post_model("/mobile-finder", request)

    # -- Jobs & people -------------------------------------------------------

    async def find_jobs(self, request: JobsFinderRequest) -> Any:
        return await self._post_model("/jobs-finder", request)

    async def find_role(self, request: RoleFinderRequest) -> Any:
        return await self._post_model("/role-finder", request)

    async def find_employees(self, request: EmployeeFinderRequest) -> Any:
        return await self._post_model("/employee-finder", request)

    # -- Company intelligence ------------------------------------------------

    async def get_company_funding(self, request: CompanyFundingRequest) -> Any:
        return await self._post_model("/company-funding", request)

    # -- Advertisements ------------------------------------------------------

    async def search_google_ads(self, request: AdsSearchRequest) -> Any:
        return await self._post_model("/google/searchads", request)

    async def search_meta_ads(self, request: AdsSearchRequest) -> Any:
        return await self._post_model("/meta/searchads", request)

    async def search_b2b_ads(self, request: AdsSearchRequest) -> Any:
        return await self._post_model("/b2b/searchads", request)

    async def get_b2b_ad_details(self, request: B2BAdDetailsRequest) -> Any:
        return await self._post_model("/b2b/ad-details", request)

    # -- Reference data ------------------------------------------------------

    async def get_job_countries(self) -> Any:
        return await self.get("/job-country")

    async def get_job_types(self) -> Any:
        return await self.get("/job-types")

    # -- Utilities -----------------------------------------------------------

    def get_config(self) -> dict[str, Any]:
        """Current configuration with the API key masked."""
        return {
            "base_url": self._config.base_url,
            "timeout": self._config.timeout,
            "api_key": self._config.masked_api_key,
        }

    async def test_connection(self) -> dict[str, Any]:
        """Check authentication by reading the credit balance.

        Raises ``LeadMagicError`` if the check fails.
        """
        result = await self.get_credits()
        credits = result.get("credits") if isinstance(result, dict) else None
        return {"success": True, "credits": credits}
