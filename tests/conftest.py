"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import structlog

from leadmagic_mcp.integrations.leadmagic import ClientConfig, LeadMagicClient
from leadmagic_mcp.tools.registry import ALL_TOOLS, build_registry

API_KEY = "lm_test_0123456789abcdef"
BASE_URL = "https://api.leadmagic.test"

# Minimal valid arguments for every tool.
VALID_ARGS: dict[str, dict[str, Any]] = {
    "get_credits": {},
    "validate_email": {"email": "john@example.com"},
    "find_email": {"first_name": "John", "last_name": "Doe", "company_name": "Acme"},
    "find_personal_email": {"profile_url": "https://www.linkedin.com/in/johndoe"},
    "social_to_work_email": {"profile_url": "https://www.linkedin.com/in/johndoe"},
    "search_profile": {"profile_url": "https://www.linkedin.com/in/johndoe"},
    "search_company": {"company_domain": "acme.com"},
    "email_to_profile": {"work_email": "john@acme.com"},
    "find_mobile": {"work_email": "john@acme.com"},
    "find_jobs": {"job_title": "Software Engineer"},
    "find_role": {"job_title": "CTO", "company_name": "Acme"},
    "find_employees": {"company_name": "Acme"},
    "get_job_countries": {},
    "get_job_types": {},
    "get_company_funding": {"company_domain": "stripe.com"},
    "search_google_ads": {"company_domain": "acme.com"},
    "search_meta_ads": {"company_name": "Acme"},
    "search_b2b_ads": {"company_domain": "acme.com"},
    "get_b2b_ad_details": {"ad_id": "ad_123456"},
}

ENDPOINTS: dict[str, tuple[str, str]] = {
    "get_credits": ("POST", "/credits"),
    "validate_email": ("POST", "/email-validate"),
    "find_email": ("POST", "/email-finder"),
    "find_personal_email": ("POST", "/personal-email-finder"),
    "social_to_work_email": ("POST", "/b2b-social-email"),
    "search_profile": ("POST", "/profile-search"),
    "search_company": ("POST", "/company-search"),
    "email_to_profile": ("POST", "/b2b-profile"),
    "find_mobile": ("POST", "/mobile-finder"),
    "find_jobs": ("POST", "/jobs-finder"),
    "find_role": ("POST", "/role-finder"),
    "find_employees": ("POST", "/employee-finder"),
    "get_job_countries": ("GET", "/job-country"),
    "get_job_types": ("GET", "/job-types"),
    "get_company_funding": ("POST", "/company-funding"),
    "search_google_ads": ("POST", "/google/searchads"),
    "search_meta_ads": ("POST", "/meta/searchads"),
    "search_b2b_ads": ("POST", "/b2b/searchads"),
    "get_b2b_ad_details": ("POST", "/b2b/ad-details"),
}

# Tools whose request model rejects an empty argument object.
TOOLS_WITH_REQUIRED_INPUT = sorted(
    tool_cls.name
    for tool_cls in ALL_TOOLS
    if tool_cls.request_model.identifier_fields
    or any(field.is_required() for field in tool_cls.request_model.model_fields.values())
)


class FakeLeadMagicAPI:
    """Request handler for ``httpx.MockTransport`` that records every call."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status = 200
        self._json: Any = {"credits_consumed": 1, "message": "ok"}
        self._content: bytes | None = None
        self._raise: Callable[[httpx.Request], Exception] | None = None

    def respond(self, status: int = 200, json_body: Any = None, *, content: bytes | None = None) -> None:
        self._status = status
        self._json = json_body
        self._content = content
        self._raise = None

    def fail_with(self, factory: Callable[[httpx.Request], Exception]) -> None:
        self._raise = factory

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._raise is not None:
            raise self._raise(request)
        if self._content is not None:
            return httpx.Response(self._status, content=self._content)
        return httpx.Response(self._status, json=self._json)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def body(self, index: int = -1) -> Any:
        content = self.requests[index].content
        return json.loads(content) if content else None


@pytest.fixture(autouse=True)
def _reset_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key=API_KEY, base_url=BASE_URL)


@pytest.fixture
def api() -> FakeLeadMagicAPI:
    return FakeLeadMagicAPI()


@pytest.fixture
async def client(api: FakeLeadMagicAPI, config: ClientConfig):
    async with LeadMagicClient(config, transport=httpx.MockTransport(api)) as lm_client:
        yield lm_client


@pytest.fixture
def registry(client: LeadMagicClient):
    return build_registry(client)
