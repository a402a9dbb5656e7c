"""Email tools — validation, finding, profile-to-email lookups."""

from __future__ import annotations

from typing import Any

from leadmagic_mcp.schemas.requests import (
    B2BSocialEmailRequest,
    EmailFinderRequest,
    EmailValidationRequest,
    PersonalEmailFinderRequest,
)
from leadmagic_mcp.schemas.responses import (
    B2BSocialEmailResponse,
    EmailFinderResponse,
    EmailValidationResponse,
    PersonalEmailFinderResponse,
)
from leadmagic_mcp.tools.base import BaseTool, credits_used, fmt_text


class ValidateEmailTool(BaseTool):
    name = "validate_email"
    title = "Email Validation"
    description = (
        "Validate an email address for deliverability and retrieve associated company "
        "information. Reports validity, MX records and catch-all detection."
    )
    request_model = EmailValidationRequest
    response_model = EmailValidationResponse

    async def invoke(self, request: EmailValidationRequest) -> Any:
        return await self._client.validate_email(request)

    def summarize(
        self, request: EmailValidationRequest, result: EmailValidationResponse
    ) -> tuple[str, str | None]:
        email = fmt_text(result.email, request.email)
        return (
            f"Email validation completed for {email}",
            f"Status: {fmt_text(result.email_status)}, {credits_used(result)}",
        )


class FindEmailTool(BaseTool):
    name = "find_email"
    title = "Email Finder"
    description = (
        "Find a verified email address from a person's first and last name plus their "
        "company name or domain."
    )
    request_model = EmailFinderRequest
    response_model = EmailFinderResponse

    async def invoke(self, request: EmailFinderRequest) -> Any:
        return await self._client.find_email(request)

    def summarize(
        self, request: EmailFinderRequest, result: EmailFinderResponse
    ) -> tuple[str, str | None]:
        return (
            f"Email search completed for {request.first_name} {request.last_name}",
            f"Found: {fmt_text(result.email, 'Not found')}, "
            f"Status: {fmt_text(result.status)}, {credits_used(result)}",
        )


class FindPersonalEmailTool(BaseTool):
    name = "find_personal_email"
    title = "Personal Email Finder"
    description = (
        "Find personal email addresses from a B2B profile URL. Useful when a professional "
        "email is not available."
    )
    request_model = PersonalEmailFinderRequest
    response_model = PersonalEmailFinderResponse

    async def invoke(self, request: PersonalEmailFinderRequest) -> Any:
        return await self._client.find_personal_email(request)

    def summarize(
        self, request: PersonalEmailFinderRequest, result: PersonalEmailFinderResponse
    ) -> tuple[str, str | None]:
        return (
            "Personal email search completed",
            f"Email: {fmt_text(result.personal_email, 'Not found')}, "
            f"Status: {fmt_text(result.status)}, {credits_used(result)}",
        )


class SocialToWorkEmailTool(BaseTool):
    name = "social_to_work_email"
    title = "B2B Social to Email"
    description = "Find the work email address behind a B2B profile URL."
    request_model = B2BSocialEmailRequest
    response_model = B2BSocialEmailResponse

    async def invoke(self, request: B2BSocialEmailRequest) -> Any:
        return await self._client.social_to_work_email(request)

    def summarize(
        self, request: B2BSocialEmailRequest, result: B2BSocialEmailResponse
    ) -> tuple[str, str | None]:
        return (
            "Work email search completed",
            f"Email: {fmt_text(result.work_email, 'Not found')}, "
            f"Status: {fmt_text(result.status)}, {credits_used(result)}",
        )
