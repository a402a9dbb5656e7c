"""Request models, one per LeadMagic operation.

Input validation is strict: unknown fields, wrong types and malformed
emails/URLs are rejected before anything is sent.  ``to_body()`` drops
absent optionals so the API never receives ``null`` noise.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Literal

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    TypeAdapter,
    ValidationError,
    WithJsonSchema,
    model_validator,
)

from leadmagic_mcp.integrations.errors import InputValidationError

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validate only; the caller's spelling is sent as-is.
    if any(char.isspace() for char in value):
        raise ValueError("must be a valid URL without whitespace")
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise ValueError("must be a valid URL") from None
    return value


Url = Annotated[
    str,
    AfterValidator(_check_url),
    WithJsonSchema({"type": "string", "format": "uri"}),
]


def _check_email(value: str) -> str:
    # Same as URLs: no normalisation, no "Name <addr>" display form.
    if "<" in value or value != value.strip():
        raise ValueError("must be a plain email address")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"must be a valid email address: {exc}") from None
    return value


Email = Annotated[
    str,
    AfterValidator(_check_email),
    WithJsonSchema({"type": "string", "format": "email"}),
]
NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

ExperienceLevel = Literal["entry", "mid", "senior", "executive"]

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 50


class RequestModel(BaseModel):
    """Base for all request bodies."""

    model_config = ConfigDict(extra="forbid", strict=True)

    # Names of mutually-exclusive identifiers; at least one must be present.
    identifier_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _require_identifier(self) -> RequestModel:
        fields = self.identifier_fields
        if fields and all(getattr(self, name) is None for name in fields):
            raise ValueError(f"at least one of {', '.join(fields)} is required")
        return self

    def to_body(self) -> dict[str, Any]:
        """JSON body for the API call."""
        return self.model_dump(mode="json", exclude_none=True)


class EmptyRequest(RequestModel):
    """Operations that take no parameters."""


class EmailValidationRequest(RequestModel):
    email: Email = Field(description="Email address to validate")
    first_name: str | None = Field(default=None, description="First name of the person")
    last_name: str | None = Field(default=None, description="Last name of the person")


class EmailFinderRequest(RequestModel):
    first_name: NonEmptyStr = Field(description="First name of the person")
    last_name: NonEmptyStr = Field(description="Last name of the person")
    domain: str | None = Field(default=None, description="Company domain, e.g. acme.com")
    company_name: str | None = Field(default=None, description="Company name")


class ProfileSearchRequest(RequestModel):
    profile_url: Url = Field(description="B2B profile URL, e.g. a LinkedIn profile")


class CompanySearchRequest(RequestModel):
    identifier_fields = ("company_domain", "company_name", "profile_url")

    company_domain: str | None = Field(default=None, description="Company domain, e.g. acme.com")
    company_name: str | None = Field(default=None, description="Company name")
    profile_url: Url | None = Field(default=None, description="Company B2B profile URL")


class MobileFinderRequest(RequestModel):
    identifier_fields = ("profile_url", "work_email", "personal_email")

    profile_url: Url | None = Field(default=None, description="B2B profile URL")
    work_email: Email | None = Field(default=None, description="Work email address")
    personal_email: Email | None = Field(default=None, description="Personal email address")


class B2BProfileRequest(RequestModel):
    work_email: Email = Field(description="Work email address to look up")


class PaginatedRequest(RequestModel):
    page: int = Field(default=DEFAULT_PAGE, ge=1, description="Page number, starting at 1")
    per_page: int = Field(
        default=DEFAULT_PER_PAGE,
        ge=1,
        le=MAX_PER_PAGE,
        description=f"Results per page (max {MAX_PER_PAGE})",
    )


class JobsFinderRequest(PaginatedRequest):
    company_name: str | None = Field(default=None, description="Hiring company name")
    company_website: str | None = Field(default=None, description="Hiring company website")
    job_title: str | None = Field(default=None, description="Job title to search for")
    location: str | None = Field(default=None, description="Job location")
    experience_level: ExperienceLevel | None = Field(
        default=None, description="Required experience level"
    )
    job_description: str | None = Field(default=None, description="Keywords in the description")
    country_id: str | None = Field(
        default=None, description="Country id from get_job_countries"
    )


class RoleFinderRequest(RequestModel):
    job_title: NonEmptyStr = Field(description="Role or job title to find")
    company_name: str | None = Field(default=None, description="Company name")
    company_domain: str | None = Field(default=None, description="Company domain")
    company_profile_url: Url | None = Field(default=None, description="Company B2B profile URL")


class EmployeeFinderRequest(PaginatedRequest):
    company_name: NonEmptyStr = Field(description="Company whose employees to list")


class CompanyFundingRequest(RequestModel):
    identifier_fields = ("company_domain", "company_name")

    company_domain: str | None = Field(default=None, description="Company domain")
    company_name: str | None = Field(default=None, description="Company name")


class PersonalEmailFinderRequest(RequestModel):
    profile_url: Url = Field(description="B2B profile URL")


class B2BSocialEmailRequest(RequestModel):
    profile_url: Url = Field(description="B2B profile URL")


class AdsSearchRequest(RequestModel):
    identifier_fields = ("company_domain", "company_name")

    company_domain: str | None = Field(default=None, description="Advertiser domain")
    company_name: str | None = Field(default=None, description="Advertiser name")


class B2BAdDetailsRequest(RequestModel):
    ad_id: NonEmptyStr = Field(description="B2B ad identifier from search_b2b_ads")


def _error_fields(model: type[RequestModel], exc: ValidationError) -> list[str]:
    fields: list[str] = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        names = [".".join(str(part) for part in loc)] if loc else list(model.identifier_fields)
        for name in names:
            if name and name not in fields:
                fields.append(name)
    return fields


def _error_message(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc") or ())
        msg = error.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def parse_request(
    model: type[RequestModel],
    arguments: Mapping[str, Any] | None,
) -> RequestModel:
    """Validate tool arguments against ``model``.

    Raises ``InputValidationError`` naming every offending field.
    """
    try:
        return model.model_validate(dict(arguments or {}))
    except ValidationError as exc:
        fields = _error_fields(model, exc)
        raise InputValidationError(
            f"Invalid input for {', '.join(fields) or model.__name__}: {_error_message(exc)}",
            fields=fields,
        ) from exc
