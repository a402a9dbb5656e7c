"""Response models for LeadMagic payloads.

These document the shapes the API returns and give tools typed access for
their summaries.  Validation is advisory: extra fields are kept and a
payload that does not match is logged and used as-is.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from leadmagic_mcp.common.logging import get_logger

log = get_logger(__name__)

Number = int | float

EmailStatus = Literal["valid", "valid_catch_all", "invalid", "unknown", "catch_all"]
EmailFinderStatus = Literal["valid", "valid_catch_all", "not_found"]
FoundStatus = Literal["found", "not_found"]


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class CreditedResponse(ResponseModel):
    credits_consumed: Number | None = None
    message: str | None = None


# --- Shared pieces ---


class Location(ResponseModel):
    name: str | None = None
    locality: str | None = None
    region: str | None = None
    metro: str | None = None
    country: str | None = None
    continent: str | None = None
    street_address: str | None = None
    address_line_2: str | None = None
    postal_code: str | None = None
    geo: str | None = None


class CompanyFields(ResponseModel):
    company_name: str | None = None
    company_industry: str | None = None
    company_size: str | None = None
    company_founded: Number | None = None
    company_type: str | None = None
    company_linkedin_url: str | None = None
    company_linkedin_id: str | None = None
    company_facebook_url: str | None = None
    company_twitter_url: str | None = None
    company_location: Location | None = None


# --- Credits ---


class CreditsResponse(ResponseModel):
    credits: Number | None = None


# --- Email ---


class EmailValidationResponse(CompanyFields, CreditedResponse):
    email: str | None = None
    email_status: EmailStatus | None = None
    is_domain_catch_all: bool | None = None
    mx_record: str | None = None
    mx_provider: str | None = None
    mx_security_gateway: bool | None = None


class EmailFinderResponse(CompanyFields, CreditedResponse):
    email: str | None = None
    status: EmailFinderStatus | None = None
    first_name: str | None = None
    last_name: str | None = None
    domain: str | None = None
    is_domain_catch_all: bool | None = None
    mx_record: str | None = None
    mx_provider: str | None = None
    mx_security_gateway: bool | None = None


class PersonalEmailFinderResponse(CreditedResponse):
    personal_email: str | None = None
    status: FoundStatus | None = None


class B2BSocialEmailResponse(CreditedResponse):
    work_email: str | None = None
    status: FoundStatus | None = None


# --- Profiles and companies ---


class Experience(ResponseModel):
    company_id: str | None = None
    title: str | None = None
    subtitle: str | None = None
    caption: str | None = None


class Education(ResponseModel):
    title: str | None = None
    caption: str | None = None


class ProfileSearchResponse(CreditedResponse):
    profile_url: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    public_identifier: str | None = None
    headline: str | None = None
    company_name: str | None = None
    company_size: str | None = None
    company_industry: str | None = None
    company_linkedin_url: str | None = None
    company_website: str | None = None
    total_tenure_months: str | None = None
    total_tenure_days: str | None = None
    total_tenure_years: str | None = None
    connections: Number | None = None
    followers: Number | None = None
    country: str | None = None
    location: str | None = None
    about: str | None = None
    experiences: list[Experience] | None = None
    educations: list[Education] | None = None


class CompanyLocation(ResponseModel):
    country: str | None = None
    city: str | None = None
    geographic_area: str | None = None
    postal_code: str | None = None
    line1: str | None = None
    line2: str | None = None
    description: str | None = None
    headquarter: bool | None = None
    localized_name: str | None = None
    latitude: Number | None = None
    longitude: Number | None = None


class EmployeeCountRange(ResponseModel):
    start: Number | None = None
    end: Number | None = None


class FoundedOn(ResponseModel):
    month: Number | None = None
    year: Number | None = None
    day: Number | None = None


class CompanySearchResponse(CreditedResponse):
    company_name: str | None = None
    company_id: Number | None = None
    locations: list[CompanyLocation] | None = None
    employee_count: Number | None = None
    specialities: list[str] | None = None
    employee_count_range: EmployeeCountRange | None = None
    tagline: str | None = None
    follower_count: Number | None = None
    industry: str | None = None
    description: str | None = None
    website_url: str | None = None
    founded_on: FoundedOn | None = None
    universal_name: str | None = None
    hashtag: str | None = None
    industry_v2_taxonomy: str | None = None
    url: str | None = None


class MobileFinderResponse(CreditedResponse):
    mobile_number: str | None = None


class B2BProfileResponse(CreditedResponse):
    profile_url: str | None = None


# --- Jobs and people ---


class JobCompany(ResponseModel):
    name: str | None = None
    website_url: str | None = None
    linkedin_url: str | None = None
    twitter_handle: str | None = None
    github_url: str | None = None
    is_agency: bool | None = None


class JobTypeRef(ResponseModel):
    id: Number | None = None
    name: str | None = None


class JobCountryRef(ResponseModel):
    id: Number | None = None
    code: str | None = None
    name: str | None = None


class JobCity(ResponseModel):
    geonameid: Number | None = None
    asciiname: str | None = None
    name: str | None = None
    country: JobCountryRef | None = None


class JobResult(ResponseModel):
    company: JobCompany | None = None
    title: str | None = None
    location: str | None = None
    types: list[JobTypeRef] | None = None
    cities: list[JobCity] | None = None
    has_remote: bool | None = None
    published: str | None = None
    expired: str | None = None
    application_url: str | None = None
    language: str | None = None
    salary_min: str | None = None
    salary_max: str | None = None
    salary_currency: str | None = None
    experience_level: str | None = None
    description: str | None = None


class JobsFinderResponse(CreditedResponse):
    total_count: Number | None = None
    page: Number | None = None
    per_page: Number | None = None
    total_pages: Number | None = None
    results: list[JobResult] | None = None


class RoleFinderResponse(CreditedResponse):
    company_name: str | None = None
    company_website: str | None = None


class Employee(ResponseModel):
    first_name: str | None = None
    last_name: str | None = None
    title: str | None = None
    website: str | None = None
    company_name: str | None = None


class EmployeeFinderResponse(CreditedResponse):
    total_count: Number | None = None
    returned_count: Number | None = None
    data: list[Employee] | None = None


# --- Company intelligence ---


class FundingBasicInfo(ResponseModel):
    companyName: str | None = None
    description: str | None = None
    shortName: str | None = None
    founded: str | None = None
    primaryDomain: str | None = None
    phone: str | None = None
    status: str | None = None
    followers: Number | None = None
    ownership: str | None = None


class FinancialInfo(ResponseModel):
    revenue: Number | None = None
    formattedRevenue: str | None = None
    totalFunding: Number | None = None
    formattedFunding: str | None = None


class CompanySize(ResponseModel):
    employees: Number | None = None
    employeeRange: str | None = None


class Competitor(ResponseModel):
    name: str | None = None
    revenue: str | None = None
    employees: str | None = None
    website: str | None = None


class CompanyFundingResponse(CreditedResponse):
    basicInfo: FundingBasicInfo | None = None
    financialInfo: FinancialInfo | None = None
    companySize: CompanySize | None = None
    topCompetitors: list[Competitor] | None = None


# --- Advertisements ---


class GoogleAdVariant(ResponseModel):
    content: str | None = None
    height: Number | None = None
    width: Number | None = None


class GoogleAd(ResponseModel):
    advertiser_id: str | None = None
    creative_id: str | None = None
    advertiser_name: str | None = None
    format: str | None = None
    start: str | None = None
    last_seen: str | None = None
    original_url: str | None = None
    variants: list[GoogleAdVariant] | None = None


class GoogleAdsResponse(CreditedResponse):
    ads: list[GoogleAd] | None = None


class MetaAdSnapshot(ResponseModel):
    body: dict[str, Any] | None = None
    title: str | None = None
    cta_text: str | None = None
    images: list[dict[str, Any]] | None = None
    videos: list[dict[str, Any]] | None = None


class MetaAd(ResponseModel):
    ad_archive_id: str | None = None
    page_id: str | None = None
    page_name: str | None = None
    is_active: bool | None = None
    publisher_platform: list[str] | None = None
    snapshot: MetaAdSnapshot | None = None


class MetaAdsResponse(CreditedResponse):
    ads: list[MetaAd] | None = None


class B2BAd(ResponseModel):
    ad_id: str | None = None
    company_name: str | None = None
    ad_title: str | None = None
    ad_description: str | None = None
    ad_url: str | None = None


class B2BAdsResponse(CreditedResponse):
    ads: list[B2BAd] | None = None


class CampaignInfo(ResponseModel):
    campaign_name: str | None = None
    start_date: str | None = None
    end_date: str | None = None


class B2BAdDetailsResponse(B2BAd, CreditedResponse):
    campaign_info: CampaignInfo | None = None


# --- Reference data ---


class JobCountry(ResponseModel):
    id: str | None = None
    name: str | None = None


class JobType(ResponseModel):
    id: Number | None = None
    name: str | None = None


JobCountriesResponse = list[JobCountry]
JobTypesResponse = list[JobType]


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def parse_response(response_type: Any, data: Any) -> Any:
    """Parse ``data`` leniently.

    On a mismatch the raw payload is returned (wrapped with
    ``model_construct`` for model types) and a warning is logged.
    """
    try:
        return _adapter(response_type).validate_python(data)
    except ValidationError as exc:
        log.warning(
            "response_schema_mismatch",
            response_type=getattr(response_type, "__name__", str(response_type)),
            errors=exc.error_count(),
        )
        if isinstance(response_type, type) and issubclass(response_type, BaseModel):
            if isinstance(data, dict):
                return response_type.model_construct(**data)
            return response_type.model_construct()
        return data
