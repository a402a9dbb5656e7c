"""Job market tools — job postings, roles, employees, reference data."""

from __future__ import annotations

from typing import Any

from leadmagic_mcp.schemas.requests import (
    EmployeeFinderRequest,
    JobsFinderRequest,
    RoleFinderRequest,
)
from leadmagic_mcp.schemas.responses import (
    EmployeeFinderResponse,
    JobCountriesResponse,
    JobsFinderResponse,
    JobTypesResponse,
    RoleFinderResponse,
)
from leadmagic_mcp.tools.base import BaseTool, count, credits_used, fmt_number, fmt_text


class FindJobsTool(BaseTool):
    name = "find_jobs"
    title = "Jobs Finder"
    description = (
        "Search job postings by company, title, location, experience level, description "
        "keywords or country (see get_job_countries). Paginated: page starts at 1, "
        "per_page defaults to 20 (max 50)."
    )
    request_model = JobsFinderRequest
    response_model = JobsFinderResponse

    async def invoke(self, request: JobsFinderRequest) -> Any:
        return await self._client.find_jobs(request)

    def summarize(
        self, request: JobsFinderRequest, result: JobsFinderResponse
    ) -> tuple[str, str | None]:
        return (
            "Job search completed",
            f"Found {fmt_number(result.total_count)} jobs "
            f"(Page {fmt_number(result.page)}/{fmt_number(result.total_pages)}), "
            f"{credits_used(result)}",
        )


class FindRoleTool(BaseTool):
    name = "find_role"
    title = "Role Finder"
    description = (
        "Find who holds a specific role or job title within a company, identified by "
        "name, domain or company profile URL."
    )
    request_model = RoleFinderRequest
    response_model = RoleFinderResponse

    async def invoke(self, request: RoleFinderRequest) -> Any:
        return await self._client.find_role(request)

    def summarize(
        self, request: RoleFinderRequest, result: RoleFinderResponse
    ) -> tuple[str, str | None]:
        return (
            f'Role search completed for "{request.job_title}"',
            f"Company: {fmt_text(result.company_name)}, {credits_used(result)}",
        )


class FindEmployeesTool(BaseTool):
    name = "find_employees"
    title = "Employee Finder"
    description = (
        "List employees of a company with their titles. Paginated: page starts at 1, "
        "per_page defaults to 20 (max 50)."
    )
    request_model = EmployeeFinderRequest
    response_model = EmployeeFinderResponse

    async def invoke(self, request: EmployeeFinderRequest) -> Any:
        return await self._client.find_employees(request)

    def summarize(
        self, request: EmployeeFinderRequest, result: EmployeeFinderResponse
    ) -> tuple[str, str | None]:
        returned = result.returned_count
        if returned is None:
            returned = count(result.data)
        return (
            "Employee search completed",
            f"Found {fmt_number(result.total_count)} employees at {request.company_name}, "
            f"Returned: {fmt_number(returned)}, {credits_used(result)}",
        )


class GetJobCountriesTool(BaseTool):
    name = "get_job_countries"
    title = "Get Job Countries"
    description = "List the countries available for job filtering (country_id in find_jobs)."
    response_model = JobCountriesResponse

    async def invoke(self, request: Any) -> Any:
        return await self._client.get_job_countries()

    def summarize(self, request: Any, result: Any) -> tuple[str, str | None]:
        return f"Retrieved {count(result)} available countries for job filtering", None


class GetJobTypesTool(BaseTool):
    name = "get_job_types"
    title = "Get Job Types"
    description = "List the job types (employment types) available for filtering job searches."
    response_model = JobTypesResponse

    async def invoke(self, request: Any) -> Any:
        return await self._client.get_job_types()

    def summarize(self, request: Any, result: Any) -> tuple[str, str | None]:
        return f"Retrieved {count(result)} available job types for filtering", None
