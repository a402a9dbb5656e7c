"""Request and response schemas for the LeadMagic API."""

from leadmagic_mcp.schemas.requests import RequestModel, parse_request
from leadmagic_mcp.schemas.responses import ResponseModel, parse_response

__all__ = ["RequestModel", "ResponseModel", "parse_request", "parse_response"]
