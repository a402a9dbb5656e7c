"""Integration clients for external APIs."""

from leadmagic_mcp.integrations._base import BaseAPIClient
from leadmagic_mcp.integrations.errors import (
    ClientError,
    ErrorKind,
    InputValidationError,
    LeadMagicError,
    NetworkError,
    ServerError,
    UnknownError,
)
from leadmagic_mcp.integrations.leadmagic import ClientConfig, LeadMagicClient

__all__ = [
    "BaseAPIClient",
    "ClientConfig",
    "ClientError",
    "ErrorKind",
    "InputValidationError",
    "LeadMagicClient",
    "LeadMagicError",
    "NetworkError",
    "ServerError",
    "UnknownError",
]
