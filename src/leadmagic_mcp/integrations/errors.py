"""Structured LeadMagic errors.

Every failure on the request path ends up as exactly one ``LeadMagicError``
subclass.  The ``kind`` attribute is the closed classification used by the
response formatter.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    CLIENT = "client"
    SERVER = "server"
    NETWORK = "network"
    UNKNOWN = "unknown"


NETWORK_STATUS = 0


class LeadMagicError(Exception):
    """LeadMagic API failure with status, error code and raw payload."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        status: int | None,
        code: str,
        message: str,
        response: Any = None,
    ) -> None:
        self.status = status
        self.code = code
        self.message = message
        self.response = response
        super().__init__(message)

    def __str__(self) -> str:
        return f"{type(self).__name__}: [{self.status}] {self.code} - {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status!r}, code={self.code!r}, message={self.message!r})"

    @property
    def is_client_error(self) -> bool:
        return self.kind is ErrorKind.CLIENT

    @property
    def is_server_error(self) -> bool:
        return self.kind is ErrorKind.SERVER

    @property
    def is_network_error(self) -> bool:
        return self.kind is ErrorKind.NETWORK

    @property
    def retryable(self) -> bool:
        """True for failures that may succeed if repeated later."""
        return self.kind in (ErrorKind.SERVER, ErrorKind.NETWORK) or self.status == 429

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "status": self.status,
            "code": self.code,
            "message": self.message,
        }


class InputValidationError(LeadMagicError):
    """Tool arguments failed schema validation; no request was sent."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, fields: Sequence[str] = ()) -> None:
        super().__init__(400, "VALIDATION_ERROR", message)
        self.fields = tuple(fields)


class ClientError(LeadMagicError):
    """The API answered with a 4xx status."""

    kind = ErrorKind.CLIENT

    @property
    def is_bad_request(self) -> bool:
        return self.status == 400

    @property
    def is_auth_error(self) -> bool:
        return self.status == 401

    @property
    def is_rate_limited(self) -> bool:
        return self.status == 429


class ServerError(LeadMagicError):
    """The API answered with a 5xx status."""

    kind = ErrorKind.SERVER


class NetworkError(LeadMagicError):
    """No response was received (DNS, refused connection, timeout)."""

    kind = ErrorKind.NETWORK

    def __init__(self, code: str, message: str) -> None:
        super().__init__(NETWORK_STATUS, code, message)


class UnknownError(LeadMagicError):
    """Anything that cannot be classified more precisely."""

    kind = ErrorKind.UNKNOWN


def classify(status: int) -> type[LeadMagicError]:
    """Return the error class for an HTTP status code."""
    if 400 <= status < 500:
        return ClientError
    if 500 <= status < 600:
        return ServerError
    return UnknownError
