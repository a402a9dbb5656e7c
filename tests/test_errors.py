"""Tests for the LeadMagic error hierarchy."""

from __future__ import annotations

import pytest

from leadmagic_mcp.integrations.errors import (
    ClientError,
    ErrorKind,
    InputValidationError,
    LeadMagicError,
    NetworkError,
    ServerError,
    UnknownError,
    classify,
)


class TestClassify:
    @pytest.mark.parametrize(
        "status, expected",
        [
            (400, ClientError),
            (404, ClientError),
            (499, ClientError),
            (500, ServerError),
            (599, ServerError),
            (302, UnknownError),
            (600, UnknownError),
        ],
    )
    def test_status_ranges(self, status, expected):
        assert classify(status) is expected


class TestLeadMagicError:
    def test_attributes_and_str(self):
        error = ClientError(404, "NOT_FOUND", "Profile not found", {"error": "NOT_FOUND"})

        assert error.status == 404
        assert error.code == "NOT_FOUND"
        assert error.response == {"error": "NOT_FOUND"}
        assert str(error) == "ClientError: [404] NOT_FOUND - Profile not found"
        assert isinstance(error, LeadMagicError)

    def test_to_dict(self):
        error = ServerError(502, "API_ERROR", "Bad Gateway")

        assert error.to_dict() == {
            "kind": "server",
            "status": 502,
            "code": "API_ERROR",
            "message": "Bad Gateway",
        }

    def test_kind_predicates(self):
        assert ClientError(400, "X", "x").is_client_error
        assert ServerError(500, "X", "x").is_server_error
        assert NetworkError("NETWORK_ERROR", "x").is_network_error
        assert not UnknownError(None, "X", "x").is_client_error

    @pytest.mark.parametrize(
        "error, retryable",
        [
            (ClientError(429, "RATE_LIMITED", "slow down"), True),
            (ClientError(401, "UNAUTHORIZED", "bad key"), False),
            (ServerError(500, "API_ERROR", "oops"), True),
            (NetworkError("TIMEOUT", "timed out"), True),
            (InputValidationError("missing email", ("email",)), False),
            (UnknownError(None, "UNKNOWN_ERROR", "?"), False),
        ],
    )
    def test_retryable(self, error, retryable):
        assert error.retryable is retryable

    def test_client_error_predicates(self):
        assert ClientError(400, "X", "x").is_bad_request
        assert ClientError(401, "X", "x").is_auth_error
        assert ClientError(429, "X", "x").is_rate_limited


class TestSubclasses:
    def test_validation_error_shape(self):
        error = InputValidationError("Invalid input for email", ["email"])

        assert error.kind is ErrorKind.VALIDATION
        assert error.status == 400
        assert error.code == "VALIDATION_ERROR"
        assert error.fields == ("email",)

    def test_network_error_status_zero(self):
        error = NetworkError("NETWORK_ERROR", "no route")

        assert error.status == 0
        assert error.kind is ErrorKind.NETWORK

    def test_unknown_error_allows_missing_status(self):
        error = UnknownError(None, "UNKNOWN_ERROR", "weird")

        assert error.status is None
        assert "None" in str(error)
