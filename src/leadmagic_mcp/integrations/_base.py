"""Base API client with shared error handling and lifecycle management."""

from __future__ import annotations

from typing import Any

import httpx

from leadmagic_mcp.common.logging import get_logger
from leadmagic_mcp.integrations.errors import (
    LeadMagicError,
    NetworkError,
    UnknownError,
    classify,
)

log = get_logger(__name__)


class BaseAPIClient:
    """Async context manager wrapping httpx.AsyncClient with error handling.

    Subclasses must set ``_integration_name`` and implement
    ``_build_client()``.  Every failure leaves ``request()`` as a
    ``LeadMagicError``; raw httpx exceptions are only ever chained.
    """

    _integration_name: str = "unknown"
    _client: httpx.AsyncClient

    def _build_client(self) -> httpx.AsyncClient:
        """Create a configured httpx.AsyncClient (auth, base_url, timeout)."""
        raise NotImplementedError

    # -- Lifecycle -----------------------------------------------------------

    async def __aenter__(self) -> BaseAPIClient:
        self._client = self._build_client()
        await self._client.__aenter__()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self._client.__aexit__(exc_type, exc_val, exc_tb)

    # -- Request helpers -----------------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any | None = None,
    ) -> Any:
        """Send one HTTP request through the managed client.

        Returns the decoded JSON body.  Raises a ``LeadMagicError`` subclass
        on HTTP, network or decoding failures.
        """
        try:
            resp = await self._client.request(method, path, params=params, json=json)
        except httpx.TimeoutException as exc:
            log.warning(f"{self._integration_name.lower()}_timeout", method=method, path=path)
            raise NetworkError(
                "TIMEOUT",
                "Request timed out - please check your connection",
            ) from exc
        except (httpx.UnsupportedProtocol, httpx.InvalidURL) as exc:
            raise UnknownError(None, "REQUEST_ERROR", str(exc) or "Request configuration error") from exc
        except httpx.TransportError as exc:
            log.warning(
                f"{self._integration_name.lower()}_network_error",
                method=method,
                path=path,
                error=type(exc).__name__,
            )
            raise NetworkError(
                "NETWORK_ERROR",
                "Network error occurred - please check your connection",
            ) from exc
        except httpx.HTTPError as exc:
            raise UnknownError(None, "REQUEST_ERROR", str(exc) or "Request failed") from exc
        except Exception as exc:
            log.error(
                f"{self._integration_name.lower()}_unexpected_error",
                method=method,
                path=path,
                error=str(exc),
            )
            raise UnknownError(None, "UNKNOWN_ERROR", str(exc) or "Unknown error occurred") from exc

        if not resp.is_success:
            raise self._error_from_response(resp)

        try:
            return resp.json()
        except ValueError as exc:
            raise UnknownError(
                resp.status_code,
                "INVALID_RESPONSE",
                "Response body is not valid JSON",
                resp.text[:500] or None,
            ) from exc

    def _error_from_response(self, resp: httpx.Response) -> LeadMagicError:
        """Build a structured error from a non-2xx response."""
        try:
            body = resp.json()
        except ValueError:
            body = None

        fallback = resp.reason_phrase or "Request failed"
        if isinstance(body, dict):
            code = str(body.get("error") or "API_ERROR")
            message = str(body.get("message") or fallback)
            raw: Any = body
        else:
            code = "API_ERROR"
            message = fallback
            raw = body if body is not None else (resp.text[:500] or None)

        log.warning(
            f"{self._integration_name.lower()}_api_error",
            status_code=resp.status_code,
            code=code,
        )
        return classify(resp.status_code)(resp.status_code, code, message, raw)

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, *, json: Any | None = None) -> Any:
        return await self.request("POST", path, json=json)
