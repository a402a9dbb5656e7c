"""Base tool abstract class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from mcp import types

from leadmagic_mcp.common.logging import get_logger
from leadmagic_mcp.integrations.errors import LeadMagicError, UnknownError
from leadmagic_mcp.integrations.leadmagic import LeadMagicClient
from leadmagic_mcp.schemas.requests import EmptyRequest, RequestModel, parse_request
from leadmagic_mcp.schemas.responses import parse_response
from leadmagic_mcp.tools.formatting import format_error, format_success

log = get_logger(__name__)


def fmt_number(value: Any) -> str:
    """Thousands-separated number, or N/A."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return "N/A"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value:,}"


def fmt_text(value: Any, default: str = "N/A") -> str:
    return str(value) if value not in (None, "") else default


def count(items: Any) -> int:
    return len(items) if isinstance(items, list) else 0


def credits_used(result: Any) -> str:
    return f"Credits used: {fmt_number(getattr(result, 'credits_consumed', None))}"


class BaseTool(ABC):
    """One LeadMagic operation exposed as an MCP tool.

    Subclasses set ``name``, ``title``, ``description``, ``request_model`` and
    ``response_model`` and implement ``invoke()``.  ``run()`` is the whole
    per-call lifecycle: validate, call, format.  It never raises for a
    per-call failure; the error is rendered instead.
    """

    name: str
    title: str
    description: str
    request_model: type[RequestModel] = EmptyRequest
    response_model: Any = None

    def __init__(self, client: LeadMagicClient) -> None:
        self._client = client

    @property
    def input_schema(self) -> dict:
        """JSON Schema for tool input parameters."""
        return self.request_model.model_json_schema()

    def to_tool_definition(self) -> types.Tool:
        """Convert to an MCP tool definition."""
        return types.Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=self.input_schema,
            annotations=types.ToolAnnotations(
                title=self.title,
                readOnlyHint=True,
                openWorldHint=True,
            ),
        )

    @abstractmethod
    async def invoke(self, request: Any) -> Any:
        """Call the API with a validated request and return the raw payload."""
        ...

    def summarize(self, request: Any, result: Any) -> tuple[str, str | None]:
        """Headline and summary line for a successful call."""
        return f"{self.title} completed", credits_used(result)

    async def run(self, arguments: Mapping[str, Any] | None) -> str:
        secret = self._client.config.api_key.get_secret_value()
        try:
            request = parse_request(self.request_model, arguments)
            data = await self.invoke(request)
            result = (
                parse_response(self.response_model, data)
                if self.response_model is not None
                else data
            )
            message, summary = self.summarize(request, result)
        except LeadMagicError as exc:
            log.warning(
                "tool_failed",
                tool=self.name,
                kind=exc.kind.value,
                status=exc.status,
                code=exc.code,
            )
            return format_error(exc, secret=secret)
        except Exception as exc:
            log.exception("tool_crashed", tool=self.name)
            return format_error(
                UnknownError(None, "UNKNOWN_ERROR", str(exc) or type(exc).__name__),
                secret=secret,
            )

        log.info(
            "tool_executed",
            tool=self.name,
            credits=getattr(result, "credits_consumed", None),
        )
        return format_success(message, data, summary, secret=secret)
