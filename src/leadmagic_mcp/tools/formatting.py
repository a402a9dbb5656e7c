"""Text rendering of tool results for MCP clients."""

from __future__ import annotations

import json
from typing import Any, assert_never

from leadmagic_mcp.integrations.errors import ErrorKind, InputValidationError, LeadMagicError

HELP_URL = "https://github.com/LeadMagic/leadmagic-mcp/issues"
REDACTED = "[REDACTED]"


def redact(text: str, secret: str | None) -> str:
    """Remove every occurrence of ``secret`` from ``text``."""
    if secret:
        return text.replace(secret, REDACTED)
    return text


def format_success(
    message: str,
    data: Any = None,
    summary: str | None = None,
    *,
    secret: str | None = None,
) -> str:
    """Headline, optional summary line, then the full payload as JSON."""
    parts = [message]
    if summary:
        parts.append(f"\n**Summary:** {summary}")
    if data is not None:
        payload = json.dumps(data, indent=2, ensure_ascii=False, default=str)
        parts.append(f"\n\n**Detailed Results:**\n```json\n{payload}\n```")
    return redact("".join(parts), secret)


def troubleshooting(error: LeadMagicError) -> str:
    """Guidance text for an error, chosen by its classification."""
    match error.kind:
        case ErrorKind.VALIDATION:
            return "Please check that all required parameters are provided and valid."
        case ErrorKind.CLIENT:
            match error.status:
                case 400:
                    return "Please check that all required parameters are provided and valid."
                case 401:
                    return "Please check your API key is valid and has sufficient permissions."
                case 403:
                    return "Your API key does not have permission for this operation."
                case 429:
                    return (
                        "Rate limit exceeded. Please wait a moment before making more "
                        "requests; this error is safe to retry."
                    )
                case _:
                    return "Please verify your request parameters and try again."
        case ErrorKind.SERVER:
            return "LeadMagic server error. Please retry later, in a few moments."
        case ErrorKind.NETWORK:
            return "Network connectivity issue. Please check your internet connection."
        case ErrorKind.UNKNOWN:
            return "Please try again or contact support if the issue persists."
        case _:
            assert_never(error.kind)


def format_error(error: LeadMagicError, *, secret: str | None = None) -> str:
    """Render a classified error with code, status and guidance."""
    if isinstance(error, InputValidationError):
        lines = [f"Invalid input: {error.message}"]
        if error.fields:
            lines.append(f"**Fields:** {', '.join(error.fields)}")
    else:
        lines = [f"LeadMagic API Error: {error.message}"]

    status = "n/a" if error.status is None else str(error.status)
    lines.append(f"**Error Code:** {error.code}")
    lines.append(f"**Status:** {status}")
    lines.append(f"**Category:** {error.kind.value}")

    text = "\n".join(lines)
    text += f"\n\n**Troubleshooting:** {troubleshooting(error)}"
    text += f"\n\n**Need Help?** Visit: {HELP_URL}"
    return redact(text, secret)
