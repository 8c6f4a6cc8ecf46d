"""Error classes for the Gong MCP server."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class GongMCPError(Exception):
    """Base error with a code, a message, and optional details."""

    code: str
    message: str
    details: Optional[dict[str, Any]] = None

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ConfigurationError(GongMCPError):
    """Raised when required settings are missing or malformed."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("CONFIG_ERROR", message, details)


class BadRequestError(GongMCPError):
    """Raised when tool arguments are invalid or insufficient."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("BAD_REQUEST", message, details)


class UnknownToolError(GongMCPError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, name: str):
        super().__init__("UNKNOWN_TOOL", f"Unknown tool: {name}", {"name": name})


class GongAPIError(GongMCPError):
    """Raised for transport failures and non-2xx Gong API responses."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        details = {"status_code": status_code} if status_code is not None else None
        super().__init__("API_ERROR", message, details)
        self.status_code = status_code
