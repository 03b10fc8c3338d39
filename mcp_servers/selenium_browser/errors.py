"""
Error types shared by the protocol engine, session manager and tools.

Operation failures are raised as BrowserToolError and converted into the
``{"error": message}`` map at the session boundary. ProtocolError is the only
error the engine turns into a JSON-RPC error object on its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

NO_SESSION = "No browser session active"


class ErrorPayload(dict):
    """An operation failure map: {"error": message, ...}."""

    @classmethod
    def of(cls, message: str, **extra: Any) -> ErrorPayload:
        payload = cls(error=message)
        payload.update({k: v for k, v in extra.items() if v})
        return payload


@dataclass
class BrowserToolError(Exception):
    """Structured operation failure."""

    tool: str
    action: str
    reason: str
    suggestion: str = ""
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.reason

    def to_dict(self) -> ErrorPayload:
        return ErrorPayload.of(self.reason, suggestion=self.suggestion, details=self.details)


class ElementTimeoutError(BrowserToolError):
    pass


class NoSessionError(RuntimeError):
    """Raised inside operations that need a driver when none is running."""

    def __init__(self) -> None:
        super().__init__(NO_SESSION)


class ProtocolError(Exception):
    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603

__all__ = [
    "INTERNAL_ERROR",
    "METHOD_NOT_FOUND",
    "NO_SESSION",
    "BrowserToolError",
    "ErrorPayload",
    "ElementTimeoutError",
    "NoSessionError",
    "ProtocolError",
]
