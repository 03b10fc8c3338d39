"""
Type definitions for MCP tool responses and handlers.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..errors import ErrorPayload
from ..formatting import ImagePayload

if TYPE_CHECKING:
    from ..session import SessionManager

SUCCESS_TEXT = "Success"


@dataclass(slots=True)
class ToolContent:
    """Single content item in tool response."""

    type: str  # "text" or "image"
    text: str | None = None
    data: str | None = None  # base64 for images
    mime_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to MCP content format."""
        if self.type == "image":
            return {"type": "image", "data": self.data, "mimeType": self.mime_type}
        return {"type": "text", "text": self.text}


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


def is_image_result(value: Any) -> bool:
    return isinstance(value, ImagePayload) and bool(value.get("data"))


@dataclass(slots=True)
class ToolResult:
    """Result of a tool execution."""

    content: list[ToolContent] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def text(cls, text: str) -> ToolResult:
        return cls(content=[ToolContent(type="text", text=text)])

    @classmethod
    def json(cls, data: Any) -> ToolResult:
        return cls(content=[ToolContent(type="text", text=_dumps(data))])

    @classmethod
    def error(cls, payload: dict[str, Any]) -> ToolResult:
        return cls(content=[ToolContent(type="text", text=_dumps(dict(payload)))], is_error=True)

    @classmethod
    def with_image(cls, data_b64: str, metadata: dict[str, Any], mime_type: str = "image/png") -> ToolResult:
        """Image block first, then the remaining metadata as JSON text."""
        return cls(
            content=[
                ToolContent(type="image", data=data_b64, mime_type=mime_type),
                ToolContent(type="text", text=_dumps(metadata)),
            ]
        )

    @classmethod
    def from_value(cls, value: Any) -> ToolResult:
        """Wrap a raw operation result.

        - ErrorPayload   -> JSON text, isError
        - image map      -> image block + metadata text
        - str            -> literal text
        - None           -> "Success"
        - anything else  -> JSON text
        """
        if isinstance(value, ErrorPayload):
            return cls.error(value)
        if is_image_result(value):
            metadata = {k: v for k, v in value.items() if k != "data"}
            mime = f"image/{value.get('format') or 'png'}"
            return cls.with_image(value["data"], metadata, mime)
        if isinstance(value, str):
            return cls.text(value)
        if value is None:
            return cls.text(SUCCESS_TEXT)
        return cls.json(value)

    def to_content_list(self) -> list[dict[str, Any]]:
        """Convert to MCP content list format."""
        return [c.to_dict() for c in self.content]

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.to_content_list(), "isError": self.is_error}


HandlerFunc = Callable[["SessionManager", dict[str, Any]], Any]


__all__ = ["SUCCESS_TEXT", "HandlerFunc", "ToolContent", "ToolResult", "is_image_result"]
