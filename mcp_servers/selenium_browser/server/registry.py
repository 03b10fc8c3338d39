"""
Tool registry with dispatch table for MCP server.

Maps canonical operation names to (handler, requires_session). External tool
names from the catalog are mapped to canonical names through TOOL_ALIASES.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..errors import NO_SESSION
from .types import HandlerFunc

if TYPE_CHECKING:
    from ..session import SessionManager

logger = logging.getLogger("mcp.selenium.registry")

TOOL_ALIASES: dict[str, str] = {
    "click_element": "click",
    "send_keys": "fill",
    "get_element_text": "getText",
    "take_screenshot": "screenshot",
    "close_session": "cleanup",
    "getUrl": "getCurrentUrl",
}


def canonical_name(name: str) -> str:
    return TOOL_ALIASES.get(name, name)


class ToolRegistry:
    """Registry for tool handlers with session gating."""

    def __init__(self) -> None:
        # name -> (handler, requires_session)
        self._handlers: dict[str, tuple[HandlerFunc, bool]] = {}

    def register_many(self, handlers: dict[str, tuple[HandlerFunc, bool]]) -> None:
        """Register multiple handlers at once."""
        self._handlers.update(handlers)

    def has(self, name: str) -> bool:
        return name in self._handlers

    def dispatch(self, name: str, session: SessionManager, arguments: dict[str, Any]) -> Any:
        """
        Dispatch tool call to appropriate handler.

        Returns the handler's raw result, or the no-session sentinel when the
        tool needs a running browser and there is none.

        Raises:
            KeyError: If tool not found
        """
        handler_info = self._handlers.get(name)
        if handler_info is None:
            raise KeyError(f"Unknown tool: {name}")

        handler, requires_session = handler_info
        if requires_session and not session.is_active:
            logger.info("tool=%s skipped: %s", name, NO_SESSION)
            return NO_SESSION
        return handler(session, arguments)

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers.keys())


def create_default_registry() -> ToolRegistry:
    """Create registry with all default handlers."""
    from .handlers import ALL_HANDLERS

    registry = ToolRegistry()
    registry.register_many(ALL_HANDLERS)
    return registry


__all__ = ["TOOL_ALIASES", "ToolRegistry", "canonical_name", "create_default_registry"]
