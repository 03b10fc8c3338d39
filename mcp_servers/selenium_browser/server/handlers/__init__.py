"""
Tool handlers organized by domain.

Each handler module provides functions that handle specific tool calls.
All handlers follow the signature: (session, arguments) -> raw result
and are keyed by canonical operation name.
"""

from .browser import BROWSER_HANDLERS
from .elements import ELEMENT_HANDLERS
from .navigation import NAVIGATION_HANDLERS
from .screenshots import SCREENSHOT_HANDLERS
from .scripts import SCRIPT_HANDLERS
from .storage import STORAGE_HANDLERS

# Aggregate all handlers
ALL_HANDLERS: dict[str, tuple] = {
    **BROWSER_HANDLERS,
    **NAVIGATION_HANDLERS,
    **ELEMENT_HANDLERS,
    **SCREENSHOT_HANDLERS,
    **SCRIPT_HANDLERS,
    **STORAGE_HANDLERS,
}

__all__ = [
    "ALL_HANDLERS",
    "BROWSER_HANDLERS",
    "ELEMENT_HANDLERS",
    "NAVIGATION_HANDLERS",
    "SCREENSHOT_HANDLERS",
    "SCRIPT_HANDLERS",
    "STORAGE_HANDLERS",
]
