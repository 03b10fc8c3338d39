"""
Screenshot tool handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...tools import screenshot
from .common import selector_arg

if TYPE_CHECKING:
    from ...session import SessionManager


def handle_screenshot(session: SessionManager, args: dict[str, Any]) -> dict[str, Any] | str:
    output_path = args.get("outputPath")
    return screenshot.take_screenshot(session, str(output_path) if output_path else None)


def handle_element_screenshot(session: SessionManager, args: dict[str, Any]) -> dict[str, Any]:
    return screenshot.element_screenshot(session, selector_arg(args, "elementScreenshot"))


def handle_full_page_screenshot(session: SessionManager, args: dict[str, Any]) -> dict[str, Any]:
    return screenshot.full_page_screenshot(session)


SCREENSHOT_HANDLERS: dict[str, tuple] = {
    "screenshot": (handle_screenshot, True),
    "elementScreenshot": (handle_element_screenshot, True),
    "fullPageScreenshot": (handle_full_page_screenshot, True),
}
