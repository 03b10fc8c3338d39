"""
Session lifecycle handlers: start_browser and cleanup.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ...session import SessionManager

logger = logging.getLogger("mcp.selenium.session")


def _start_overrides(args: dict[str, Any]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.get("browser"):
        overrides["browser"] = str(args["browser"])
    options = args.get("options")
    if isinstance(options, dict):
        if "headless" in options:
            overrides["headless"] = bool(options["headless"])
        if isinstance(options.get("arguments"), list):
            overrides["arguments"] = list(options["arguments"])
    return overrides


def handle_start_browser(session: SessionManager, args: dict[str, Any]) -> str:
    started = session.ensure_started(_start_overrides(args))
    if not started:
        logger.info("start_browser: session already active, keeping current driver")
    return "Browser started successfully"


def handle_cleanup(session: SessionManager, args: dict[str, Any]) -> str:
    session.cleanup()
    return "Browser session closed"


BROWSER_HANDLERS: dict[str, tuple] = {
    "start_browser": (handle_start_browser, False),
    "cleanup": (handle_cleanup, False),
}
