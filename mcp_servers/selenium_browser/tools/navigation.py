"""
Navigation tools for browser automation.

Provides:
- navigate_to: Navigate to URL (https:// assumed when no scheme is given)
- go_back / go_forward: Browser history
- refresh_page: Reload and wait for readyState
- current_url / page_title
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from ..errors import BrowserToolError
from .base import wait_until

if TYPE_CHECKING:
    from ..driver import BrowserDriver
    from ..session import SessionManager

_KNOWN_SCHEMES = ("http://", "https://", "about:", "data:", "file:", "chrome:")


def normalize_url(url: str) -> str:
    """Prepend https:// to protocol-less input."""
    raw = (url or "").strip()
    if raw.lower().startswith(_KNOWN_SCHEMES):
        return raw
    return "https://" + raw


def wait_ready(driver: BrowserDriver, timeout: float) -> bool:
    return bool(wait_until(lambda: driver.execute_script("return document.readyState") == "complete", timeout))


def navigate_to(session: SessionManager, url: str) -> str:
    """Navigate to url and wait for the document to finish loading.

    Returns:
        "Navigated to: <current url>\\nTitle: <title>"
    """
    target = normalize_url(url)
    driver = session.driver
    timeout = session.config.timeout
    try:
        driver.navigate(target)
        ready = wait_ready(driver, timeout)
    except Exception as e:
        raise BrowserToolError(
            tool="navigate",
            action="navigate",
            reason=f"Failed to navigate to URL: {e}",
            suggestion="Check URL is valid and accessible",
        ) from e
    if not ready:
        raise BrowserToolError(
            tool="navigate",
            action="wait_load",
            reason=f"Failed to navigate to URL: page did not finish loading within {timeout:g}s",
            suggestion="Retry or raise SELENIUM_TIMEOUT",
            details={"url": target},
        )
    return f"Navigated to: {driver.current_url()}\nTitle: {driver.title()}"


def go_back(session: SessionManager) -> str:
    driver = session.driver
    try:
        driver.back()
        time.sleep(session.config.navigation_settle)
        return f"Navigated back. Current URL: {driver.current_url()}"
    except Exception as e:
        raise BrowserToolError(
            tool="goBack",
            action="navigate",
            reason=f"Failed to go back: {e}",
            suggestion="Ensure there is history to go back to",
        ) from e


def go_forward(session: SessionManager) -> str:
    driver = session.driver
    try:
        driver.forward()
        time.sleep(session.config.navigation_settle)
        return f"Navigated forward. Current URL: {driver.current_url()}"
    except Exception as e:
        raise BrowserToolError(
            tool="goForward",
            action="navigate",
            reason=f"Failed to go forward: {e}",
            suggestion="Ensure there is forward history",
        ) from e


def refresh_page(session: SessionManager) -> str:
    driver = session.driver
    try:
        driver.refresh()
        ready = wait_ready(driver, session.config.timeout)
    except Exception as e:
        raise BrowserToolError(
            tool="refresh",
            action="reload",
            reason=f"Failed to refresh: {e}",
            suggestion="Ensure page is responsive",
        ) from e
    if not ready:
        raise BrowserToolError(
            tool="refresh",
            action="wait_load",
            reason=f"Failed to refresh: page did not finish loading within {session.config.timeout:g}s",
            suggestion="Ensure page is responsive",
        )
    return f"Page refreshed. Current URL: {driver.current_url()}"


def current_url(session: SessionManager) -> str:
    return session.driver.current_url()


def page_title(session: SessionManager) -> str:
    return session.driver.title()
