"""
Base utilities for browser automation tools.

Provides:
- bounded polling (wait_until) used by every element lookup
- element lookup with presence / clickability waits
- scroll-into-view with verification and fallback
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from ..errors import ElementTimeoutError

if TYPE_CHECKING:
    from ..driver import BrowserDriver
    from ..locators import Selector

logger = logging.getLogger("mcp.selenium.tools")

T = TypeVar("T")

POLL_INTERVAL = 0.1

SCROLL_CENTER_JS = "arguments[0].scrollIntoView({behavior: 'smooth', block: 'center', inline: 'center'});"

IN_VIEWPORT_JS = """
var rect = arguments[0].getBoundingClientRect();
return (
  rect.top >= 0 &&
  rect.left >= 0 &&
  rect.bottom <= (window.innerHeight || document.documentElement.clientHeight) &&
  rect.right <= (window.innerWidth || document.documentElement.clientWidth)
);
"""

SCROLL_FALLBACK_JS = """
window.scrollTo({
  top: arguments[0].offsetTop - (window.innerHeight / 2),
  left: arguments[0].offsetLeft - (window.innerWidth / 2),
  behavior: 'smooth'
});
"""


def wait_until(condition: Callable[[], T | None], timeout: float, interval: float = POLL_INTERVAL) -> T | None:
    """Call condition until it returns a truthy value or the timeout elapses.

    The condition is always checked at least once, so a zero timeout is a single check.
    """
    deadline = time.monotonic() + max(0.0, timeout)
    while True:
        value = condition()
        if value:
            return value
        if time.monotonic() >= deadline:
            return None
        time.sleep(interval)


def first_element(driver: BrowserDriver, selector: Selector) -> Any | None:
    elements = driver.find_elements(selector)
    return elements[0] if elements else None


def _format_seconds(timeout: float) -> str:
    return f"{timeout:g}"


def wait_for_element(
    driver: BrowserDriver,
    selector: Selector,
    *,
    tool: str,
    timeout: float,
) -> Any:
    """Wait for the first element matching selector to be present in the DOM."""
    element = wait_until(lambda: first_element(driver, selector), timeout)
    if element is None:
        raise ElementTimeoutError(
            tool=tool,
            action="find",
            reason=f"Element not found within {_format_seconds(timeout)}s: {selector} ({tool})",
            suggestion="Check the selector or raise the timeout",
            details={"selector": str(selector), "timeout": timeout},
        )
    return element


def wait_for_clickable(
    driver: BrowserDriver,
    selector: Selector,
    *,
    tool: str,
    timeout: float,
) -> Any:
    """Wait for the first match to be present, displayed and enabled.

    Presence and clickability share one deadline, so the call returns or raises
    within timeout.
    """
    found = False

    def condition() -> Any | None:
        nonlocal found
        element = first_element(driver, selector)
        if element is None:
            return None
        found = True
        return element if driver.is_displayed(element) and driver.is_enabled(element) else None

    element = wait_until(condition, timeout)
    if element is not None:
        return element
    if not found:
        raise ElementTimeoutError(
            tool=tool,
            action="find",
            reason=f"Element not found within {_format_seconds(timeout)}s: {selector} ({tool})",
            suggestion="Check the selector or raise the timeout",
            details={"selector": str(selector), "timeout": timeout},
        )
    raise ElementTimeoutError(
        tool=tool,
        action="wait_clickable",
        reason=f"Element not clickable within {_format_seconds(timeout)}s: {selector} ({tool})",
        suggestion="Element may be hidden, disabled or covered",
        details={"selector": str(selector), "timeout": timeout},
    )


def scroll_into_view(driver: BrowserDriver, element: Any, settle: float) -> None:
    """Center element in the viewport. Failures are logged, never raised."""
    try:
        driver.execute_script(SCROLL_CENTER_JS, element)
        if settle:
            time.sleep(settle)
        if not driver.execute_script(IN_VIEWPORT_JS, element):
            driver.execute_script(SCROLL_FALLBACK_JS, element)
            if settle:
                time.sleep(settle)
    except Exception as exc:  # noqa: BLE001
        logger.warning("scroll_into_view failed: %s", exc)


__all__ = [
    "IN_VIEWPORT_JS",
    "SCROLL_CENTER_JS",
    "SCROLL_FALLBACK_JS",
    "first_element",
    "logger",
    "scroll_into_view",
    "wait_for_clickable",
    "wait_for_element",
    "wait_until",
]
