"""
Element interaction tools.

Every lookup resolves the compact selector encoding first (see locators.py),
then waits for the element with the session's timeout unless the caller passes
one. Interactive operations scroll the element into view before acting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import BrowserToolError, ElementTimeoutError
from ..locators import Selector, resolve
from .base import first_element, logger, scroll_into_view, wait_for_clickable
from .base import wait_for_element as wait_present

if TYPE_CHECKING:
    from ..session import SessionManager

HOVER_FALLBACK_JS = (
    "var event = new MouseEvent('mouseover', {'view': window, 'bubbles': true, 'cancelable': true});"
    "arguments[0].dispatchEvent(event);"
)


def _selector(value: str | Selector) -> Selector:
    return value if isinstance(value, Selector) else resolve(value)


def _timeout(session: SessionManager, timeout: float | None) -> float:
    return session.config.timeout if timeout is None else float(timeout)


def _failure(tool: str, action: str, prefix: str, exc: Exception, selector: Selector) -> BrowserToolError:
    if isinstance(exc, BrowserToolError):
        reason = f"{prefix}: {exc.reason}"
    else:
        reason = f"{prefix}: {exc}"
    return BrowserToolError(
        tool=tool,
        action=action,
        reason=reason,
        suggestion="Check the selector and that the element is interactable",
        details={"selector": str(selector)},
    )


def locate(session: SessionManager, selector: str | Selector, *, tool: str, timeout: float | None = None) -> Any:
    """Wait for presence and return the first matching element."""
    return wait_present(session.driver, _selector(selector), tool=tool, timeout=_timeout(session, timeout))


def find_element(session: SessionManager, selector: str | Selector, timeout: float | None = None) -> str:
    sel = _selector(selector)
    locate(session, sel, tool="find_element", timeout=timeout)
    return f"Element found: {sel}"


def wait_for_element(session: SessionManager, selector: str | Selector, timeout: float | None = None) -> str:
    sel = _selector(selector)
    locate(session, sel, tool="waitForElement", timeout=timeout)
    return f"Element found: {sel}"


def find_elements(session: SessionManager, selector: str | Selector) -> list[dict[str, Any]]:
    """List every element currently matching selector. Does not wait."""
    sel = _selector(selector)
    driver = session.driver
    try:
        elements = driver.find_elements(sel)
        return [
            {
                "index": i,
                "text": driver.get_text(el),
                "tag": driver.tag_name(el),
                "visible": bool(driver.is_displayed(el)),
            }
            for i, el in enumerate(elements)
        ]
    except Exception as e:
        raise _failure("findElements", "find", "Failed to find elements", e, sel) from e


def click(session: SessionManager, selector: str | Selector, timeout: float | None = None) -> str:
    sel = _selector(selector)
    driver = session.driver
    bound = _timeout(session, timeout)
    try:
        element = wait_for_clickable(driver, sel, tool="click", timeout=bound)
        scroll_into_view(driver, element, session.config.scroll_settle)
        driver.click(element)
    except ElementTimeoutError:
        raise
    except Exception as e:
        raise _failure("click", "click", "Failed to click element", e, sel) from e
    return f"Clicked element: {sel}"


def double_click(session: SessionManager, selector: str | Selector) -> str:
    sel = _selector(selector)
    driver = session.driver
    try:
        element = locate(session, sel, tool="doubleClick")
        scroll_into_view(driver, element, session.config.scroll_settle)
        driver.double_click(element)
    except ElementTimeoutError:
        raise
    except Exception as e:
        raise _failure("doubleClick", "double_click", "Failed to double-click element", e, sel) from e
    return f"Double-clicked element: {sel}"


def right_click(session: SessionManager, selector: str | Selector) -> str:
    sel = _selector(selector)
    driver = session.driver
    try:
        element = locate(session, sel, tool="rightClick")
        scroll_into_view(driver, element, session.config.scroll_settle)
        driver.right_click(element)
    except ElementTimeoutError:
        raise
    except Exception as e:
        raise _failure("rightClick", "right_click", "Failed to right-click element", e, sel) from e
    return f"Right-clicked element: {sel}"


def hover(session: SessionManager, selector: str | Selector) -> str:
    sel = _selector(selector)
    driver = session.driver
    try:
        element = locate(session, sel, tool="hover")
        scroll_into_view(driver, element, session.config.scroll_settle)
        try:
            driver.hover(element)
        except Exception as exc:  # noqa: BLE001
            logger.debug("native hover failed, dispatching mouseover: %s", exc)
            driver.execute_script(HOVER_FALLBACK_JS, element)
    except ElementTimeoutError:
        raise
    except Exception as e:
        raise _failure("hover", "hover", "Failed to hover over element", e, sel) from e
    return f"Hovered over element: {sel}"


def fill(
    session: SessionManager,
    selector: str | Selector,
    text: str,
    *,
    clear: bool = True,
    timeout: float | None = None,
) -> str:
    sel = _selector(selector)
    driver = session.driver
    try:
        element = locate(session, sel, tool="fill", timeout=timeout)
        scroll_into_view(driver, element, session.config.scroll_settle)
        if clear:
            driver.clear(element)
        driver.send_keys(element, text)
    except ElementTimeoutError:
        raise
    except Exception as e:
        raise _failure("fill", "type", "Failed to fill element", e, sel) from e
    return f"Filled element {sel} with: {text}"


def select(session: SessionManager, selector: str | Selector, option: str, by: str = "text") -> str:
    sel = _selector(selector)
    driver = session.driver
    try:
        element = locate(session, sel, tool="select")
        driver.select_option(element, str(option), (by or "text").lower())
    except ElementTimeoutError:
        raise
    except Exception as e:
        raise _failure("select", "select", "Failed to select option", e, sel) from e
    return f"Selected '{option}' in dropdown: {sel}"


def get_text(session: SessionManager, selector: str | Selector, timeout: float | None = None) -> str:
    """Visible text, or the value attribute of an input whose text is empty."""
    sel = _selector(selector)
    driver = session.driver
    try:
        element = locate(session, sel, tool="getText", timeout=timeout)
        text = driver.get_text(element) or ""
        if not text and driver.tag_name(element) == "input":
            text = driver.get_attribute(element, "value") or ""
        return text
    except ElementTimeoutError:
        raise
    except Exception as e:
        raise _failure("getText", "read", "Failed to get text", e, sel) from e


def get_attribute(session: SessionManager, selector: str | Selector, attribute: str) -> dict[str, str]:
    sel = _selector(selector)
    driver = session.driver
    try:
        element = locate(session, sel, tool="getAttribute")
        value = driver.get_attribute(element, attribute)
    except ElementTimeoutError:
        raise
    except Exception as e:
        raise _failure("getAttribute", "read", "Failed to get attribute", e, sel) from e
    return {"selector": str(sel), "attribute": attribute, "value": "" if value is None else str(value)}


def _check_state(session: SessionManager, selector: str | Selector, check: str) -> bool:
    driver = session.driver
    try:
        element = first_element(driver, _selector(selector))
        if element is None:
            return False
        return bool(getattr(driver, check)(element))
    except Exception as exc:  # noqa: BLE001
        logger.debug("%s check failed for %s: %s", check, selector, exc)
        return False


def is_visible(session: SessionManager, selector: str | Selector) -> bool:
    return _check_state(session, selector, "is_displayed")


def is_enabled(session: SessionManager, selector: str | Selector) -> bool:
    return _check_state(session, selector, "is_enabled")


def is_selected(session: SessionManager, selector: str | Selector) -> bool:
    return _check_state(session, selector, "is_selected")


__all__ = [
    "click",
    "double_click",
    "fill",
    "find_element",
    "find_elements",
    "get_attribute",
    "get_text",
    "hover",
    "is_enabled",
    "is_selected",
    "is_visible",
    "locate",
    "right_click",
    "select",
    "wait_for_element",
]
