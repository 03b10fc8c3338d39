"""
Element tool handlers - lookup, interaction and state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...tools import elements
from .common import bool_arg, require, selector_arg, timeout_ms, timeout_seconds

if TYPE_CHECKING:
    from ...session import SessionManager


def handle_find_element(session: SessionManager, args: dict[str, Any]) -> str:
    return elements.find_element(session, selector_arg(args, "find_element"), timeout_ms(args))


def handle_find_elements(session: SessionManager, args: dict[str, Any]) -> list[dict[str, Any]]:
    return elements.find_elements(session, selector_arg(args, "findElements"))


def handle_wait_for_element(session: SessionManager, args: dict[str, Any]) -> str:
    return elements.wait_for_element(session, selector_arg(args, "waitForElement"), timeout_seconds(args))


def handle_click(session: SessionManager, args: dict[str, Any]) -> str:
    return elements.click(session, selector_arg(args, "click"), timeout_ms(args))


def handle_double_click(session: SessionManager, args: dict[str, Any]) -> str:
    return elements.double_click(session, selector_arg(args, "doubleClick"))


def handle_right_click(session: SessionManager, args: dict[str, Any]) -> str:
    return elements.right_click(session, selector_arg(args, "rightClick"))


def handle_hover(session: SessionManager, args: dict[str, Any]) -> str:
    return elements.hover(session, selector_arg(args, "hover"))


def handle_fill(session: SessionManager, args: dict[str, Any]) -> str:
    selector = selector_arg(args, "fill")
    text = args.get("text")
    if text is None:
        text = args.get("value")
    return elements.fill(
        session,
        selector,
        str(text),
        clear=bool_arg(args, "clear", True),
        timeout=timeout_ms(args),
    )


def handle_select(session: SessionManager, args: dict[str, Any]) -> str:
    selector = selector_arg(args, "select")
    option = require(args, "option", "select")
    return elements.select(session, selector, str(option), str(args.get("selectBy") or "text"))


def handle_get_text(session: SessionManager, args: dict[str, Any]) -> str:
    return elements.get_text(session, selector_arg(args, "getText"), timeout_ms(args))


def handle_get_attribute(session: SessionManager, args: dict[str, Any]) -> dict[str, str]:
    selector = selector_arg(args, "getAttribute")
    attribute = str(require(args, "attribute", "getAttribute"))
    return elements.get_attribute(session, selector, attribute)


def handle_is_visible(session: SessionManager, args: dict[str, Any]) -> bool:
    return elements.is_visible(session, selector_arg(args, "isVisible"))


def handle_is_enabled(session: SessionManager, args: dict[str, Any]) -> bool:
    return elements.is_enabled(session, selector_arg(args, "isEnabled"))


def handle_is_selected(session: SessionManager, args: dict[str, Any]) -> bool:
    return elements.is_selected(session, selector_arg(args, "isSelected"))


ELEMENT_HANDLERS: dict[str, tuple] = {
    "find_element": (handle_find_element, True),
    "findElements": (handle_find_elements, True),
    "waitForElement": (handle_wait_for_element, True),
    "click": (handle_click, True),
    "doubleClick": (handle_double_click, True),
    "rightClick": (handle_right_click, True),
    "hover": (handle_hover, True),
    "fill": (handle_fill, True),
    "select": (handle_select, True),
    "getText": (handle_get_text, True),
    "getAttribute": (handle_get_attribute, True),
    "isVisible": (handle_is_visible, True),
    "isEnabled": (handle_is_enabled, True),
    "isSelected": (handle_is_selected, True),
}
