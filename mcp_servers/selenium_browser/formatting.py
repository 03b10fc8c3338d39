"""Normalize raw script results into JSON-safe values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .driver import BrowserDriver


class ImagePayload(dict):
    """A capture result: wrapped as an image block instead of JSON text."""


def format_result(value: Any, driver: BrowserDriver) -> Any:
    """
    Format a value returned by the driver's script evaluation.

    - None            -> the string "null" (not a JSON null)
    - element handle  -> {"tagName", "text", "displayed"}
    - list / tuple    -> list of formatted items, order preserved
    - mapping         -> dict of formatted values
    - anything else   -> its string form ("true"/"false" for booleans)
    """
    if value is None:
        return "null"
    if driver.is_element(value):
        return describe_element(value, driver)
    if isinstance(value, (list, tuple)):
        return [format_result(item, driver) for item in value]
    if isinstance(value, Mapping):
        return {str(k): format_result(v, driver) for k, v in value.items()}
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def describe_element(element: Any, driver: BrowserDriver) -> dict[str, str]:
    return {
        "tagName": driver.tag_name(element),
        "text": driver.get_text(element),
        "displayed": "true" if driver.is_displayed(element) else "false",
    }


__all__ = ["ImagePayload", "describe_element", "format_result"]
