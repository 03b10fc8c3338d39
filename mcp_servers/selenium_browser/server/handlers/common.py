"""Argument helpers shared by tool handlers."""

from __future__ import annotations

from typing import Any

from ...errors import BrowserToolError
from ...locators import Selector, selector_from_args


def require(args: dict[str, Any], key: str, tool: str) -> Any:
    value = args.get(key)
    if value is None:
        raise BrowserToolError(
            tool=tool,
            action="validate",
            reason=f"Missing required argument: {key}",
            suggestion=f"Pass '{key}' in the tool arguments",
        )
    return value


def selector_arg(args: dict[str, Any], tool: str) -> Selector:
    """Selector from the ``by``/``value`` pair (``by`` defaults to css)."""
    value = require(args, "value", tool)
    return selector_from_args(args.get("by"), str(value))


def _number(raw: Any) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if value >= 0 else None


def timeout_ms(args: dict[str, Any]) -> float | None:
    """Per-call ``timeout`` given in milliseconds, as seconds."""
    value = _number(args.get("timeout"))
    return None if value is None else value / 1000.0


def timeout_seconds(args: dict[str, Any]) -> float | None:
    return _number(args.get("timeout"))


def int_arg(args: dict[str, Any], key: str, tool: str, default: int | None = None) -> int:
    raw = args.get(key, default)
    if raw is None:
        raw = require(args, key, tool)
    try:
        return int(float(raw))
    except (TypeError, ValueError) as e:
        raise BrowserToolError(
            tool=tool,
            action="validate",
            reason=f"Invalid number for '{key}': {raw!r}",
        ) from e


def bool_arg(args: dict[str, Any], key: str, default: bool) -> bool:
    raw = args.get(key)
    if raw is None:
        return default
    if isinstance(raw, str):
        return raw.strip().lower() not in {"false", "0", "no", "off", ""}
    return bool(raw)


__all__ = ["bool_arg", "int_arg", "require", "selector_arg", "timeout_ms", "timeout_seconds"]
