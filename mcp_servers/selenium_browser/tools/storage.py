"""Cookie and localStorage tools."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import BrowserToolError

if TYPE_CHECKING:
    from ..session import SessionManager

DEFAULT_COOKIE_DAYS = 7


def get_cookie(session: SessionManager, name: str | None = None) -> Any:
    """One cookie as {name, value} (value None when absent), or all as {name: value}."""
    driver = session.driver
    try:
        if name is None:
            return driver.get_cookies()
        return {"name": name, "value": driver.get_cookies(name)}
    except Exception as e:
        raise BrowserToolError(tool="getCookie", action="read", reason=f"Failed to get cookie: {e}") from e


def set_cookie(session: SessionManager, name: str, value: str, days: int = DEFAULT_COOKIE_DAYS) -> str:
    driver = session.driver
    try:
        driver.set_cookie(name, value, int(days))
    except Exception as e:
        raise BrowserToolError(
            tool="setCookie",
            action="write",
            reason=f"Failed to set cookie: {e}",
            suggestion="Cookies can only be set after navigating to the target domain",
        ) from e
    return f"Cookie set: {name}"


def get_local_storage(session: SessionManager, key: str | None = None) -> Any:
    driver = session.driver
    try:
        return driver.get_local_storage(key)
    except Exception as e:
        raise BrowserToolError(tool="getLocalStorage", action="read", reason=f"Failed to get localStorage: {e}") from e


def set_local_storage(session: SessionManager, key: str, value: str) -> str:
    driver = session.driver
    try:
        driver.set_local_storage(key, value)
    except Exception as e:
        raise BrowserToolError(tool="setLocalStorage", action="write", reason=f"Failed to set localStorage: {e}") from e
    return f"localStorage set: {key}"


__all__ = ["DEFAULT_COOKIE_DAYS", "get_cookie", "get_local_storage", "set_cookie", "set_local_storage"]
