"""
Cookie and localStorage handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...tools import storage
from .common import int_arg, require

if TYPE_CHECKING:
    from ...session import SessionManager


def handle_get_cookie(session: SessionManager, args: dict[str, Any]) -> Any:
    name = args.get("name")
    return storage.get_cookie(session, str(name) if name is not None else None)


def handle_set_cookie(session: SessionManager, args: dict[str, Any]) -> str:
    name = str(require(args, "name", "setCookie"))
    value = str(require(args, "value", "setCookie"))
    days = int_arg(args, "days", "setCookie", default=storage.DEFAULT_COOKIE_DAYS)
    return storage.set_cookie(session, name, value, days)


def handle_get_local_storage(session: SessionManager, args: dict[str, Any]) -> Any:
    key = args.get("key")
    return storage.get_local_storage(session, str(key) if key is not None else None)


def handle_set_local_storage(session: SessionManager, args: dict[str, Any]) -> str:
    key = str(require(args, "key", "setLocalStorage"))
    value = str(require(args, "value", "setLocalStorage"))
    return storage.set_local_storage(session, key, value)


STORAGE_HANDLERS: dict[str, tuple] = {
    "getCookie": (handle_get_cookie, True),
    "setCookie": (handle_set_cookie, True),
    "getLocalStorage": (handle_get_local_storage, True),
    "setLocalStorage": (handle_set_local_storage, True),
}
