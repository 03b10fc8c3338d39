"""
Script, page inspection and scrolling handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...tools import scripts
from .common import int_arg, require

if TYPE_CHECKING:
    from ...session import SessionManager


def _script_args(args: dict[str, Any]) -> list[Any]:
    raw = args.get("args")
    return list(raw) if isinstance(raw, list) else []


def handle_execute_script(session: SessionManager, args: dict[str, Any]) -> Any:
    code = str(require(args, "script", "executeScript"))
    return scripts.execute_script(session, code, _script_args(args))


def handle_execute_async_script(session: SessionManager, args: dict[str, Any]) -> Any:
    code = str(require(args, "script", "executeAsyncScript"))
    return scripts.execute_async_script(session, code, _script_args(args))


def handle_evaluate_xpath(session: SessionManager, args: dict[str, Any]) -> dict[str, Any]:
    return scripts.evaluate_xpath(session, str(require(args, "xpath", "evaluateXPath")))


def handle_page_source(session: SessionManager, args: dict[str, Any]) -> str:
    return scripts.page_source(session)


def handle_page_info(session: SessionManager, args: dict[str, Any]) -> dict[str, Any]:
    return scripts.page_info(session)


def handle_console_log(session: SessionManager, args: dict[str, Any]) -> dict[str, Any]:
    return scripts.console_log(session)


def handle_scroll_to(session: SessionManager, args: dict[str, Any]) -> str:
    return scripts.scroll_to(session, int_arg(args, "x", "scrollTo"), int_arg(args, "y", "scrollTo"))


def handle_scroll_by(session: SessionManager, args: dict[str, Any]) -> str:
    return scripts.scroll_by(session, int_arg(args, "x", "scrollBy"), int_arg(args, "y", "scrollBy"))


SCRIPT_HANDLERS: dict[str, tuple] = {
    "executeScript": (handle_execute_script, True),
    "executeAsyncScript": (handle_execute_async_script, True),
    "evaluateXPath": (handle_evaluate_xpath, True),
    "getPageSource": (handle_page_source, True),
    "getPageInfo": (handle_page_info, True),
    "getConsoleLog": (handle_console_log, True),
    "scrollTo": (handle_scroll_to, True),
    "scrollBy": (handle_scroll_by, True),
}
