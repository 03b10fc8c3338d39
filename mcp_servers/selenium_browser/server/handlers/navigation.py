"""
Navigation tool handlers - page navigation and history.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...tools import navigation
from .common import require

if TYPE_CHECKING:
    from ...session import SessionManager


def handle_navigate(session: SessionManager, args: dict[str, Any]) -> str:
    url = str(require(args, "url", "navigate"))
    session.ensure_started()
    return navigation.navigate_to(session, url)


def handle_go_back(session: SessionManager, args: dict[str, Any]) -> str:
    return navigation.go_back(session)


def handle_go_forward(session: SessionManager, args: dict[str, Any]) -> str:
    return navigation.go_forward(session)


def handle_refresh(session: SessionManager, args: dict[str, Any]) -> str:
    return navigation.refresh_page(session)


def handle_current_url(session: SessionManager, args: dict[str, Any]) -> str:
    return navigation.current_url(session)


def handle_title(session: SessionManager, args: dict[str, Any]) -> str:
    return navigation.page_title(session)


NAVIGATION_HANDLERS: dict[str, tuple] = {
    "navigate": (handle_navigate, False),
    "goBack": (handle_go_back, True),
    "goForward": (handle_go_forward, True),
    "refresh": (handle_refresh, True),
    "getCurrentUrl": (handle_current_url, True),
    "getTitle": (handle_title, True),
}
