"""
Browser automation tools organized by domain.

Each module provides focused functionality:
- base: Polling, element waits, scroll-into-view
- navigation: Page navigation and history
- elements: Lookup, interaction and element state
- screenshot: Viewport, element and full-page capture
- scripts: JavaScript evaluation, page inspection, console log, scrolling
- storage: Cookies and localStorage
"""

from .base import scroll_into_view, wait_until
from .elements import (
    click,
    double_click,
    fill,
    find_element,
    find_elements,
    get_attribute,
    get_text,
    hover,
    is_enabled,
    is_selected,
    is_visible,
    right_click,
    select,
    wait_for_element,
)
from .navigation import current_url, go_back, go_forward, navigate_to, normalize_url, page_title, refresh_page
from .screenshot import TileGrid, capture_full_page, element_screenshot, full_page_screenshot, take_screenshot
from .scripts import (
    console_log,
    evaluate_xpath,
    execute_async_script,
    execute_script,
    page_info,
    page_source,
    scroll_by,
    scroll_to,
)
from .storage import get_cookie, get_local_storage, set_cookie, set_local_storage

__all__ = [
    "TileGrid",
    "capture_full_page",
    "click",
    "console_log",
    "current_url",
    "double_click",
    "element_screenshot",
    "evaluate_xpath",
    "execute_async_script",
    "execute_script",
    "fill",
    "find_element",
    "find_elements",
    "full_page_screenshot",
    "get_attribute",
    "get_cookie",
    "get_local_storage",
    "get_text",
    "go_back",
    "go_forward",
    "hover",
    "is_enabled",
    "is_selected",
    "is_visible",
    "navigate_to",
    "normalize_url",
    "page_info",
    "page_source",
    "page_title",
    "refresh_page",
    "right_click",
    "scroll_by",
    "scroll_into_view",
    "scroll_to",
    "select",
    "set_cookie",
    "set_local_storage",
    "take_screenshot",
    "wait_for_element",
    "wait_until",
]
