"""
Shared fixtures: an in-memory BrowserDriver and a fast SessionManager.

FakeDriver implements the driver protocol against a list of FakeElement
objects. Viewport screenshots are real PNGs rendered with Pillow, filled with a
colour derived from the scroll position so stitched output can be checked
pixel by pixel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import BytesIO
from typing import Any

import pytest
from PIL import Image

from mcp_servers.selenium_browser.config import BrowserConfig
from mcp_servers.selenium_browser.session import SessionManager
from mcp_servers.selenium_browser.tools.screenshot import PAGE_METRICS_JS


def tile_color(x: int, y: int) -> tuple[int, int, int]:
    return ((x // 10) % 256, (y // 10) % 256, 200)


def png_bytes(size: tuple[int, int], color: tuple[int, int, int]) -> bytes:
    out = BytesIO()
    Image.new("RGB", size, color).save(out, format="PNG")
    return out.getvalue()


@dataclass(eq=False)
class FakeElement:
    tag: str
    text: str = ""
    attrs: dict[str, str] = field(default_factory=dict)
    displayed: bool = True
    enabled: bool = True
    selected: bool = False
    css: tuple[str, ...] = ()
    xpaths: tuple[str, ...] = ()
    options: list[dict[str, str]] = field(default_factory=list)
    typed: list[str] = field(default_factory=list)
    events: list[str] = field(default_factory=list)

    def matches(self, strategy: str, value: str) -> bool:
        if strategy == "id":
            return self.attrs.get("id") == value
        if strategy == "name":
            return self.attrs.get("name") == value
        if strategy == "class":
            return value in self.attrs.get("class", "").split()
        if strategy == "tag":
            return self.tag == value
        if strategy == "link":
            return self.tag == "a" and self.text == value
        if strategy == "partialLink":
            return self.tag == "a" and value in self.text
        if strategy == "xpath":
            return value in self.xpaths
        ident = self.attrs.get("id")
        classes = self.attrs.get("class", "").split()
        return (
            value == self.tag
            or (ident is not None and value == f"#{ident}")
            or any(value == f".{c}" for c in classes)
            or value in self.css
        )


class FakeDriver:
    def __init__(self) -> None:
        self.started_with: Any = None
        self.start_calls = 0
        self.quit_calls = 0
        self.start_error: Exception | None = None
        self.quit_error: Exception | None = None
        self.url = "about:blank"
        self.page_title = ""
        self.history: list[str] = []
        self.history_pos = -1
        self.titles: dict[str, str] = {}
        self.ready_state = "complete"
        self.source = "<html></html>"
        self.elements: list[FakeElement] = []
        # page / viewport geometry for screenshots
        self.page_size = (100, 100)
        self.viewport = (100, 100)
        self.device_pixel_ratio = 1
        self.scroll = (0, 0)
        self.scroll_log: list[tuple[int, int]] = []
        self.in_viewport = True
        self.scripts: list[str] = []
        self.script_results: dict[str, Any] = {}
        self.script_error: Exception | None = None
        self.hover_error: Exception | None = None
        self.console: list[dict[str, Any]] = []
        self.console_hooked = False
        self.cookies: dict[str, str] = {}
        self.cookie_days: dict[str, int] = {}
        self.storage: dict[str, str] = {}
        self.xpath_nodes: list[dict[str, Any]] = []

    # lifecycle
    def start(self, options: Any) -> None:
        self.start_calls += 1
        if self.start_error is not None:
            raise self.start_error
        self.started_with = options

    def quit(self) -> None:
        self.quit_calls += 1
        if self.quit_error is not None:
            raise self.quit_error

    # navigation
    def navigate(self, url: str) -> None:
        self.history = self.history[: self.history_pos + 1] + [url]
        self.history_pos = len(self.history) - 1
        self.url = url
        self.page_title = self.titles.get(url, "Example Domain")

    def back(self) -> None:
        if self.history_pos > 0:
            self.history_pos -= 1
            self.url = self.history[self.history_pos]

    def forward(self) -> None:
        if self.history_pos < len(self.history) - 1:
            self.history_pos += 1
            self.url = self.history[self.history_pos]

    def refresh(self) -> None:
        self.scripts.append("<refresh>")

    def current_url(self) -> str:
        return self.url

    def title(self) -> str:
        return self.page_title

    def page_source(self) -> str:
        return self.source

    # lookup
    def add(self, element: FakeElement) -> FakeElement:
        self.elements.append(element)
        return element

    def find_elements(self, selector: Any) -> list[FakeElement]:
        return [el for el in self.elements if el.matches(selector.strategy, selector.value)]

    def is_element(self, value: Any) -> bool:
        return isinstance(value, FakeElement)

    # interaction
    def click(self, element: FakeElement) -> None:
        element.events.append("click")

    def double_click(self, element: FakeElement) -> None:
        element.events.append("dblclick")

    def right_click(self, element: FakeElement) -> None:
        element.events.append("contextmenu")

    def hover(self, element: FakeElement) -> None:
        if self.hover_error is not None:
            raise self.hover_error
        element.events.append("hover")

    def clear(self, element: FakeElement) -> None:
        element.events.append("clear")
        element.attrs["value"] = ""

    def send_keys(self, element: FakeElement, text: str) -> None:
        element.typed.append(text)
        element.attrs["value"] = element.attrs.get("value", "") + text

    def select_option(self, element: FakeElement, option: str, by: str) -> None:
        for i, opt in enumerate(element.options):
            if (by == "value" and opt["value"] == option) or (by == "index" and str(i) == option) or (
                by == "text" and opt["text"] == option
            ):
                element.attrs["value"] = opt["value"]
                return
        raise LookupError(f"Cannot locate option: {option}")

    # element state
    def get_attribute(self, element: FakeElement, name: str) -> str | None:
        return element.attrs.get(name)

    def get_text(self, element: FakeElement) -> str:
        return element.text

    def tag_name(self, element: FakeElement) -> str:
        return element.tag

    def is_displayed(self, element: FakeElement) -> bool:
        return element.displayed

    def is_enabled(self, element: FakeElement) -> bool:
        return element.enabled

    def is_selected(self, element: FakeElement) -> bool:
        return element.selected

    # evaluation
    def execute_script(self, code: str, *args: Any) -> Any:
        self.scripts.append(code)
        if self.script_error is not None:
            raise self.script_error
        if code in self.script_results:
            result = self.script_results[code]
            return result(*args) if callable(result) else result
        if code == PAGE_METRICS_JS:
            return [self.page_size[0], self.page_size[1], self.viewport[0], self.viewport[1]]
        if code.strip() == "return document.readyState":
            return self.ready_state
        if "scrollIntoView" in code:
            return None
        if "getBoundingClientRect" in code:
            return self.in_viewport
        if "window.scrollBy" in code:
            self.scroll = (self.scroll[0] + int(args[0]), self.scroll[1] + int(args[1]))
            return None
        if "mouseover" in code:
            args[0].events.append("mouseover")
            return None
        if "__consoleIntercepted" in code:
            self.console_hooked = True
            return None
        if "__consoleLogs" in code:
            logs, self.console = self.console, []
            return logs
        if "document.evaluate" in code:
            return list(self.xpath_nodes)
        if "document.documentElement.scrollHeight" in code:
            return {
                "scrollHeight": self.page_size[1],
                "scrollWidth": self.page_size[0],
                "clientHeight": self.viewport[1],
                "clientWidth": self.viewport[0],
            }
        return None

    def execute_async_script(self, code: str, *args: Any) -> Any:
        return self.execute_script(code, *args)

    # capture
    def capture_screenshot(self, element: FakeElement | None = None) -> bytes:
        if element is not None:
            return png_bytes((8, 4), (255, 0, 0))
        w, h = self.viewport
        ratio = self.device_pixel_ratio
        return png_bytes((w * ratio, h * ratio), tile_color(*self.scroll))

    def scroll_to(self, x: int, y: int) -> None:
        self.scroll = (int(x), int(y))
        self.scroll_log.append(self.scroll)

    # storage
    def get_cookies(self, name: str | None = None) -> Any:
        if name is not None:
            return self.cookies.get(name)
        return dict(self.cookies)

    def set_cookie(self, name: str, value: str, days: int) -> None:
        self.cookies[name] = value
        self.cookie_days[name] = days

    def get_local_storage(self, key: str | None = None) -> Any:
        if key is None:
            return dict(self.storage)
        return self.storage.get(key)

    def set_local_storage(self, key: str, value: str) -> None:
        self.storage[key] = value


@pytest.fixture
def fast_config() -> BrowserConfig:
    return BrowserConfig(
        browser="chrome",
        headless=True,
        timeout=0.05,
        scroll_settle=0,
        navigation_settle=0,
        tile_settle=0,
    )


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def session(fast_config: BrowserConfig, driver: FakeDriver) -> SessionManager:
    return SessionManager(config=fast_config, driver_factory=lambda: driver)


@pytest.fixture
def active_session(session: SessionManager) -> SessionManager:
    session.ensure_started()
    return session
