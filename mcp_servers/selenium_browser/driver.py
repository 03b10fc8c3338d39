"""
Browser driver capability interface.

The session manager and tools only talk to a BrowserDriver. The default
implementation is SeleniumDriver (selenium_driver.py); tests use an in-memory
fake. Element handles are opaque: only the driver that returned them knows how
to act on them.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .config import BrowserConfig
    from .locators import Selector


@dataclass
class DriverOptions:
    """Options consumed once when the driver starts."""

    browser: str = "chrome"
    headless: bool = False
    binary_path: str | None = None
    arguments: list[str] = field(default_factory=list)
    window_size: tuple[int, int] = (1920, 1080)
    user_agent: str | None = None

    @classmethod
    def from_config(cls, config: BrowserConfig, overrides: dict[str, Any] | None = None) -> DriverOptions:
        overrides = overrides or {}
        browser = config.normalize_browser(overrides.get("browser") or config.browser)
        headless = overrides.get("headless")
        arguments = list(config.extra_flags)
        extra = overrides.get("arguments")
        if isinstance(extra, list):
            arguments.extend(str(arg) for arg in extra if str(arg).strip())
        return cls(
            browser=browser,
            headless=config.headless if headless is None else bool(headless),
            binary_path=config.binary_path,
            arguments=arguments,
            window_size=config.window_size,
            user_agent=config.user_agent,
        )


class BrowserDriver(Protocol):
    """Operations the core needs from a browser automation backend."""

    def start(self, options: DriverOptions) -> None: ...

    def quit(self) -> None: ...

    # navigation
    def navigate(self, url: str) -> None: ...

    def back(self) -> None: ...

    def forward(self) -> None: ...

    def refresh(self) -> None: ...

    def current_url(self) -> str: ...

    def title(self) -> str: ...

    def page_source(self) -> str: ...

    # lookup
    def find_elements(self, selector: Selector) -> list[Any]: ...

    def is_element(self, value: Any) -> bool: ...

    # interaction
    def click(self, element: Any) -> None: ...

    def double_click(self, element: Any) -> None: ...

    def right_click(self, element: Any) -> None: ...

    def hover(self, element: Any) -> None: ...

    def clear(self, element: Any) -> None: ...

    def send_keys(self, element: Any, text: str) -> None: ...

    def select_option(self, element: Any, option: str, by: str) -> None: ...

    # element state
    def get_attribute(self, element: Any, name: str) -> str | None: ...

    def get_text(self, element: Any) -> str: ...

    def tag_name(self, element: Any) -> str: ...

    def is_displayed(self, element: Any) -> bool: ...

    def is_enabled(self, element: Any) -> bool: ...

    def is_selected(self, element: Any) -> bool: ...

    # evaluation
    def execute_script(self, code: str, *args: Any) -> Any: ...

    def execute_async_script(self, code: str, *args: Any) -> Any: ...

    # capture
    def capture_screenshot(self, element: Any | None = None) -> bytes: ...

    def scroll_to(self, x: int, y: int) -> None: ...

    # storage
    def get_cookies(self, name: str | None = None) -> Any: ...

    def set_cookie(self, name: str, value: str, days: int) -> None: ...

    def get_local_storage(self, key: str | None = None) -> Any: ...

    def set_local_storage(self, key: str, value: str) -> None: ...


DriverFactory = Callable[[], BrowserDriver]


def default_driver_factory() -> BrowserDriver:
    from .selenium_driver import SeleniumDriver

    return SeleniumDriver()


__all__ = ["BrowserDriver", "DriverFactory", "DriverOptions", "default_driver_factory"]
