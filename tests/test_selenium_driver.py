from __future__ import annotations

from typing import Any

import pytest

from mcp_servers.selenium_browser.driver import DriverOptions
from mcp_servers.selenium_browser.errors import NoSessionError
from mcp_servers.selenium_browser.locators import Selector
from mcp_servers.selenium_browser.selenium_driver import SeleniumDriver


class DummyWebDriver:
    def __init__(self) -> None:
        self.cookies: list[dict[str, Any]] = []
        self.calls: list[tuple] = []
        self.quit_called = False

    def get_cookie(self, name: str) -> dict[str, Any] | None:
        return next((c for c in self.cookies if c["name"] == name), None)

    def get_cookies(self) -> list[dict[str, Any]]:
        return list(self.cookies)

    def add_cookie(self, cookie: dict[str, Any]) -> None:
        self.cookies.append(cookie)

    def find_elements(self, by: str, value: str) -> list[Any]:
        self.calls.append(("find_elements", by, value))
        return []

    def execute_script(self, code: str, *args: Any) -> Any:
        self.calls.append(("execute_script", code, args))
        return None

    def quit(self) -> None:
        self.quit_called = True


@pytest.fixture
def wrapped() -> tuple[SeleniumDriver, DummyWebDriver]:
    driver = SeleniumDriver()
    inner = DummyWebDriver()
    driver._driver = inner
    return driver, inner


def test_chrome_options_carry_headless_flags_and_binary() -> None:
    opts = SeleniumDriver._chrome_options(
        DriverOptions(headless=True, arguments=["--lang=en"], binary_path="/opt/chrome", user_agent="UA/1")
    )
    assert "--headless=new" in opts.arguments
    assert "--no-sandbox" in opts.arguments
    assert "--user-agent=UA/1" in opts.arguments
    assert opts.arguments[-1] == "--lang=en"
    assert opts.binary_location == "/opt/chrome"


def test_firefox_options_headless() -> None:
    opts = SeleniumDriver._firefox_options(DriverOptions(browser="firefox", headless=True))
    assert "-headless" in opts.arguments


def test_operations_without_driver_raise_no_session() -> None:
    with pytest.raises(NoSessionError):
        SeleniumDriver().current_url()


def test_find_elements_maps_strategy(wrapped: tuple[SeleniumDriver, DummyWebDriver]) -> None:
    driver, inner = wrapped
    driver.find_elements(Selector("partialLink", "More"))
    driver.find_elements(Selector("class", "btn"))
    assert inner.calls == [
        ("find_elements", "partial link text", "More"),
        ("find_elements", "class name", "btn"),
    ]


def test_cookie_round_trip_uses_native_api(wrapped: tuple[SeleniumDriver, DummyWebDriver]) -> None:
    driver, inner = wrapped
    driver.set_cookie("sid", "abc", 7)

    assert inner.cookies[0]["path"] == "/"
    assert inner.cookies[0]["expiry"] > 0
    assert driver.get_cookies("sid") == "abc"
    assert driver.get_cookies("missing") is None
    assert driver.get_cookies() == {"sid": "abc"}


def test_quit_releases_driver(wrapped: tuple[SeleniumDriver, DummyWebDriver]) -> None:
    driver, inner = wrapped
    driver.quit()
    driver.quit()
    assert inner.quit_called is True
    with pytest.raises(NoSessionError):
        driver.title()
