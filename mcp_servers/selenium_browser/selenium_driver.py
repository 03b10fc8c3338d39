"""
BrowserDriver backed by Selenium WebDriver.

Driver binaries are resolved by Selenium Manager, so no chromedriver or
geckodriver path needs to be configured.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import Select

from .errors import NoSessionError

if TYPE_CHECKING:
    from .driver import DriverOptions
    from .locators import Selector

logger = logging.getLogger("mcp.selenium.driver")

_BY: dict[str, str] = {
    "css": By.CSS_SELECTOR,
    "xpath": By.XPATH,
    "id": By.ID,
    "name": By.NAME,
    "class": By.CLASS_NAME,
    "tag": By.TAG_NAME,
    "link": By.LINK_TEXT,
    "partialLink": By.PARTIAL_LINK_TEXT,
}

_CHROME_FLAGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-blink-features=AutomationControlled",
]

_LOCAL_STORAGE_ALL_JS = """
var items = {};
for (var i = 0; i < localStorage.length; i++) {
  var key = localStorage.key(i);
  items[key] = localStorage.getItem(key);
}
return items;
"""


class SeleniumDriver:
    def __init__(self) -> None:
        self._driver: webdriver.Remote | None = None

    @property
    def webdriver(self) -> webdriver.Remote:
        if self._driver is None:
            raise NoSessionError()
        return self._driver

    # lifecycle -----------------------------------------------------------------

    def start(self, options: DriverOptions) -> None:
        if self._driver is not None:
            return
        if options.browser == "firefox":
            self._driver = webdriver.Firefox(options=self._firefox_options(options))
        else:
            self._driver = webdriver.Chrome(options=self._chrome_options(options))
        width, height = options.window_size
        try:
            self._driver.set_window_size(width, height)
        except Exception as exc:  # noqa: BLE001
            logger.debug("set_window_size failed: %s", exc)
        logger.info("WebDriver initialized browser=%s headless=%s", options.browser, options.headless)

    def quit(self) -> None:
        driver, self._driver = self._driver, None
        if driver is not None:
            driver.quit()

    @staticmethod
    def _chrome_options(options: DriverOptions) -> ChromeOptions:
        opts = ChromeOptions()
        for flag in _CHROME_FLAGS:
            opts.add_argument(flag)
        if options.user_agent:
            opts.add_argument(f"--user-agent={options.user_agent}")
        if options.headless:
            opts.add_argument("--headless=new")
        for flag in options.arguments:
            opts.add_argument(flag)
        if options.binary_path:
            opts.binary_location = options.binary_path
        return opts

    @staticmethod
    def _firefox_options(options: DriverOptions) -> FirefoxOptions:
        opts = FirefoxOptions()
        if options.user_agent:
            opts.set_preference("general.useragent.override", options.user_agent)
        if options.headless:
            opts.add_argument("-headless")
        for flag in options.arguments:
            opts.add_argument(flag)
        if options.binary_path:
            opts.binary_location = options.binary_path
        return opts

    # navigation ----------------------------------------------------------------

    def navigate(self, url: str) -> None:
        self.webdriver.get(url)

    def back(self) -> None:
        self.webdriver.back()

    def forward(self) -> None:
        self.webdriver.forward()

    def refresh(self) -> None:
        self.webdriver.refresh()

    def current_url(self) -> str:
        return self.webdriver.current_url

    def title(self) -> str:
        return self.webdriver.title

    def page_source(self) -> str:
        return self.webdriver.page_source

    # lookup --------------------------------------------------------------------

    def find_elements(self, selector: Selector) -> list[WebElement]:
        return self.webdriver.find_elements(_BY[selector.strategy], selector.value)

    def is_element(self, value: Any) -> bool:
        return isinstance(value, WebElement)

    # interaction ---------------------------------------------------------------

    def click(self, element: WebElement) -> None:
        element.click()

    def double_click(self, element: WebElement) -> None:
        ActionChains(self.webdriver).double_click(element).perform()

    def right_click(self, element: WebElement) -> None:
        ActionChains(self.webdriver).context_click(element).perform()

    def hover(self, element: WebElement) -> None:
        ActionChains(self.webdriver).move_to_element(element).perform()

    def clear(self, element: WebElement) -> None:
        element.clear()

    def send_keys(self, element: WebElement, text: str) -> None:
        element.send_keys(text)

    def select_option(self, element: WebElement, option: str, by: str) -> None:
        select = Select(element)
        mode = (by or "text").strip().lower()
        if mode == "value":
            select.select_by_value(option)
        elif mode == "index":
            select.select_by_index(int(option))
        else:
            select.select_by_visible_text(option)

    # element state -------------------------------------------------------------

    def get_attribute(self, element: WebElement, name: str) -> str | None:
        return element.get_attribute(name)

    def get_text(self, element: WebElement) -> str:
        return element.text

    def tag_name(self, element: WebElement) -> str:
        return element.tag_name

    def is_displayed(self, element: WebElement) -> bool:
        return element.is_displayed()

    def is_enabled(self, element: WebElement) -> bool:
        return element.is_enabled()

    def is_selected(self, element: WebElement) -> bool:
        return element.is_selected()

    # evaluation ----------------------------------------------------------------

    def execute_script(self, code: str, *args: Any) -> Any:
        return self.webdriver.execute_script(code, *args)

    def execute_async_script(self, code: str, *args: Any) -> Any:
        return self.webdriver.execute_async_script(code, *args)

    # capture -------------------------------------------------------------------

    def capture_screenshot(self, element: WebElement | None = None) -> bytes:
        if element is not None:
            return element.screenshot_as_png
        return self.webdriver.get_screenshot_as_png()

    def scroll_to(self, x: int, y: int) -> None:
        self.webdriver.execute_script("window.scrollTo(arguments[0], arguments[1]);", int(x), int(y))

    # storage -------------------------------------------------------------------

    def get_cookies(self, name: str | None = None) -> Any:
        if name is not None:
            cookie = self.webdriver.get_cookie(name)
            return cookie.get("value") if cookie else None
        return {c["name"]: c.get("value") for c in self.webdriver.get_cookies()}

    def set_cookie(self, name: str, value: str, days: int) -> None:
        expiry = int(time.time() + int(days) * 24 * 60 * 60)
        self.webdriver.add_cookie({"name": name, "value": value, "path": "/", "expiry": expiry})

    def get_local_storage(self, key: str | None = None) -> Any:
        if key is None:
            return self.webdriver.execute_script(_LOCAL_STORAGE_ALL_JS)
        return self.webdriver.execute_script("return localStorage.getItem(arguments[0]);", key)

    def set_local_storage(self, key: str, value: str) -> None:
        self.webdriver.execute_script("localStorage.setItem(arguments[0], arguments[1]);", key, value)


__all__ = ["SeleniumDriver"]
