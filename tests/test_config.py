from __future__ import annotations

import pytest

from mcp_servers.selenium_browser.config import DEFAULT_USER_AGENT, BrowserConfig
from mcp_servers.selenium_browser.driver import DriverOptions

_ENV = (
    "SELENIUM_BROWSER",
    "SELENIUM_HEADLESS",
    "SELENIUM_TIMEOUT",
    "MCP_BROWSER_BINARY",
    "MCP_BROWSER_FLAGS",
    "SELENIUM_WINDOW_SIZE",
    "SELENIUM_USER_AGENT",
    "SELENIUM_SCROLL_SETTLE",
    "SELENIUM_NAVIGATION_SETTLE",
    "SELENIUM_TILE_SETTLE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    cfg = BrowserConfig.from_env()
    assert cfg.browser == "chrome"
    assert cfg.headless is False
    assert cfg.timeout == 10.0
    assert cfg.binary_path is None
    assert cfg.extra_flags == []
    assert cfg.window_size == (1920, 1080)
    assert cfg.user_agent == DEFAULT_USER_AGENT


def test_headless_only_for_literal_true(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SELENIUM_HEADLESS", "TRUE")
    assert BrowserConfig.from_env().headless is True
    monkeypatch.setenv("SELENIUM_HEADLESS", "1")
    assert BrowserConfig.from_env().headless is False


def test_parses_browser_flags_and_window(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SELENIUM_BROWSER", "Firefox")
    monkeypatch.setenv("MCP_BROWSER_FLAGS", "--lang=en, --mute-audio ,")
    monkeypatch.setenv("SELENIUM_WINDOW_SIZE", "1280x720")
    monkeypatch.setenv("SELENIUM_TIMEOUT", "3.5")
    cfg = BrowserConfig.from_env()
    assert cfg.browser == "firefox"
    assert cfg.extra_flags == ["--lang=en", "--mute-audio"]
    assert cfg.window_size == (1280, 720)
    assert cfg.timeout == 3.5


def test_invalid_numbers_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SELENIUM_TIMEOUT", "soon")
    monkeypatch.setenv("SELENIUM_WINDOW_SIZE", "wide")
    monkeypatch.setenv("SELENIUM_TILE_SETTLE", "-1")
    cfg = BrowserConfig.from_env()
    assert cfg.timeout == 10.0
    assert cfg.window_size == (1920, 1080)
    assert cfg.tile_settle == 0.2


def test_driver_options_overrides() -> None:
    cfg = BrowserConfig(headless=False, extra_flags=["--a"])
    opts = DriverOptions.from_config(cfg, {"browser": "firefox", "headless": True, "arguments": ["--b"]})
    assert opts.browser == "firefox"
    assert opts.headless is True
    assert opts.arguments == ["--a", "--b"]

    plain = DriverOptions.from_config(cfg)
    assert plain.browser == "chrome"
    assert plain.headless is False
    assert plain.arguments == ["--a"]
