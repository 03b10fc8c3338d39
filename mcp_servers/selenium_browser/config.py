from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

SUPPORTED_BROWSERS = ("chrome", "firefox")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def expand_path(raw: str) -> str:
    return str(Path(raw).expanduser())


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def _parse_window_size(raw: str | None) -> tuple[int, int]:
    default = (1920, 1080)
    text = (raw or "").strip().lower()
    if not text:
        return default
    width, sep, height = text.partition("x")
    if not sep:
        width, sep, height = text.partition(",")
    try:
        w, h = int(width), int(height)
    except ValueError:
        return default
    if w <= 0 or h <= 0:
        return default
    return w, h


@dataclass
class BrowserConfig:
    browser: str = "chrome"
    headless: bool = False
    timeout: float = 10.0
    binary_path: str | None = None
    extra_flags: list[str] = field(default_factory=list)
    window_size: tuple[int, int] = (1920, 1080)
    user_agent: str = DEFAULT_USER_AGENT
    scroll_settle: float = 0.5
    navigation_settle: float = 1.0
    tile_settle: float = 0.2

    @staticmethod
    def normalize_browser(raw: str | None) -> str:
        name = (raw or "").strip().lower()
        if name in {"firefox", "ff", "gecko"}:
            return "firefox"
        if name in {"chrome", "chromium", "google-chrome", ""}:
            return "chrome"
        return "chrome"

    @classmethod
    def from_env(cls) -> BrowserConfig:
        binary = os.environ.get("MCP_BROWSER_BINARY")
        flags_raw = os.environ.get("MCP_BROWSER_FLAGS", "")
        extra_flags = [flag.strip() for flag in flags_raw.split(",") if flag.strip()]
        timeout = _env_float("SELENIUM_TIMEOUT", 10.0)
        return cls(
            browser=cls.normalize_browser(os.environ.get("SELENIUM_BROWSER")),
            headless=os.environ.get("SELENIUM_HEADLESS", "").strip().lower() == "true",
            timeout=timeout if timeout > 0 else 10.0,
            binary_path=expand_path(binary) if binary else None,
            extra_flags=extra_flags,
            window_size=_parse_window_size(os.environ.get("SELENIUM_WINDOW_SIZE")),
            user_agent=os.environ.get("SELENIUM_USER_AGENT") or DEFAULT_USER_AGENT,
            scroll_settle=_env_float("SELENIUM_SCROLL_SETTLE", 0.5),
            navigation_settle=_env_float("SELENIUM_NAVIGATION_SETTLE", 1.0),
            tile_settle=_env_float("SELENIUM_TILE_SETTLE", 0.2),
        )
