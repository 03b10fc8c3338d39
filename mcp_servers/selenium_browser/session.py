"""
Session manager for the MCP process's single browser driver.

The driver is created lazily by the first operation that needs one
(start_browser or navigate) and released by cleanup. Every tool call goes
through SessionManager.execute, which is the boundary where operation failures
become ``{"error": message}`` maps and a missing session becomes the
"No browser session active" sentinel.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import TYPE_CHECKING, Any

from .config import BrowserConfig
from .driver import DriverOptions, default_driver_factory
from .errors import NO_SESSION, BrowserToolError, ErrorPayload, NoSessionError

if TYPE_CHECKING:
    from .driver import BrowserDriver, DriverFactory
    from .server.registry import ToolRegistry

logger = logging.getLogger("mcp.selenium.session")


class SessionState(Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    CLOSED = "closed"


class SessionManager:
    """Owns the driver handle and its lifecycle state."""

    def __init__(
        self,
        config: BrowserConfig | None = None,
        driver_factory: DriverFactory | None = None,
        registry: ToolRegistry | None = None,
    ) -> None:
        self.config = config or BrowserConfig.from_env()
        self._driver_factory = driver_factory or default_driver_factory
        self._registry = registry
        self._driver: BrowserDriver | None = None
        self._state = SessionState.UNINITIALIZED
        # Re-entrant: the shutdown signal handler may run cleanup on the same thread
        # while an operation holds the lock.
        self._lock = threading.RLock()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is SessionState.ACTIVE and self._driver is not None

    @property
    def driver(self) -> BrowserDriver:
        driver = self._driver
        if driver is None or self._state is not SessionState.ACTIVE:
            raise NoSessionError()
        return driver

    @property
    def registry(self) -> ToolRegistry:
        if self._registry is None:
            from .server.registry import create_default_registry

            self._registry = create_default_registry()
        return self._registry

    def ensure_started(self, overrides: dict[str, Any] | None = None) -> bool:
        """Start the driver unless a session is already active.

        Returns True when a new driver was started.
        """
        with self._lock:
            if self.is_active:
                return False
            options = DriverOptions.from_config(self.config, overrides)
            driver = self._driver_factory()
            try:
                driver.start(options)
            except Exception as exc:
                logger.error("driver_start_failed browser=%s: %s", options.browser, exc)
                raise BrowserToolError(
                    tool="start_browser",
                    action="start",
                    reason=f"Failed to initialize WebDriver: {exc}",
                    suggestion="Check that the browser is installed (set MCP_BROWSER_BINARY if needed)",
                ) from exc
            self._driver = driver
            self._state = SessionState.ACTIVE
            logger.info("session_started browser=%s headless=%s", options.browser, options.headless)
            return True

    def cleanup(self) -> None:
        """Release the driver. Safe to call any number of times."""
        with self._lock:
            driver, self._driver = self._driver, None
            self._state = SessionState.CLOSED
            if driver is None:
                return
            try:
                driver.quit()
                logger.info("WebDriver closed successfully")
            except Exception:
                logger.exception("Error closing WebDriver")

    def execute(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        """Run a tool by canonical or external name and return its raw result."""
        from .server.registry import canonical_name

        canonical = canonical_name(name)
        args = arguments if isinstance(arguments, dict) else {}
        registry = self.registry
        if not registry.has(canonical):
            logger.info("unknown_tool name=%s", name)
            return ErrorPayload.of(f"Unknown tool: {name}")

        with self._lock:
            try:
                return registry.dispatch(canonical, self, args)
            except NoSessionError:
                return NO_SESSION
            except BrowserToolError as exc:
                logger.info("tool_error tool=%s action=%s reason=%s", exc.tool, exc.action, exc.reason)
                return exc.to_dict()
            except Exception as exc:
                logger.exception("Error executing tool: %s", canonical)
                return ErrorPayload.of(str(exc) or type(exc).__name__)


__all__ = ["SessionManager", "SessionState"]
