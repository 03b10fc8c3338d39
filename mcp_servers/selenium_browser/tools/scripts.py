"""
JavaScript evaluation and page inspection tools.

Script results are normalized by formatting.format_result so element handles
and nested JS objects survive JSON serialization.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import BrowserToolError
from ..formatting import format_result

if TYPE_CHECKING:
    from ..session import SessionManager

XPATH_JS = """
var result = document.evaluate(arguments[0], document, null, XPathResult.ORDERED_NODE_SNAPSHOT_TYPE, null);
var nodes = [];
for (var i = 0; i < result.snapshotLength; i++) {
  var node = result.snapshotItem(i);
  nodes.push({tagName: node.tagName, text: node.textContent, id: node.id, className: node.className});
}
return nodes;
"""

DOCUMENT_METRICS_JS = """
return {
  scrollHeight: document.documentElement.scrollHeight,
  scrollWidth: document.documentElement.scrollWidth,
  clientHeight: document.documentElement.clientHeight,
  clientWidth: document.documentElement.clientWidth
};
"""

CONSOLE_HOOK_JS = """
if (!window.__consoleIntercepted) {
  window.__consoleLogs = [];
  var oldLog = console.log;
  console.log = function() {
    window.__consoleLogs.push({
      type: 'log',
      message: Array.from(arguments).join(' '),
      timestamp: new Date().toISOString()
    });
    oldLog.apply(console, arguments);
  };
  window.__consoleIntercepted = true;
}
"""

CONSOLE_DRAIN_JS = "var logs = window.__consoleLogs || []; window.__consoleLogs = []; return logs;"


def _fail(tool: str, action: str, prefix: str, exc: Exception) -> BrowserToolError:
    return BrowserToolError(tool=tool, action=action, reason=f"{prefix}: {exc}")


def execute_script(session: SessionManager, script: str, args: list[Any] | None = None) -> Any:
    driver = session.driver
    try:
        return format_result(driver.execute_script(script, *(args or [])), driver)
    except Exception as e:
        raise _fail("executeScript", "evaluate", "Script execution failed", e) from e


def execute_async_script(session: SessionManager, script: str, args: list[Any] | None = None) -> Any:
    driver = session.driver
    try:
        return format_result(driver.execute_async_script(script, *(args or [])), driver)
    except Exception as e:
        raise _fail("executeAsyncScript", "evaluate", "Async script execution failed", e) from e


def evaluate_xpath(session: SessionManager, xpath: str) -> dict[str, Any]:
    driver = session.driver
    try:
        nodes = driver.execute_script(XPATH_JS, xpath) or []
    except Exception as e:
        raise _fail("evaluateXPath", "evaluate", "XPath evaluation failed", e) from e
    return {"xpath": xpath, "count": len(nodes), "elements": list(nodes)}


def page_source(session: SessionManager) -> str:
    return session.driver.page_source()


def page_info(session: SessionManager) -> dict[str, Any]:
    driver = session.driver
    try:
        return {
            "url": driver.current_url(),
            "title": driver.title(),
            "readyState": driver.execute_script("return document.readyState"),
            "documentElement": driver.execute_script(DOCUMENT_METRICS_JS),
        }
    except Exception as e:
        raise _fail("getPageInfo", "inspect", "Failed to get page info", e) from e


def console_log(session: SessionManager) -> dict[str, Any]:
    """Drain console.log entries captured since the previous call.

    The interceptor is installed on first use, so messages logged before that
    are not available. A navigation resets it.
    """
    driver = session.driver
    try:
        driver.execute_script(CONSOLE_HOOK_JS)
        logs = driver.execute_script(CONSOLE_DRAIN_JS) or []
    except Exception as e:
        raise _fail("getConsoleLog", "read", "Failed to get console logs", e) from e
    return {"logs": list(logs), "count": len(logs)}


def scroll_to(session: SessionManager, x: int, y: int) -> str:
    driver = session.driver
    try:
        driver.scroll_to(int(x), int(y))
    except Exception as e:
        raise _fail("scrollTo", "scroll", "Failed to scroll", e) from e
    return f"Scrolled to position: {int(x)}, {int(y)}"


def scroll_by(session: SessionManager, x: int, y: int) -> str:
    driver = session.driver
    try:
        driver.execute_script("window.scrollBy(arguments[0], arguments[1]);", int(x), int(y))
    except Exception as e:
        raise _fail("scrollBy", "scroll", "Failed to scroll", e) from e
    return f"Scrolled by: {int(x)}, {int(y)}"


__all__ = [
    "console_log",
    "evaluate_xpath",
    "execute_async_script",
    "execute_script",
    "page_info",
    "page_source",
    "scroll_by",
    "scroll_to",
]
