from __future__ import annotations

from mcp_servers.selenium_browser.server.contract import tools_list
from mcp_servers.selenium_browser.server.definitions import LOCATOR_STRATEGIES, SCHEMA_DRAFT, TOOL_NAMES
from mcp_servers.selenium_browser.server.registry import canonical_name, create_default_registry

EXPECTED_TOOLS = [
    "start_browser",
    "navigate",
    "goBack",
    "goForward",
    "refresh",
    "getCurrentUrl",
    "getTitle",
    "find_element",
    "findElements",
    "waitForElement",
    "click_element",
    "doubleClick",
    "rightClick",
    "hover",
    "send_keys",
    "select",
    "get_element_text",
    "getAttribute",
    "isVisible",
    "isEnabled",
    "isSelected",
    "take_screenshot",
    "elementScreenshot",
    "fullPageScreenshot",
    "executeScript",
    "executeAsyncScript",
    "evaluateXPath",
    "getPageSource",
    "getPageInfo",
    "getCookie",
    "setCookie",
    "getLocalStorage",
    "setLocalStorage",
    "scrollTo",
    "scrollBy",
    "getConsoleLog",
    "close_session",
]


def _tool(name: str) -> dict:
    return next(t for t in tools_list() if t["name"] == name)


def test_catalog_names_and_order() -> None:
    assert TOOL_NAMES == EXPECTED_TOOLS
    assert len(set(TOOL_NAMES)) == 37


def test_every_catalog_tool_is_dispatchable() -> None:
    registry = create_default_registry()
    for name in TOOL_NAMES:
        assert registry.has(canonical_name(name)), name
    assert sorted(registry.tool_names) == sorted(canonical_name(n) for n in TOOL_NAMES)


def test_schemas_are_closed_objects() -> None:
    for tool in tools_list():
        schema = tool["inputSchema"]
        assert tool["description"]
        assert schema["$schema"] == SCHEMA_DRAFT
        assert schema["type"] == "object"
        assert schema["additionalProperties"] is False
        assert set(schema["required"]) <= set(schema["properties"]), tool["name"]


def test_locator_tools_require_by_and_value() -> None:
    click = _tool("click_element")["inputSchema"]
    assert click["required"] == ["by", "value"]
    assert click["properties"]["by"]["enum"] == LOCATOR_STRATEGIES
    assert click["properties"]["timeout"]["type"] == "number"


def test_start_browser_and_no_argument_tools() -> None:
    start = _tool("start_browser")["inputSchema"]
    assert start["required"] == ["browser"]
    assert start["properties"]["browser"]["enum"] == ["chrome", "firefox"]
    assert _tool("getTitle")["inputSchema"]["properties"] == {}
    assert _tool("close_session")["inputSchema"]["required"] == []


def test_catalog_is_stable_between_calls() -> None:
    assert tools_list() == tools_list()
