"""Tool schema definitions.

TOOL_DEFINITIONS is built once at import time; tools/list serves it unchanged,
so the catalog content and order are stable for the life of the process.
"""

from __future__ import annotations

from typing import Any

SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"

LOCATOR_STRATEGIES = ["id", "css", "xpath", "name", "tag", "class", "link", "partialLink"]

_MS_TIMEOUT = {"type": "number", "description": "Maximum time to wait for element in milliseconds"}


def _locator(purpose: str = "Locator strategy to find element") -> dict[str, Any]:
    return {
        "by": {"type": "string", "description": purpose, "enum": list(LOCATOR_STRATEGIES)},
        "value": {"type": "string", "description": "Value for the locator strategy"},
    }


def _tool(
    name: str,
    description: str,
    properties: dict[str, Any] | None = None,
    required: list[str] | None = None,
) -> dict[str, Any]:
    return {
        "name": name,
        "description": description,
        "inputSchema": {
            "$schema": SCHEMA_DRAFT,
            "type": "object",
            "properties": properties or {},
            "required": list(required or []),
            "additionalProperties": False,
        },
    }


TOOL_DEFINITIONS: list[dict[str, Any]] = [
    # Browser control
    _tool(
        "start_browser",
        "launches browser",
        {
            "browser": {
                "type": "string",
                "description": "Browser to launch (chrome or firefox)",
                "enum": ["chrome", "firefox"],
            },
            "options": {
                "type": "object",
                "description": "Browser options: headless (boolean), arguments (list of command-line flags)",
            },
        },
        ["browser"],
    ),
    # Navigation
    _tool("navigate", "navigates to a URL", {"url": {"type": "string", "description": "URL to navigate to"}}, ["url"]),
    _tool("goBack", "navigate back in browser history"),
    _tool("goForward", "navigate forward in browser history"),
    _tool("refresh", "refresh the current page"),
    _tool("getCurrentUrl", "get the current URL"),
    _tool("getTitle", "get the page title"),
    # Element finding
    _tool("find_element", "finds an element", {**_locator(), "timeout": dict(_MS_TIMEOUT)}, ["by", "value"]),
    _tool(
        "findElements",
        "find all elements matching selector",
        _locator("Locator strategy to find elements"),
        ["by", "value"],
    ),
    _tool(
        "waitForElement",
        "wait for element to appear",
        {**_locator(), "timeout": {"type": "number", "description": "Timeout in seconds (default: 10)"}},
        ["by", "value"],
    ),
    # Element interaction
    _tool("click_element", "clicks an element", {**_locator(), "timeout": dict(_MS_TIMEOUT)}, ["by", "value"]),
    _tool("doubleClick", "double-click on an element", _locator(), ["by", "value"]),
    _tool("rightClick", "right-click on an element", _locator(), ["by", "value"]),
    _tool("hover", "hover over an element", _locator(), ["by", "value"]),
    # Forms
    _tool(
        "send_keys",
        "sends keys to an element, aka typing",
        {
            **_locator(),
            "text": {"type": "string", "description": "Text to enter into the element"},
            "clear": {"type": "boolean", "description": "Clear field before typing (default: true)"},
            "timeout": dict(_MS_TIMEOUT),
        },
        ["by", "value", "text"],
    ),
    _tool(
        "select",
        "select an option from a dropdown",
        {
            **_locator("Locator strategy for select element"),
            "option": {"type": "string", "description": "Option to select"},
            "selectBy": {
                "type": "string",
                "description": "How to select (value, text, or index) (default: text)",
                "enum": ["value", "text", "index"],
            },
        },
        ["by", "value", "option"],
    ),
    # Element state
    _tool(
        "get_element_text",
        "gets the text() of an element",
        {**_locator(), "timeout": dict(_MS_TIMEOUT)},
        ["by", "value"],
    ),
    _tool(
        "getAttribute",
        "get attribute value from an element",
        {**_locator(), "attribute": {"type": "string", "description": "Attribute name"}},
        ["by", "value", "attribute"],
    ),
    _tool("isVisible", "check if element is visible", _locator(), ["by", "value"]),
    _tool("isEnabled", "check if element is enabled", _locator(), ["by", "value"]),
    _tool("isSelected", "check if element is selected", _locator(), ["by", "value"]),
    # Screenshots
    _tool(
        "take_screenshot",
        "captures a screenshot of the current page",
        {
            "outputPath": {
                "type": "string",
                "description": "Optional path where to save the screenshot. If not provided, returns base64 data.",
            }
        },
    ),
    _tool("elementScreenshot", "take a screenshot of a specific element", _locator(), ["by", "value"]),
    _tool("fullPageScreenshot", "take a full page screenshot"),
    # Scripts
    _tool(
        "executeScript",
        "execute JavaScript in the browser",
        {
            "script": {"type": "string", "description": "JavaScript code to execute"},
            "args": {"type": "array", "description": "Arguments exposed to the script as arguments[i]"},
        },
        ["script"],
    ),
    _tool(
        "executeAsyncScript",
        "execute async JavaScript in the browser",
        {
            "script": {"type": "string", "description": "JavaScript code to execute"},
            "args": {"type": "array", "description": "Arguments exposed to the script as arguments[i]"},
        },
        ["script"],
    ),
    _tool("evaluateXPath", "evaluate XPath expression", {"xpath": {"type": "string", "description": "XPath expression"}}, ["xpath"]),
    # Page info
    _tool("getPageSource", "get the page HTML source"),
    _tool("getPageInfo", "get page information"),
    # Cookies
    _tool(
        "getCookie",
        "get cookie value",
        {"name": {"type": "string", "description": "Cookie name (optional, returns all if not specified)"}},
    ),
    _tool(
        "setCookie",
        "set a cookie",
        {
            "name": {"type": "string", "description": "Cookie name"},
            "value": {"type": "string", "description": "Cookie value"},
            "days": {"type": "number", "description": "Days until expiration (default: 7)"},
        },
        ["name", "value"],
    ),
    # Local storage
    _tool(
        "getLocalStorage",
        "get localStorage value",
        {"key": {"type": "string", "description": "Storage key (optional, returns all if not specified)"}},
    ),
    _tool(
        "setLocalStorage",
        "set localStorage value",
        {
            "key": {"type": "string", "description": "Storage key"},
            "value": {"type": "string", "description": "Storage value"},
        },
        ["key", "value"],
    ),
    # Scrolling
    _tool(
        "scrollTo",
        "scroll to specific position",
        {"x": {"type": "number", "description": "X coordinate"}, "y": {"type": "number", "description": "Y coordinate"}},
        ["x", "y"],
    ),
    _tool(
        "scrollBy",
        "scroll by relative amount",
        {"x": {"type": "number", "description": "X offset"}, "y": {"type": "number", "description": "Y offset"}},
        ["x", "y"],
    ),
    # Console
    _tool("getConsoleLog", "get browser console logs"),
    # Session
    _tool("close_session", "closes the current browser session"),
]

TOOL_NAMES: list[str] = [t["name"] for t in TOOL_DEFINITIONS]

__all__ = ["LOCATOR_STRATEGIES", "SCHEMA_DRAFT", "TOOL_DEFINITIONS", "TOOL_NAMES"]
