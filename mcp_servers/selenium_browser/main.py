"""
MCP Server for browser automation via Selenium WebDriver.

This module provides the main entry point and protocol handling: newline
delimited JSON-RPC 2.0 on stdin/stdout, logs on stderr. Tool dispatch is
handled by the session manager and the registry in server/registry.py.
"""

from __future__ import annotations

import json
import logging
import os
import signal
import sys
from collections.abc import Callable
from typing import IO, Any

from .config import BrowserConfig
from .errors import INTERNAL_ERROR, METHOD_NOT_FOUND, ProtocolError
from .server.contract import (
    DEFAULT_PROTOCOL_VERSION,
    SUPPORTED_PROTOCOL_VERSIONS,
    initialize_result,
    select_protocol,
    tools_list,
)
from .server.redaction import redact_jsonrpc_for_dump, redact_jsonrpc_for_log, redact_tool_arguments
from .server.types import ToolResult
from .session import SessionManager

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
)
logger = logging.getLogger("mcp.selenium")

__all__ = [
    "DEFAULT_PROTOCOL_VERSION",
    "SUPPORTED_PROTOCOL_VERSIONS",
    "McpServer",
    "install_signal_handlers",
    "main",
]


def _dump_frame(direction: bytes, raw: bytes, payload: dict[str, Any]) -> None:
    dump_path = os.environ.get("MCP_DUMP_FRAMES")
    if not dump_path:
        return
    if dump_dir := os.path.dirname(dump_path):
        os.makedirs(dump_dir, exist_ok=True)
    with open(dump_path, "ab") as fp:
        fp.write(direction)
        if os.environ.get("MCP_DUMP_FRAMES_RAW") == "1":
            fp.write(raw.rstrip(b"\n") + b"\n")
        else:
            safe = redact_jsonrpc_for_dump(payload)
            fp.write((json.dumps(safe, ensure_ascii=False) + "\n").encode())


def _write_message(payload: dict[str, Any]) -> None:
    """Write JSON-RPC message to stdout."""
    data = json.dumps(payload, ensure_ascii=False)
    line = (data + "\n").encode()
    _dump_frame(b"--out--\n", line, payload)
    sys.stdout.buffer.write(line)
    sys.stdout.buffer.flush()


def _parse_message(line: bytes) -> dict[str, Any] | None:
    """Parse one stdin record. Blank lines and malformed records yield None."""
    line = line.strip()
    if not line:
        return None
    try:
        msg = json.loads(line.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Error parsing JSON-RPC message: %s", exc)
        return None
    if not isinstance(msg, dict):
        logger.warning("Ignoring non-object JSON-RPC message: %s", type(msg).__name__)
        return None
    if os.environ.get("MCP_TRACE"):
        logger.info("recv %s", redact_jsonrpc_for_log(msg))
    _dump_frame(b"--in--\n", line, msg)
    return msg


class McpServer:
    """MCP Server: JSON-RPC method table in front of one SessionManager."""

    def __init__(self, config: BrowserConfig | None = None, session: SessionManager | None = None) -> None:
        self.config = config or BrowserConfig.from_env()
        self.session = session
        self.initialized = False
        self.running = True
        self._closed = False
        self._methods: dict[str, Callable[[dict[str, Any]], Any]] = {
            "initialize": self.handle_initialize,
            "notifications/initialized": self.handle_initialized,
            "ping": self.handle_ping,
            "tools/list": self.handle_list_tools,
            "tools/call": self.handle_call_tool,
            "resources/list": self.handle_list_resources,
        }

    # transport -----------------------------------------------------------------

    def _send(self, payload: dict[str, Any]) -> None:
        if not self.running:
            return
        _write_message(payload)

    def _reply(self, request_id: Any, result: Any) -> None:
        self._send({"jsonrpc": "2.0", "id": request_id, "result": result})

    def _reply_error(self, request_id: Any, code: int, message: str) -> None:
        self._send({"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}})

    # methods -------------------------------------------------------------------

    def handle_initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle initialize request."""
        protocol = select_protocol(params.get("protocolVersion"))
        if self.session is None:
            self.session = SessionManager(self.config)
        self.initialized = True
        client = params.get("clientInfo") if isinstance(params.get("clientInfo"), dict) else {}
        logger.info("initialize protocol=%s client=%s", protocol, client.get("name", "unknown"))
        return initialize_result(protocol)

    def handle_initialized(self, params: dict[str, Any]) -> None:
        logger.info("Client initialized")

    def handle_ping(self, params: dict[str, Any]) -> dict[str, Any]:
        return {}

    def handle_list_tools(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle tools/list request."""
        return {"tools": tools_list()}

    def handle_list_resources(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"resources": []}

    def _log_call(self, name: str, arguments: dict[str, Any]) -> None:
        """Log tool call with sanitized arguments."""
        safe_args = redact_tool_arguments(name, arguments)
        logger.info("tool=%s args=%s", name, safe_args)

    def handle_call_tool(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle tools/call: run the operation and wrap its raw result."""
        if not self.initialized or self.session is None:
            raise ProtocolError(INTERNAL_ERROR, "Server not initialized")
        name = params.get("name")
        arguments = params.get("arguments")
        if not isinstance(arguments, dict):
            arguments = {}
        if not isinstance(name, str) or not name:
            return ToolResult.error({"error": "Missing tool name"}).to_dict()

        self._log_call(name, arguments)
        value = self.session.execute(name, arguments)
        return ToolResult.from_value(value).to_dict()

    # dispatch ------------------------------------------------------------------

    def dispatch(self, message: dict[str, Any]) -> None:
        """Dispatch incoming JSON-RPC message to appropriate handler."""
        if not message:
            return

        method = message.get("method")
        request_id = message.get("id")
        is_notification = request_id is None
        params = message.get("params")
        if not isinstance(params, dict):
            params = {}

        handler = self._methods.get(method) if isinstance(method, str) else None
        if handler is None:
            if is_notification:
                logger.info("Ignoring notification: %s", method)
                return
            text = "Method not found" if method == "prompts/list" else f"Method not found: {method}"
            self._reply_error(request_id, METHOD_NOT_FOUND, text)
            return

        try:
            result = handler(params)
        except ProtocolError as exc:
            logger.warning("protocol_error method=%s: %s", method, exc.message)
            if not is_notification:
                self._reply_error(request_id, exc.code, exc.message)
            return
        except Exception as exc:
            logger.exception("Error handling request: %s", method)
            if not is_notification:
                self._reply_error(request_id, INTERNAL_ERROR, f"Internal error: {exc}")
            return

        if not is_notification:
            self._reply(request_id, result)

    def serve(self, stream: IO[bytes] | None = None) -> None:
        """Read and handle one record at a time until EOF or shutdown."""
        stream = stream if stream is not None else sys.stdin.buffer
        logger.info("MCP Selenium server ready (stdio)")
        while self.running:
            line = stream.readline()
            if not line:
                logger.info("stdin closed")
                break
            message = _parse_message(line)
            if message is None:
                continue
            self.dispatch(message)
        self.shutdown()

    def shutdown(self) -> None:
        """Stop responding and release the browser. Idempotent."""
        self.running = False
        if self._closed:
            return
        self._closed = True
        logger.info("Shutting down MCP Selenium server")
        if self.session is not None:
            self.session.cleanup()


def install_signal_handlers(server: McpServer) -> Callable[[int, Any], None]:
    """Route SIGTERM and SIGINT to an orderly shutdown followed by exit(0)."""

    def _on_signal(signum: int, frame: Any) -> None:
        logger.info("Received signal %s", signum)
        server.shutdown()
        sys.exit(0)

    signal.signal(signal.SIGTERM, _on_signal)
    signal.signal(signal.SIGINT, _on_signal)
    return _on_signal


def main() -> None:
    """Main entry point for MCP server."""
    server = McpServer()
    install_signal_handlers(server)

    try:
        server.serve()
    finally:
        server.shutdown()


if __name__ == "__main__":
    main()
