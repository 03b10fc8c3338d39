"""Scrubbing of tool arguments and JSON-RPC frames before they are logged or dumped.

Removes obvious secrets (typed text, cookie and storage values, credential-like
keys) and large payloads (screenshots) from what goes to stderr or a dump file.
Tool responses themselves are never redacted.
"""

from __future__ import annotations

import json
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_SENSITIVE_SUBSTRINGS = (
    "token",
    "secret",
    "password",
    "passwd",
    "pwd",
    "authorization",
    "cookie",
    "session",
    "jwt",
    "bearer",
    "api-key",
    "api_key",
    "apikey",
)

# Avoid false-positives like "author" while still protecting "auth".
_SENSITIVE_EXACT = {"auth", "pass"}

# tool -> argument keys whose values are always redacted
_TOOL_SECRET_ARGS: dict[str, set[str]] = {
    "send_keys": {"text"},
    "fill": {"text"},
    "setCookie": {"value"},
    "setLocalStorage": {"value"},
}


def is_sensitive_key(key: str) -> bool:
    k = (key or "").strip().lower()
    if not k:
        return False
    if k in _SENSITIVE_EXACT:
        return True
    return any(s in k for s in _SENSITIVE_SUBSTRINGS)


def redact_url(url: str) -> str:
    """Redact credential-like query params and userinfo; other URLs pass unchanged."""
    if not isinstance(url, str) or not url:
        return url
    try:
        parts = urlsplit(url)
    except ValueError:
        return url

    changed = False
    netloc = parts.netloc
    query = parts.query
    if "@" in netloc:
        netloc = netloc.split("@", 1)[1]
        changed = True
    if query:
        pairs = parse_qsl(query, keep_blank_values=True)
        out = [(k, "<redacted>" if is_sensitive_key(k) and v else v) for k, v in pairs]
        if out != pairs:
            query = urlencode(out, doseq=True)
            changed = True
    if not changed:
        return url
    return urlunsplit((parts.scheme, netloc, parts.path, query, parts.fragment))


def _redacted_summary(value: Any) -> str:
    if value is None:
        return "<redacted>"
    if isinstance(value, str):
        return f"<redacted str len={len(value)}>"
    if isinstance(value, (list, tuple)):
        return f"<redacted list len={len(value)}>"
    if isinstance(value, dict):
        return f"<redacted dict keys={len(value)}>"
    return "<redacted>"


def redact_tool_arguments(tool: str, args: dict[str, Any]) -> dict[str, Any]:
    """Redact tool arguments for safe logging."""
    secret_keys = _TOOL_SECRET_ARGS.get(tool, set())
    out: dict[str, Any] = {}
    for k, v in (args or {}).items():
        key = str(k)
        if key in secret_keys or is_sensitive_key(key):
            out[k] = _redacted_summary(v)
        elif key == "url" and isinstance(v, str):
            out[k] = redact_url(v)
        else:
            out[k] = v
    return out


def _dump_max_chars() -> int:
    raw = os.environ.get("MCP_DUMP_FRAMES_MAX_CHARS", "5000").strip()
    try:
        return max(0, int(raw))
    except ValueError:
        return 5000


def _redact_content_block(block: Any, max_text_chars: int) -> Any:
    if not isinstance(block, dict):
        return block
    kind = block.get("type")
    data = block.get("data")
    text = block.get("text")
    if kind == "image" and isinstance(data, str):
        return {**block, "data": f"<omitted image base64 len={len(data)}>"}
    if kind == "text" and isinstance(text, str):
        safe = redact_text_content(text)
        if max_text_chars and len(safe) > max_text_chars:
            safe = safe[:max_text_chars] + f"... <truncated len={len(safe)}>"
        return {**block, "text": safe}
    return block


def redact_jsonrpc_for_dump(payload: dict[str, Any], *, max_text_chars: int | None = None) -> dict[str, Any]:
    """Copy of a frame that is safe to write to the dump file.

    tools/call arguments go through redact_tool_arguments; screenshot data in a
    result is replaced by its length and text blocks are cut at max_text_chars.
    """
    limit = _dump_max_chars() if max_text_chars is None else max_text_chars
    msg = dict(payload) if isinstance(payload, dict) else {}

    params = msg.get("params")
    if msg.get("method") == "tools/call" and isinstance(params, dict):
        tool = params.get("name")
        arguments = params.get("arguments")
        if isinstance(tool, str) and isinstance(arguments, dict):
            msg["params"] = {**params, "arguments": redact_tool_arguments(tool, arguments)}

    result = msg.get("result")
    if isinstance(result, dict) and isinstance(result.get("content"), list):
        msg["result"] = {**result, "content": [_redact_content_block(b, limit) for b in result["content"]]}

    return msg


def redact_jsonrpc_for_log(payload: dict[str, Any]) -> dict[str, Any]:
    """Same as the dump redaction with a 512 character text cap."""
    return redact_jsonrpc_for_dump(payload, max_text_chars=512)


def redact_text_content(text: str) -> str:
    """Redact sensitive fields inside JSON text payloads (best-effort)."""
    try:
        obj = json.loads(text)
    except ValueError:
        return text
    if not isinstance(obj, (dict, list)):
        return text
    return json.dumps(_redact_output_json(obj), ensure_ascii=False)


def _redact_output_json(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            k: _redacted_summary(v) if is_sensitive_key(str(k)) else _redact_output_json(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [_redact_output_json(v) for v in value]
    return value


__all__ = [
    "is_sensitive_key",
    "redact_jsonrpc_for_dump",
    "redact_jsonrpc_for_log",
    "redact_text_content",
    "redact_tool_arguments",
    "redact_url",
]
