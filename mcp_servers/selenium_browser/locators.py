"""
Locator grammar.

A selector string is turned into exactly one locator strategy by checking a
fixed list of prefixes in order. Nothing is rejected here: a string with no
known prefix is a CSS selector, and malformed CSS/XPath only fails once the
driver tries to use it.

    //h1          -> xpath  //h1
    id=login      -> id     login
    name=q        -> name   q
    class=btn     -> class  btn
    tag=form      -> tag    form
    link=Home     -> link   Home
    partial=Hom   -> partialLink  Hom
    div > a.nav   -> css    div > a.nav
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

STRATEGIES = ("css", "xpath", "id", "name", "class", "tag", "link", "partialLink")

# (prefix, strategy, strip_prefix); order is the resolution priority.
_PREFIXES: tuple[tuple[str, str, bool], ...] = (
    ("//", "xpath", False),
    ("id=", "id", True),
    ("name=", "name", True),
    ("class=", "class", True),
    ("tag=", "tag", True),
    ("link=", "link", True),
    ("partial=", "partialLink", True),
)

_ENCODE_PREFIX = {strategy: prefix for prefix, strategy, strip in _PREFIXES if strip}


@dataclass(frozen=True, slots=True)
class Selector:
    strategy: str
    value: str

    def __str__(self) -> str:
        prefix = _ENCODE_PREFIX.get(self.strategy)
        if prefix is not None:
            return prefix + self.value
        return self.value


def resolve(text: str) -> Selector:
    """Resolve a compact selector string into a Selector."""
    raw = text if isinstance(text, str) else str(text)
    for prefix, strategy, strip in _PREFIXES:
        if raw.startswith(prefix):
            return Selector(strategy, raw[len(prefix) :] if strip else raw)
    return Selector("css", raw)


def encode(by: Any, value: str) -> str:
    """Build the compact selector string for a tool's ``by``/``value`` pair."""
    strategy = _normalize_by(by)
    prefix = _ENCODE_PREFIX.get(strategy)
    if prefix is not None:
        return prefix + value
    return value


def selector_from_args(by: Any, value: str) -> Selector:
    """Selector for a tool call's ``by``/``value`` arguments."""
    if _normalize_by(by) == "xpath" and not value.startswith("//"):
        # "(//a)[2]" or "./div" would otherwise fall through to css.
        return Selector("xpath", value)
    return resolve(encode(by, value))


def _normalize_by(by: Any) -> str:
    key = str(by or "css").strip()
    lowered = key.lower()
    if lowered in {"partiallink", "partial_link", "partial", "partiallinktext"}:
        return "partialLink"
    if lowered in {"link", "linktext", "link_text"}:
        return "link"
    if lowered in {"css", "xpath", "id", "name", "class", "tag"}:
        return lowered
    return "css"


__all__ = ["STRATEGIES", "Selector", "encode", "resolve", "selector_from_args"]
