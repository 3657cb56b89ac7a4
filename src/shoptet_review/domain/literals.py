"""
Static value extraction for string and template literals.

Only what is syntactically certain is evaluated: a plain string literal, or a
template literal without interpolation, optionally wrapped in parentheses.
Everything else yields None.
"""

from __future__ import annotations

import re

from shoptet_review.domain.constants import (
    KIND_PARENTHESIZED_EXPRESSION,
    KIND_STRING,
    KIND_TEMPLATE_STRING,
    KIND_TEMPLATE_SUBSTITUTION,
)
from shoptet_review.domain.syntax import SyntaxNode

_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)
_SINGLE_CHAR_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}
_LINE_CONTINUATIONS: frozenset[str] = frozenset({"\n", "\r\n", "\r", "\u2028", "\u2029"})


def _replace_escape(match: re.Match[str]) -> str:
    body = match.group(1)
    if body.startswith("u{"):
        return chr(int(body[2:-1], 16))
    if len(body) == 5 and body[0] == "u":
        return chr(int(body[1:], 16))
    if len(body) == 3 and body[0] == "x":
        return chr(int(body[1:], 16))
    if body in _LINE_CONTINUATIONS:
        return ""
    return _SINGLE_CHAR_ESCAPES.get(body, body)


def cook(raw: str) -> str | None:
    """Resolve JavaScript escape sequences. None when an escape is out of range."""
    try:
        return _ESCAPE_RE.sub(_replace_escape, raw)
    except (ValueError, OverflowError):
        return None


def static_text(node: SyntaxNode | None) -> str | None:
    """Return the literal's resolved text, or None when it is not statically known."""
    node = unwrap_parentheses(node)
    if node is None:
        return None
    if node.kind == KIND_STRING:
        return cook(node.text[1:-1])
    if node.kind == KIND_TEMPLATE_STRING:
        if node.children_of_kind(KIND_TEMPLATE_SUBSTITUTION):
            return None
        return cook(node.text[1:-1].replace("\r\n", "\n"))
    return None


def unwrap_parentheses(node: SyntaxNode | None) -> SyntaxNode | None:
    """Strip ``(...)`` wrappers that hold exactly one expression."""
    while node is not None and node.kind == KIND_PARENTHESIZED_EXPRESSION:
        inner = list(node.significant_children())
        if len(inner) != 1:
            return node
        node = inner[0]
    return node
