"""
Generic syntax tree walker.

Depth-first, pre-order, order-preserving. A handler registered for a node's
kind runs before the walker descends into that node. The walker understands
two tree shapes:

- ``SyntaxNode`` dataclasses produced by the parser gateway;
- plain mappings (ESTree-style dicts) carrying a ``kind`` key.

Fields named in ``POSITION_FIELDS`` are never descended into. Objects
without a string ``kind`` are traversed but never dispatched. The walk uses
an explicit stack, so nesting depth is bounded by memory only.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from shoptet_review.domain.constants import POSITION_FIELDS

logger = logging.getLogger(__name__)

Handler = Callable[[Any, Any], None]


def _is_node(value: object) -> bool:
    return isinstance(value, Mapping) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    )


def _kind_of(node: object) -> str | None:
    if isinstance(node, Mapping):
        kind = node.get("kind")
    else:
        kind = getattr(node, "kind", None)
    return kind if isinstance(kind, str) else None


def _fields_of(node: object) -> Iterator[tuple[str, object]]:
    if isinstance(node, Mapping):
        yield from node.items()
        return
    for f in dataclasses.fields(node):  # type: ignore[arg-type]
        yield f.name, getattr(node, f.name, None)


def _structural_children(node: object) -> list[object]:
    """Nodes and node sequences reachable from ``node``, in field order."""
    children: list[object] = []
    for name, value in _fields_of(node):
        if name in POSITION_FIELDS or value is None:
            continue
        if _is_node(value) or isinstance(value, (list, tuple)):
            children.append(value)
    return children


def _dispatch(handler: Handler, kind: str, node: object, parent: object) -> None:
    try:
        handler(node, parent)
    except Exception:
        logger.debug("Handler for %r failed; node treated as no-match", kind, exc_info=True)


def walk(root: object, handlers: Mapping[str, Handler]) -> None:
    """Visit every node under ``root``, calling ``handlers[kind](node, parent)``."""
    # Entries are (value, parent); sequences pass their owner through as parent.
    stack: list[tuple[object, object]] = [(root, None)]
    while stack:
        value, parent = stack.pop()
        if isinstance(value, (list, tuple)):
            for item in reversed(value):
                if _is_node(item) or isinstance(item, (list, tuple)):
                    stack.append((item, parent))
            continue
        if not _is_node(value):
            continue
        kind = _kind_of(value)
        if kind is not None:
            handler = handlers.get(kind)
            if handler is not None:
                _dispatch(handler, kind, value, parent)
        for child in reversed(_structural_children(value)):
            stack.append((child, value))


def handlers_from_visitor(visitor: object) -> dict[str, Handler]:
    """Build a dispatch table from ``visit_<kind>`` methods of ``visitor``."""
    handlers: dict[str, Handler] = {}
    for attr in dir(visitor):
        if not attr.startswith("visit_"):
            continue
        method = getattr(visitor, attr)
        if callable(method):
            handlers[attr[len("visit_"):]] = method
    return handlers
