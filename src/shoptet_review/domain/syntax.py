"""Syntax tree model shared by the parser gateway, the walker and the rules."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from shoptet_review.domain.constants import KIND_COMMENT


@dataclass(frozen=True, order=True)
class Position:
    """1-based line and 1-based character column."""

    line: int
    column: int


@dataclass(eq=False)
class SyntaxNode:
    """
    A named node of the parsed tree.

    ``role`` is the field name the node occupies inside its parent
    (``function``, ``arguments``, ``constructor``...) or None when the grammar
    gives it no field. ``children`` keeps every named child in source order.
    The node text is sliced lazily from the shared source buffer.
    """

    kind: str
    start: Position
    end: Position
    role: str | None = None
    children: list[SyntaxNode] = field(default_factory=list)
    is_extra: bool = False
    byte_range: tuple[int, int] = (0, 0)
    source: bytes = field(default=b"", repr=False)

    @property
    def text(self) -> str:
        """Source text covered by this node."""
        start, end = self.byte_range
        return self.source[start:end].decode("utf-8", errors="replace")

    def child(self, role: str) -> SyntaxNode | None:
        """Return the first child occupying ``role``."""
        return next((c for c in self.children if c.role == role), None)

    def children_of_kind(self, kind: str) -> list[SyntaxNode]:
        return [c for c in self.children if c.kind == kind]

    def significant_children(self) -> Iterator[SyntaxNode]:
        """Children minus comments and other extras."""
        return (c for c in self.children if not c.is_extra and c.kind != KIND_COMMENT)
