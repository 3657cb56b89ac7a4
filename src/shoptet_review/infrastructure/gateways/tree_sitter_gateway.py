"""
Tree-sitter gateway: parses script source into the domain ``SyntaxNode`` tree.

The TSX grammar accepts module-scoped JavaScript with type annotations and
inline JSX markup; plain JavaScript parses unchanged. Positions are converted
here, once, into 1-based lines and 1-based character columns.

Lines are counted over every JavaScript line terminator (LF, CRLF, a bare CR,
U+2028 and U+2029), not only the LF rows tree-sitter reports.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from functools import lru_cache

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from shoptet_review.domain.errors import ParseError
from shoptet_review.domain.protocols import SourceParserProtocol
from shoptet_review.domain.syntax import Position, SyntaxNode

_LINE_TERMINATOR_RE = re.compile(rb"\r\n|\r|\n|\xe2\x80\xa8|\xe2\x80\xa9")


@lru_cache(maxsize=1)
def _tsx_language() -> Language:
    return Language(tree_sitter_typescript.language_tsx())


def line_starts(source: bytes) -> list[int]:
    """Byte offsets at which each line of ``source`` begins."""
    return [0] + [m.end() for m in _LINE_TERMINATOR_RE.finditer(source)]


class TreeSitterGateway(SourceParserProtocol):
    """Infrastructure implementation of SourceParserProtocol using tree-sitter."""

    def parse(self, source_text: str) -> SyntaxNode:
        """Parse ``source_text``; raise ParseError when the tree holds ERROR or MISSING nodes."""
        source = source_text.encode("utf-8")
        starts = line_starts(source)
        # One parser per call: parsers are not safe to share between threads.
        parser = Parser(_tsx_language())
        tree = parser.parse(source)
        root = tree.root_node
        if root.has_error:
            raise self._parse_error(root, source, starts)
        return self._convert(root, source, starts)

    def _parse_error(self, root: Node, source: bytes, starts: list[int]) -> ParseError:
        """Locate the first ERROR or MISSING node for the diagnostic."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.is_error or node.is_missing:
                pos = self._position(node.start_byte, source, starts)
                what = f"missing {node.type!r}" if node.is_missing else "unexpected syntax"
                return ParseError(f"Parse error: {what}", pos.line, pos.column)
            stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
        return ParseError("Parse error: malformed source")

    @staticmethod
    def _position(byte_offset: int, source: bytes, starts: list[int]) -> Position:
        index = bisect_right(starts, byte_offset) - 1
        line_start = starts[index]
        column = len(source[line_start:byte_offset].decode("utf-8", errors="replace")) + 1
        return Position(line=index + 1, column=column)

    def _make(self, node: Node, role: str | None, source: bytes, starts: list[int]) -> SyntaxNode:
        return SyntaxNode(
            kind=node.type,
            start=self._position(node.start_byte, source, starts),
            end=self._position(node.end_byte, source, starts),
            role=role,
            is_extra=node.is_extra,
            byte_range=(node.start_byte, node.end_byte),
            source=source,
        )

    def _convert(self, root: Node, source: bytes, starts: list[int]) -> SyntaxNode:
        """Copy named nodes into SyntaxNodes without recursion."""
        converted_root = self._make(root, None, source, starts)
        stack: list[tuple[Node, SyntaxNode]] = [(root, converted_root)]
        while stack:
            ts_node, syntax_node = stack.pop()
            cursor = ts_node.walk()
            if not cursor.goto_first_child():
                continue
            while True:
                child = cursor.node
                if child is not None and child.is_named:
                    converted = self._make(child, cursor.field_name, source, starts)
                    syntax_node.children.append(converted)
                    stack.append((child, converted))
                if not cursor.goto_next_sibling():
                    break
        return converted_root
