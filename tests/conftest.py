"""Shared fixtures for the shoptet-review test suite.

Run pytest from the project root; pyproject.toml puts src on the path.
"""

from unittest.mock import MagicMock

import pytest

from shoptet_review.domain.entities import Finding
from shoptet_review.domain.rules import Severity
from shoptet_review.infrastructure.gateways.tree_sitter_gateway import TreeSitterGateway


@pytest.fixture
def gateway() -> TreeSitterGateway:
    return TreeSitterGateway()


@pytest.fixture
def parse(gateway):
    """Parse JavaScript source into a SyntaxNode tree."""
    return gateway.parse


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()


def _find_first(node, kind):
    stack = [node]
    while stack:
        current = stack.pop()
        if current.kind == kind:
            return current
        stack.extend(reversed(current.children))
    return None


@pytest.fixture
def find_first():
    """Pre-order search for the first node of a kind."""
    return _find_first


@pytest.fixture
def first_arg():
    """First positional argument of the first call in a tree."""

    def _first_arg(root):
        call = _find_first(root, "call_expression")
        args = call.child("arguments")
        return next(args.significant_children(), None)

    return _first_arg


@pytest.fixture
def make_finding():
    """Finding with sensible defaults; override what the test cares about."""

    def _make(
        file: str = "/repo/src/app.js",
        line: int = 1,
        column: int = 1,
        severity: Severity = Severity.BLOCKER,
        rule_id: str = "missing-cache-segment",
        message: str = "Missing /cache/ in fetch call to myshoptet.com server",
        source: str = "cache-rule",
    ) -> Finding:
        return Finding(
            file=file,
            line=line,
            column=column,
            message=message,
            rule_id=rule_id,
            severity=severity,
            source=source,
        )

    return _make
