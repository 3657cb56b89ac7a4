"""Domain models for rules and violations."""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Checkable",
    "Severity",
    "Violation",
]

from typing import TYPE_CHECKING, Protocol

from shoptet_review.domain.rule_msgs import RuleMsgBuilder

if TYPE_CHECKING:
    from shoptet_review.domain.syntax import SyntaxNode


class Severity(Enum):
    """Violation severity. Reporters map BLOCKER to error level, RECOMMEND to warning."""

    BLOCKER = "blocker"
    RECOMMEND = "recommend"


@dataclass(frozen=True)
class Violation:
    """A detected anti-pattern instance: 1-based line and column, message, rule id, severity."""

    line: int
    column: int
    message: str
    rule_id: str
    severity: Severity
    message_args: tuple[str, ...] = ()

    @classmethod
    def from_node(
        cls,
        *,
        rule_id: str,
        node: "SyntaxNode",
        severity: Severity,
        message_args: tuple[str, ...] = (),
    ) -> "Violation":
        """Build a Violation located at the node's start position."""
        return cls(
            line=node.start.line,
            column=node.start.column,
            message=RuleMsgBuilder.render(rule_id, message_args),
            rule_id=rule_id,
            severity=severity,
            message_args=message_args,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize for JSON output."""
        return {
            "line": self.line,
            "column": self.column,
            "message": self.message,
            "ruleId": self.rule_id,
            "severity": self.severity.value,
        }


class Checkable(Protocol):
    """One-and-done check: given a node and its parent, return violations."""

    code: str
    description: str
    node_kinds: tuple[str, ...]

    def check(self, node: "SyntaxNode", parent: "SyntaxNode | None" = None) -> list[Violation]:
        """Interrogate a node for the anti-pattern."""
        ...
