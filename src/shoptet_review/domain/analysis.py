"""Analysis result and the rule registration table."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shoptet_review.domain.rules import Checkable, Severity, Violation
from shoptet_review.domain.rules.cache_segment import MissingCacheSegmentRule
from shoptet_review.domain.rules.raw_transport import RawTransportConstructionRule

if TYPE_CHECKING:
    from shoptet_review.domain.collector import ViolationCollector
    from shoptet_review.domain.options import AnalysisOptions
    from shoptet_review.domain.syntax import SyntaxNode
    from shoptet_review.domain.walker import Handler

RuleFactory = Callable[["AnalysisOptions"], Checkable]

# One entry per matcher.
DEFAULT_RULES: tuple[RuleFactory, ...] = (
    MissingCacheSegmentRule,
    RawTransportConstructionRule,
)


@dataclass(frozen=True)
class AnalysisResult:
    """Violations of one source unit in traversal order, or the parse error that stopped it."""

    violations: tuple[Violation, ...] = field(default_factory=tuple)
    parse_error: str | None = None

    @property
    def ok(self) -> bool:
        return self.parse_error is None

    def count(self, severity: Severity) -> int:
        return sum(1 for v in self.violations if v.severity is severity)

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"violations": [v.to_dict() for v in self.violations]}
        if self.parse_error is not None:
            data["parseError"] = self.parse_error
        return data


class RuleHandlers:
    """Builds the walker's kind -> handler table from rule objects."""

    @staticmethod
    def build(
        rules: Sequence[Checkable], collector: ViolationCollector
    ) -> dict[str, Handler]:
        by_kind: dict[str, list[Checkable]] = {}
        for rule in rules:
            for kind in rule.node_kinds:
                by_kind.setdefault(kind, []).append(rule)
        return {
            kind: RuleHandlers._handler(kind_rules, collector)
            for kind, kind_rules in by_kind.items()
        }

    @staticmethod
    def _handler(rules: list[Checkable], collector: ViolationCollector) -> Handler:
        def handle(node: SyntaxNode, parent: SyntaxNode | None) -> None:
            found: list[Violation] = []
            for rule in rules:
                found.extend(rule.check(node, parent))
            collector.extend(found)

        return handle
