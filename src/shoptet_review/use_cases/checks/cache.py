"""Host lint engine checker for the cache rules (missing-cache-segment, raw-transport-construction)."""

from typing import TYPE_CHECKING, Optional

from shoptet_review.domain.options import AnalysisOptions
from shoptet_review.domain.rule_msgs import RuleMsgBuilder
from shoptet_review.domain.rules import Violation
from shoptet_review.domain.rules.cache_segment import MissingCacheSegmentRule
from shoptet_review.domain.rules.raw_transport import RawTransportConstructionRule

if TYPE_CHECKING:
    from shoptet_review.domain.protocols import HostLinterProtocol
    from shoptet_review.domain.syntax import SyntaxNode


class ShoptetCacheChecker:
    """
    Thin adapter from a visitor-style lint engine to the shared rules.

    The engine calls ``visit_<kind>(node, parent)``; the checker delegates to
    the same rule objects ``analyze`` uses and reports through
    ``linter.add_message``.
    """

    name: str = "shoptet-cache"

    def __init__(
        self,
        linter: "HostLinterProtocol",
        options: Optional[AnalysisOptions] = None,
    ) -> None:
        options = options or AnalysisOptions()
        options.validate()
        self.linter = linter
        self._cache_rule = MissingCacheSegmentRule(options)
        self._transport_rule = RawTransportConstructionRule(options)
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            [self._cache_rule.code, self._transport_rule.code]
        )

    def visit_call_expression(
        self, node: "SyntaxNode", parent: "Optional[SyntaxNode]" = None
    ) -> None:
        """Flag fetch / $.get / $.post / $.ajax calls that skip the cache segment."""
        self._report(self._cache_rule.check(node, parent), node)

    def visit_new_expression(
        self, node: "SyntaxNode", parent: "Optional[SyntaxNode]" = None
    ) -> None:
        """Flag ``new XMLHttpRequest()`` for manual review."""
        self._report(self._transport_rule.check(node, parent), node)

    def _report(self, violations: list[Violation], node: "SyntaxNode") -> None:
        for violation in violations:
            self.linter.add_message(
                violation.rule_id,
                node=node,
                args=violation.message_args,
                line=violation.line,
                col_offset=violation.column - 1,  # host engines count columns from 0
            )
