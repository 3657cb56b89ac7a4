"""Raw transport construction rule: ``new XMLHttpRequest()``."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from shoptet_review.domain.constants import (
    KIND_IDENTIFIER,
    KIND_NEW_EXPRESSION,
    RAW_TRANSPORT_IDENTIFIER,
    RULE_RAW_TRANSPORT_CONSTRUCTION,
)
from shoptet_review.domain.rules import Checkable, Severity, Violation

if TYPE_CHECKING:
    from shoptet_review.domain.options import AnalysisOptions
    from shoptet_review.domain.syntax import SyntaxNode


class RawTransportConstructionRule(Checkable):
    """The request URL is set later via ``open()``, so manual verification is advised."""

    code: str = RULE_RAW_TRANSPORT_CONSTRUCTION
    description: str = "Advise manual review of XMLHttpRequest usage."
    node_kinds: ClassVar[tuple[str, ...]] = (KIND_NEW_EXPRESSION,)

    def __init__(self, options: AnalysisOptions) -> None:
        self._segment = options.required_segment

    def check(self, node: SyntaxNode, parent: SyntaxNode | None = None) -> list[Violation]:
        if node.kind != KIND_NEW_EXPRESSION:
            return []
        constructor = node.child("constructor")
        if constructor is None or constructor.kind != KIND_IDENTIFIER:
            return []
        if constructor.text != RAW_TRANSPORT_IDENTIFIER:
            return []
        return [
            Violation.from_node(
                rule_id=self.code,
                node=node,
                severity=Severity.RECOMMEND,
                message_args=(self._segment,),
            )
        ]
