"""Missing cache segment rule: network calls to platform domains without the cache path."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from shoptet_review.domain.constants import (
    FETCH_IDENTIFIER,
    KIND_ARGUMENTS,
    KIND_CALL_EXPRESSION,
    KIND_IDENTIFIER,
    KIND_MEMBER_EXPRESSION,
    KIND_PROPERTY_IDENTIFIER,
    RULE_MISSING_CACHE_SEGMENT,
)
from shoptet_review.domain.literals import static_text
from shoptet_review.domain.rules import Checkable, Severity, Violation

if TYPE_CHECKING:
    from shoptet_review.domain.options import AnalysisOptions
    from shoptet_review.domain.syntax import SyntaxNode


@dataclass(frozen=True)
class CachePattern:
    """Domain recognizer plus required-path recognizer. Both pure."""

    domain_re: re.Pattern[str]
    required_segment: str

    @classmethod
    def from_options(cls, options: AnalysisOptions) -> CachePattern:
        alternatives = "|".join(re.escape(d) for d in options.domains)
        return cls(
            domain_re=re.compile(rf"\.({alternatives})"),
            required_segment=options.required_segment,
        )

    def matches_domain(self, url: str) -> bool:
        return self.domain_re.search(url) is not None

    def matched_domain(self, url: str) -> str | None:
        """The configured domain found in ``url``, if any."""
        match = self.domain_re.search(url)
        return match.group(1) if match else None

    def has_required_segment(self, url: str) -> bool:
        return self.required_segment in url

    def is_violating(self, url: str) -> bool:
        """True when ``url`` targets a platform domain and lacks the segment."""
        return self.matches_domain(url) and not self.has_required_segment(url)


class MissingCacheSegmentRule(Checkable):
    """
    Flags ``fetch(url)`` and ``$.get/post/ajax(url)`` calls whose first
    argument is a statically known platform URL without the cache segment.

    Only plain string literals and substitution-free template literals are
    evaluated. Identifiers, concatenations, interpolated templates and the
    ``$.ajax({url: ...})`` settings form are left alone.
    """

    code: str = RULE_MISSING_CACHE_SEGMENT
    description: str = "Require the cache path segment in remote calls to platform servers."
    node_kinds: ClassVar[tuple[str, ...]] = (KIND_CALL_EXPRESSION,)

    def __init__(self, options: AnalysisOptions) -> None:
        self._pattern = CachePattern.from_options(options)
        self._segment = options.required_segment
        self._ajax_helpers = frozenset(options.ajax_helpers)
        self._ajax_methods = frozenset(options.ajax_methods)

    def check(self, node: SyntaxNode, parent: SyntaxNode | None = None) -> list[Violation]:
        """Check a call expression. Returns at most one violation."""
        if node.kind != KIND_CALL_EXPRESSION:
            return []
        method = self.call_style(node)
        if method is None:
            return []
        url_node = self.first_argument(node)
        url = static_text(url_node)
        if url is None or url_node is None:
            return []
        if not self._pattern.is_violating(url):
            return []
        domain = self._pattern.matched_domain(url) or ""
        return [
            Violation.from_node(
                rule_id=self.code,
                node=url_node,
                severity=Severity.BLOCKER,
                message_args=(self._segment, method, domain),
            )
        ]

    def call_style(self, node: SyntaxNode) -> str | None:
        """Return ``fetch`` or ``<helper>.<method>`` when the callee is a network call."""
        callee = node.child("function")
        if callee is None:
            return None
        if callee.kind == KIND_IDENTIFIER:
            return FETCH_IDENTIFIER if callee.text == FETCH_IDENTIFIER else None
        if callee.kind != KIND_MEMBER_EXPRESSION:
            return None
        obj = callee.child("object")
        prop = callee.child("property")
        if obj is None or prop is None:
            return None
        if obj.kind != KIND_IDENTIFIER or obj.text not in self._ajax_helpers:
            return None
        if prop.kind != KIND_PROPERTY_IDENTIFIER or prop.text not in self._ajax_methods:
            return None
        return f"{obj.text}.{prop.text}"

    @staticmethod
    def first_argument(node: SyntaxNode) -> SyntaxNode | None:
        """First positional argument; tagged templates have none."""
        args = node.child("arguments")
        if args is None or args.kind != KIND_ARGUMENTS:
            return None
        return next(args.significant_children(), None)
