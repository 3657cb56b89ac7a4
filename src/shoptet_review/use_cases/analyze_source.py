"""Use Case: Analyze Source - run every rule over one parsed source unit."""

import logging
from typing import TYPE_CHECKING, Optional

from shoptet_review.domain.analysis import DEFAULT_RULES, AnalysisResult, RuleFactory, RuleHandlers
from shoptet_review.domain.collector import ViolationCollector
from shoptet_review.domain.errors import ParseError
from shoptet_review.domain.options import AnalysisOptions
from shoptet_review.domain.walker import walk

if TYPE_CHECKING:
    from shoptet_review.domain.protocols import SourceParserProtocol

logger = logging.getLogger(__name__)


class AnalyzeSourceUseCase:
    """Parse, walk once with all rules registered, collect violations in traversal order."""

    def __init__(
        self,
        parser: "SourceParserProtocol",
        rule_factories: tuple[RuleFactory, ...] = DEFAULT_RULES,
    ) -> None:
        self.parser = parser
        self.rule_factories = rule_factories

    def execute(self, source_text: str, options: Optional[AnalysisOptions] = None) -> AnalysisResult:
        """
        Analyze one source unit.

        Raises InvalidOptions before any parsing when ``options`` are malformed.
        A parse failure never raises: it comes back as ``parse_error`` with no
        violations.
        """
        options = options or AnalysisOptions()
        options.validate()

        try:
            root = self.parser.parse(source_text)
        except ParseError as exc:
            logger.warning("Skipping unparseable source: %s", exc)
            return AnalysisResult(parse_error=str(exc))

        rules = [factory(options) for factory in self.rule_factories]
        collector = ViolationCollector()
        walk(root, RuleHandlers.build(rules, collector))
        return AnalysisResult(violations=collector.violations)
