"""Unit tests for AnalysisResult and RuleHandlers."""

from unittest.mock import MagicMock

from shoptet_review.domain.analysis import DEFAULT_RULES, AnalysisResult, RuleHandlers
from shoptet_review.domain.collector import ViolationCollector
from shoptet_review.domain.rules import Severity, Violation
from shoptet_review.domain.rules.cache_segment import MissingCacheSegmentRule
from shoptet_review.domain.rules.raw_transport import RawTransportConstructionRule


def _v(severity: Severity) -> Violation:
    return Violation(1, 1, "m", "r", severity)


class TestAnalysisResult:
    def test_counts_by_severity(self) -> None:
        result = AnalysisResult(violations=(_v(Severity.BLOCKER), _v(Severity.RECOMMEND), _v(Severity.BLOCKER)))
        assert result.count(Severity.BLOCKER) == 2
        assert result.count(Severity.RECOMMEND) == 1
        assert result.ok

    def test_parse_error_result(self) -> None:
        result = AnalysisResult(parse_error="Parse error: unexpected syntax (1:5)")
        assert not result.ok
        assert result.to_dict() == {
            "violations": [],
            "parseError": "Parse error: unexpected syntax (1:5)",
        }

    def test_to_dict_uses_wire_keys(self) -> None:
        data = AnalysisResult(violations=(_v(Severity.RECOMMEND),)).to_dict()
        assert data == {
            "violations": [
                {"line": 1, "column": 1, "message": "m", "ruleId": "r", "severity": "recommend"}
            ]
        }


class TestRuleHandlers:
    def test_default_rules_cover_both_matchers(self) -> None:
        assert DEFAULT_RULES == (MissingCacheSegmentRule, RawTransportConstructionRule)

    def test_groups_rules_by_kind_in_registration_order(self) -> None:
        first = MagicMock(node_kinds=("call_expression",))
        first.check.return_value = [_v(Severity.BLOCKER)]
        second = MagicMock(node_kinds=("call_expression", "new_expression"))
        second.check.return_value = [_v(Severity.RECOMMEND)]
        collector = ViolationCollector()

        handlers = RuleHandlers.build([first, second], collector)
        assert set(handlers) == {"call_expression", "new_expression"}

        node, parent = object(), object()
        handlers["call_expression"](node, parent)
        first.check.assert_called_once_with(node, parent)
        second.check.assert_called_once_with(node, parent)
        assert [v.severity for v in collector.violations] == [Severity.BLOCKER, Severity.RECOMMEND]

    def test_failing_rule_leaves_no_partial_output(self) -> None:
        ok = MagicMock(node_kinds=("call_expression",))
        ok.check.return_value = [_v(Severity.BLOCKER)]
        broken = MagicMock(node_kinds=("call_expression",))
        broken.check.side_effect = RuntimeError("boom")
        collector = ViolationCollector()
        handler = RuleHandlers.build([ok, broken], collector)["call_expression"]

        try:
            handler(object(), None)
        except RuntimeError:
            pass
        assert collector.violations == ()
