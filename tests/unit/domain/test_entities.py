"""Unit tests for review entities."""

from shoptet_review.domain.entities import Finding, OutputFormat, ReviewResult
from shoptet_review.domain.rules import Severity, Violation


def test_finding_from_violation() -> None:
    violation = Violation(2, 5, "msg", "missing-cache-segment", Severity.BLOCKER, ("/cache/", "fetch"))
    finding = Finding.from_violation("/p/a.js", violation)
    assert finding == Finding("/p/a.js", 2, 5, "msg", "missing-cache-segment", Severity.BLOCKER)
    assert finding.is_blocker
    assert finding.to_dict()["severity"] == "blocker"


def test_review_result_partitions(make_finding) -> None:
    blocker = make_finding(file="/p/a.js")
    recommend = make_finding(file="/p/b.js", severity=Severity.RECOMMEND)
    result = ReviewResult(files=("/p/a.js", "/p/b.js"), findings=(blocker, recommend))
    assert result.blockers == (blocker,)
    assert result.recommendations == (recommend,)
    assert result.has_blockers()
    assert result.findings_for("/p/b.js") == (recommend,)


def test_recommendations_alone_do_not_block(make_finding) -> None:
    result = ReviewResult(findings=(make_finding(severity=Severity.RECOMMEND),))
    assert not result.has_blockers()
    assert result.to_dict()["summary"] == {"files": 0, "blockers": 0, "recommendations": 1}


def test_output_format_values() -> None:
    assert [f.value for f in OutputFormat] == ["console", "github-actions", "json"]
