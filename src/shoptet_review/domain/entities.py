from dataclasses import dataclass, field
from enum import Enum

from shoptet_review.domain.constants import SOURCE_CACHE_RULE
from shoptet_review.domain.rules import Severity, Violation


class OutputFormat(Enum):
    """How the review result is presented."""
    CONSOLE = "console"
    GITHUB_ACTIONS = "github-actions"
    JSON = "json"


@dataclass(frozen=True)
class Finding:
    """A violation bound to the file it was found in."""
    file: str
    line: int
    column: int
    message: str
    rule_id: str
    severity: Severity
    source: str = SOURCE_CACHE_RULE

    @classmethod
    def from_violation(cls, file: str, violation: Violation, source: str = SOURCE_CACHE_RULE) -> "Finding":
        return cls(
            file=file,
            line=violation.line,
            column=violation.column,
            message=violation.message,
            rule_id=violation.rule_id,
            severity=violation.severity,
            source=source,
        )

    @property
    def is_blocker(self) -> bool:
        return self.severity is Severity.BLOCKER

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for reporter."""
        return {
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "message": self.message,
            "ruleId": self.rule_id,
            "severity": self.severity.value,
            "source": self.source,
        }


@dataclass(frozen=True)
class ParseWarning:
    """A file that could not be analyzed (parse failure or read error)."""
    file: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"file": self.file, "message": self.message}


@dataclass(frozen=True)
class AdapterResult:
    """Findings and per-file warnings produced by one linter adapter."""
    findings: tuple[Finding, ...] = field(default_factory=tuple)
    warnings: tuple[ParseWarning, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ReviewResult:
    """Result of a complete review run across all files."""
    files: tuple[str, ...] = field(default_factory=tuple)
    findings: tuple[Finding, ...] = field(default_factory=tuple)
    warnings: tuple[ParseWarning, ...] = field(default_factory=tuple)

    @property
    def blockers(self) -> tuple[Finding, ...]:
        return tuple(f for f in self.findings if f.severity is Severity.BLOCKER)

    @property
    def recommendations(self) -> tuple[Finding, ...]:
        return tuple(f for f in self.findings if f.severity is Severity.RECOMMEND)

    @property
    def blocker_count(self) -> int:
        return len(self.blockers)

    @property
    def recommend_count(self) -> int:
        return len(self.recommendations)

    def has_blockers(self) -> bool:
        """Check if the review would fail a gate."""
        return self.blocker_count > 0

    def findings_for(self, file: str) -> tuple[Finding, ...]:
        return tuple(f for f in self.findings if f.file == file)

    def to_dict(self) -> dict[str, object]:
        return {
            "summary": {
                "files": len(self.files),
                "blockers": self.blocker_count,
                "recommendations": self.recommend_count,
            },
            "findings": [f.to_dict() for f in self.findings],
            "warnings": [w.to_dict() for w in self.warnings],
        }
