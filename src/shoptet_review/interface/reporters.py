"""Protocol for review reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from shoptet_review.domain.entities import ReviewResult


class ReviewReporter(Protocol):
    """Protocol for presenting review results."""

    def report(self, result: "ReviewResult") -> None:
        """Present findings, warnings and the summary."""
        ...

    def report_error(self, message: str) -> None:
        """Present a fatal error (bad target path, no files)."""
        ...
