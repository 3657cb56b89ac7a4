"""Ordered, append-only violation accumulator for a single traversal."""

from collections.abc import Iterable

from shoptet_review.domain.rules import Violation


class ViolationCollector:
    """Keeps violations in the order they were reported. No deduplication."""

    def __init__(self) -> None:
        self._violations: list[Violation] = []

    def add(self, violation: Violation) -> None:
        self._violations.append(violation)

    def extend(self, violations: Iterable[Violation]) -> None:
        self._violations.extend(violations)

    @property
    def violations(self) -> tuple[Violation, ...]:
        """Snapshot of everything collected so far."""
        return tuple(self._violations)

    def __len__(self) -> int:
        return len(self._violations)
