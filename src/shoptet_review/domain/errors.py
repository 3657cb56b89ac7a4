"""Error taxonomy for the review core and its surrounding tooling."""

from __future__ import annotations


class ShoptetReviewError(Exception):
    """Base class for every error raised by shoptet_review."""


class ParseError(ShoptetReviewError):
    """Source text could not be parsed into a syntax tree."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        base = super().__str__()
        if self.line is None:
            return base
        return f"{base} ({self.line}:{self.column})"


class InvalidOptions(ShoptetReviewError, ValueError):
    """Caller-supplied analysis options are empty or malformed."""


class ReviewTargetError(ShoptetReviewError):
    """The requested review target is missing or holds no reviewable files."""
