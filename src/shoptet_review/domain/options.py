"""Analysis options accepted at the ``analyze`` boundary."""

from __future__ import annotations

from dataclasses import dataclass

from shoptet_review.domain.constants import (
    DEFAULT_AJAX_HELPERS,
    DEFAULT_AJAX_METHODS,
    DEFAULT_DOMAINS,
    DEFAULT_REQUIRED_SEGMENT,
)
from shoptet_review.domain.errors import InvalidOptions


@dataclass(frozen=True)
class AnalysisOptions:
    """Platform domains, the required path segment and the recognized AJAX helper shapes."""

    domains: tuple[str, ...] = DEFAULT_DOMAINS
    required_segment: str = DEFAULT_REQUIRED_SEGMENT
    ajax_helpers: tuple[str, ...] = DEFAULT_AJAX_HELPERS
    ajax_methods: tuple[str, ...] = DEFAULT_AJAX_METHODS

    @classmethod
    def create(
        cls,
        domains: object = None,
        required_segment: object = None,
        ajax_helpers: object = None,
        ajax_methods: object = None,
    ) -> AnalysisOptions:
        """Build validated options; ``None`` keeps the default for that field."""
        options = cls(
            domains=_as_tuple(domains, DEFAULT_DOMAINS, "domains"),
            required_segment=(
                DEFAULT_REQUIRED_SEGMENT if required_segment is None else required_segment  # type: ignore[arg-type]
            ),
            ajax_helpers=_as_tuple(ajax_helpers, DEFAULT_AJAX_HELPERS, "ajax_helpers"),
            ajax_methods=_as_tuple(ajax_methods, DEFAULT_AJAX_METHODS, "ajax_methods"),
        )
        options.validate()
        return options

    def validate(self) -> None:
        """Raise InvalidOptions when any field is empty or malformed."""
        for name in ("domains", "ajax_helpers", "ajax_methods"):
            values = getattr(self, name)
            if isinstance(values, str):
                raise InvalidOptions(f"{name} must be a list of strings, not a string")
            if not isinstance(values, (tuple, list)):
                raise InvalidOptions(f"{name} must be a list of strings")
        if not self.domains:
            raise InvalidOptions("domains must contain at least one domain")
        for domain in self.domains:
            if not isinstance(domain, str) or not domain.strip():
                raise InvalidOptions(f"invalid domain: {domain!r}")
            if any(ch.isspace() for ch in domain) or "/" in domain:
                raise InvalidOptions(f"domain must be a bare host name: {domain!r}")
        segment = self.required_segment
        if not isinstance(segment, str) or not segment.strip():
            raise InvalidOptions(f"invalid required_segment: {segment!r}")
        if any(ch.isspace() for ch in segment):
            raise InvalidOptions(f"required_segment must not contain whitespace: {segment!r}")
        for name, values in (("ajax_helpers", self.ajax_helpers), ("ajax_methods", self.ajax_methods)):
            if not values:
                raise InvalidOptions(f"{name} must not be empty")
            if any(not isinstance(v, str) or not v.strip() for v in values):
                raise InvalidOptions(f"invalid entry in {name}: {values!r}")


def _as_tuple(value: object, default: tuple[str, ...], name: str) -> tuple[str, ...]:
    if value is None:
        return default
    if isinstance(value, str):
        raise InvalidOptions(f"{name} must be a list of strings, not a string")
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(value)
    raise InvalidOptions(f"{name} must be a list of strings")
