"""Message templates keyed by rule id. Pure; localization belongs to presentation."""

from collections.abc import Mapping

from shoptet_review.domain.constants import (
    RULE_MISSING_CACHE_SEGMENT,
    RULE_RAW_TRANSPORT_CONSTRUCTION,
)

# rule id -> (message template, symbol, description), the shape of a pylint ``msgs`` entry
RULE_MESSAGES: Mapping[str, tuple[str, str, str]] = {
    RULE_MISSING_CACHE_SEGMENT: (
        "Missing %s in %s call to %s server",
        "shoptet-cache-required",
        "Remote calls to platform domains must go through the cache path segment.",
    ),
    RULE_RAW_TRANSPORT_CONSTRUCTION: (
        "XMLHttpRequest detected - verify it uses %s for Shoptet API calls",
        "shoptet-raw-transport",
        "The target URL of a raw XMLHttpRequest cannot be checked statically.",
    ),
}


class RuleMsgBuilder:
    """Renders violation messages from ``RULE_MESSAGES``."""

    @staticmethod
    def render(rule_id: str, args: tuple[str, ...]) -> str:
        """Fill the rule's template with ``args``; unknown ids fall back to the id."""
        entry = RULE_MESSAGES.get(rule_id)
        if entry is None:
            return rule_id
        template = entry[0]
        try:
            return template % args
        except TypeError:
            return template

    @staticmethod
    def build_msgs_for_codes(codes: list[str]) -> dict[str, tuple[str, str, str]]:
        """Return ``{rule_id: (template, symbol, description)}`` for a checker's ``msgs``."""
        return {code: RULE_MESSAGES[code] for code in codes if code in RULE_MESSAGES}
