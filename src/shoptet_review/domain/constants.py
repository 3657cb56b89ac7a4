"""
Shoptet Review: shared constants (defaults, rule ids, node kinds).
"""

# ANSI Cyan (\033[36m)
_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_REVIEW_ART = r"""
   _____ __                __       __     ____            _
  / ___// /_  ____  ____  / /____  / /_   / __ \___ _   __(_)__ _      __
  \__ \/ __ \/ __ \/ __ \/ __/ _ \/ __/  / /_/ / _ \ | / / / _ \ | /| / /
 ___/ / / / / /_/ / /_/ / /_/  __/ /_   / _, _/  __/ |/ / /  __/ |/ |/ /
/____/_/ /_/\____/ .___/\__/\___/\__/  /_/ |_|\___/|___/_/\___/|__/|__/
                /_/
"""
REVIEW_BANNER = _CYAN + _REVIEW_ART + _RESET

# Default platform pattern
DEFAULT_DOMAINS: tuple[str, ...] = ("shoptet.cz", "myshoptet.com")
DEFAULT_REQUIRED_SEGMENT: str = "/cache/"
DEFAULT_AJAX_HELPERS: tuple[str, ...] = ("$",)
DEFAULT_AJAX_METHODS: tuple[str, ...] = ("get", "post", "ajax")

FETCH_IDENTIFIER: str = "fetch"
RAW_TRANSPORT_IDENTIFIER: str = "XMLHttpRequest"

# Rule ids consumed verbatim by reporters
RULE_MISSING_CACHE_SEGMENT: str = "missing-cache-segment"
RULE_RAW_TRANSPORT_CONSTRUCTION: str = "raw-transport-construction"

# tree-sitter (TSX grammar) node kinds
KIND_PROGRAM: str = "program"
KIND_CALL_EXPRESSION: str = "call_expression"
KIND_NEW_EXPRESSION: str = "new_expression"
KIND_MEMBER_EXPRESSION: str = "member_expression"
KIND_IDENTIFIER: str = "identifier"
KIND_PROPERTY_IDENTIFIER: str = "property_identifier"
KIND_ARGUMENTS: str = "arguments"
KIND_STRING: str = "string"
KIND_TEMPLATE_STRING: str = "template_string"
KIND_TEMPLATE_SUBSTITUTION: str = "template_substitution"
KIND_PARENTHESIZED_EXPRESSION: str = "parenthesized_expression"
KIND_COMMENT: str = "comment"

# Walker: fields holding position metadata, never descended into
POSITION_FIELDS: frozenset[str] = frozenset({"loc", "start", "end"})

# File discovery defaults
DEFAULT_EXTENSIONS: tuple[str, ...] = (".js",)
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = ("node_modules",)
DEFAULT_TARGET: str = "src"

# Review context (LLM hand-over) file
DEFAULT_CONTEXT_FILE: str = ".copilot-review-context.md"
DEFAULT_CONTEXT_MAX_LINES: int = 1000

# Finding sources
SOURCE_CACHE_RULE: str = "cache-rule"
SOURCE_ESLINT: str = "eslint"

# External ESLint pass
DEFAULT_ESLINT_COMMAND: tuple[str, ...] = ("npx", "--no-install", "eslint")
ESLINT_FALLBACK_RULE_ID: str = "CodeQuality"
