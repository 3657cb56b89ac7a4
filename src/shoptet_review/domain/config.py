"""Configuration for review settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from shoptet_review.domain.constants import (
    DEFAULT_CONTEXT_FILE,
    DEFAULT_CONTEXT_MAX_LINES,
    DEFAULT_ESLINT_COMMAND,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_EXTENSIONS,
)
from shoptet_review.domain.options import AnalysisOptions

logger = logging.getLogger(__name__)

KNOWN_KEYS: frozenset[str] = frozenset(
    {
        "domains",
        "required_segment",
        "ajax_helpers",
        "ajax_methods",
        "extensions",
        "exclude_dirs",
        "eslint",
        "eslint_command",
        "context_file",
        "context_max_lines",
        "jobs",
    }
)


class ConfigurationLoader:
    """
    Immutable configuration for review settings.

    Created by Infrastructure from the [tool.shoptet-review] table. Domain does
    not read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config = config_dict
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about keys this tool does not understand."""
        unknown = sorted(set(config) - KNOWN_KEYS)
        if unknown:
            logger.warning(
                "Configuration Warning: unknown [tool.shoptet-review] keys ignored: %s",
                ", ".join(unknown),
            )

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    def _get_tuple(self, key: str, defaults: tuple[str, ...]) -> tuple[str, ...]:
        """Helper to safely get a tuple of strings from config."""
        raw = self._config.get(key)
        if not isinstance(raw, list):
            return defaults
        items = tuple(item for item in raw if isinstance(item, str))
        return items or defaults

    def analysis_options(self) -> AnalysisOptions:
        """Options for the core analysis. Raises InvalidOptions on malformed values."""
        return AnalysisOptions.create(
            domains=self._config.get("domains"),
            required_segment=self._config.get("required_segment"),
            ajax_helpers=self._config.get("ajax_helpers"),
            ajax_methods=self._config.get("ajax_methods"),
        )

    @property
    def extensions(self) -> tuple[str, ...]:
        """File extensions reviewed when scanning a directory."""
        exts = self._get_tuple("extensions", DEFAULT_EXTENSIONS)
        return tuple(e if e.startswith(".") else f".{e}" for e in exts)

    @property
    def exclude_dirs(self) -> tuple[str, ...]:
        """Directory names skipped during discovery."""
        return self._get_tuple("exclude_dirs", DEFAULT_EXCLUDE_DIRS)

    @property
    def eslint_enabled(self) -> bool:
        """Run the ESLint pass (default: False)."""
        return bool(self._config.get("eslint", False))

    @property
    def eslint_command(self) -> tuple[str, ...]:
        """Command prefix used to invoke ESLint."""
        return self._get_tuple("eslint_command", DEFAULT_ESLINT_COMMAND)

    @property
    def context_file(self) -> str:
        raw = self._config.get("context_file")
        return raw if isinstance(raw, str) and raw else DEFAULT_CONTEXT_FILE

    @property
    def context_max_lines(self) -> int:
        raw = self._config.get("context_max_lines")
        if isinstance(raw, int) and not isinstance(raw, bool) and raw > 0:
            return raw
        return DEFAULT_CONTEXT_MAX_LINES

    @property
    def jobs(self) -> int:
        """Worker threads for per-file analysis (default: 1)."""
        raw = self._config.get("jobs")
        if isinstance(raw, int) and not isinstance(raw, bool) and raw > 0:
            return raw
        return 1
