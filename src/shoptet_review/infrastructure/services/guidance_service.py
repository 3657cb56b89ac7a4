"""GuidanceService: loads the rule registry and provides titles and manual_instructions."""

from pathlib import Path
from typing import cast

import yaml

from shoptet_review.domain.protocols import GuidanceServiceProtocol
from shoptet_review.domain.registry_types import RuleRegistryEntry


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and provides get_title / get_manual_instructions."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if self._path.exists():
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
                self._registry = (
                    cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}
                )
        else:
            self._registry = {}

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry."""
        return dict(self._registry)

    def get_entry(self, rule_id: str) -> RuleRegistryEntry | None:
        """Return the registry entry for a rule id or its symbol."""
        entry = self._registry.get(rule_id)
        if entry:
            return cast(RuleRegistryEntry, dict(entry))
        for e in self._registry.values():
            if e.get("symbol") == rule_id:
                return cast(RuleRegistryEntry, dict(e))
        return None

    def get_title(self, rule_id: str) -> str:
        """Annotation title: registry display_name, else the rule id itself."""
        entry = self.get_entry(rule_id)
        if entry and entry.get("display_name"):
            return entry["display_name"]
        return rule_id

    def get_manual_instructions(self, rule_id: str) -> str:
        """Return manual_instructions for the rule, or empty string."""
        entry = self.get_entry(rule_id)
        if not entry:
            return ""
        return str(entry.get("manual_instructions", "")).strip()
