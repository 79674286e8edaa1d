"""GuidanceService: loads the rule registry and provides messages and manual instructions."""

from pathlib import Path
from typing import cast

import yaml

from hardcoded_strings_linter.domain.protocols import GuidanceServiceProtocol
from hardcoded_strings_linter.domain.registry_types import RuleRegistryEntry
from hardcoded_strings_linter.domain.rule_msgs import RuleMsgBuilder


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and serves entries by msgid, symbol or rule id."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
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
        """Return a shallow copy of the loaded registry for use by domain/use_cases."""
        return dict(self._registry)

    def get_entry(self, rule_code: str) -> RuleRegistryEntry | None:
        return RuleMsgBuilder.get_entry(self._registry, rule_code)

    def get_fixable_codes(self) -> list[str]:
        """Return msgids, symbols and rule ids of fixable rules."""
        codes: list[str] = []
        for entry in self._registry.values():
            if not isinstance(entry, dict) or not entry.get("fixable"):
                continue
            codes.extend(
                str(entry[k]) for k in ("rule_id", "symbol") if entry.get(k)
            )
        return sorted(set(codes))

    def get_manual_instructions(self, rule_code: str) -> str:
        entry = self.get_entry(rule_code)
        if entry and "manual_instructions" in entry:
            return str(entry["manual_instructions"])
        return "Fix the finding at the reported location."
