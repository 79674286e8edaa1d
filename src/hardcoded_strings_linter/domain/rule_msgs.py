"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Mapping
from typing import cast

from hardcoded_strings_linter.domain.constants import RULE_PREFIX
from hardcoded_strings_linter.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """Builds Pylint msgs dict from a registry mapping."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> RuleRegistryEntry | None:
        """Return registry entry by msgid, pylint symbol or rule id."""
        entry = registry.get(f"{RULE_PREFIX}{rule_code}")
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in registry.items():
            if not rid.startswith(RULE_PREFIX) or not isinstance(e, dict):
                continue
            if rule_code in (e.get("symbol"), e.get("rule_id")):
                return cast(RuleRegistryEntry, dict(e))
        return None

    @staticmethod
    def build_msgs_for_codes(
        registry: Mapping[str, RuleRegistryEntry], codes: list[str]
    ) -> dict[str, tuple[str, str, str]]:
        """Build Pylint msgs dict from a registry mapping for given msgids.

        Registry keys are e.g. 'hslint.W9701'; values are RuleRegistryEntry dicts.
        Returns { msgid: (message_template, symbol, description) } for checker.msgs.
        """
        result: dict[str, tuple[str, str, str]] = {}
        for code in codes:
            entry = RuleMsgBuilder.get_entry(registry, code)
            if entry and entry.get("message_template"):
                msg = entry["message_template"]
                symbol = entry.get("symbol") or code
                desc = (
                    entry.get("correction_message")
                    or entry.get("short_description")
                    or code
                )
                result[code] = (str(msg), str(symbol), str(desc))
        return result

    @staticmethod
    def message_for(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str, default: str
    ) -> str:
        entry = RuleMsgBuilder.get_entry(registry, rule_code)
        if entry and entry.get("message_template"):
            return str(entry["message_template"])
        return default
