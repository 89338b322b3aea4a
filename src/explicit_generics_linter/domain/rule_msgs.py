"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Mapping
from typing import cast

from explicit_generics_linter.domain.constants import RULE_PREFIX
from explicit_generics_linter.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """Builds Pylint msgs dict and rendered messages from a registry mapping."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> RuleRegistryEntry | None:
        """Return registry entry for a rule by code or symbol."""
        rule_id = f"{RULE_PREFIX}{rule_code}"
        entry = registry.get(rule_id)
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in registry.items():
            if not rid.startswith(RULE_PREFIX):
                continue
            if isinstance(e, dict) and e.get("symbol") == rule_code:
                return cast(RuleRegistryEntry, dict(e))
        return None

    @staticmethod
    def build_msgs_for_codes(
        registry: Mapping[str, RuleRegistryEntry], codes: list[str]
    ) -> dict[str, tuple[str, str, str]]:
        """Build Pylint msgs dict from a registry mapping for given rule codes.

        Registry keys are e.g. 'explicit-generics.E9301'; values are RuleRegistryEntry dicts.
        Returns { code: (message_template, symbol, description) } for checker.msgs.
        """
        result: dict[str, tuple[str, str, str]] = {}
        for code in codes:
            entry = RuleMsgBuilder.get_entry(registry, code)
            if entry and entry.get("message_template"):
                msg = entry["message_template"]
                symbol = entry.get("symbol") or code
                desc = (
                    entry.get("display_name")
                    or entry.get("short_description")
                    or code
                )
                result[code] = (str(msg), str(symbol), str(desc))
        return result

    @staticmethod
    def get_symbol(registry: Mapping[str, RuleRegistryEntry], rule_code: str) -> str:
        """Return the symbolic name for a code, falling back to the code itself."""
        entry = RuleMsgBuilder.get_entry(registry, rule_code)
        if entry and entry.get("symbol"):
            return str(entry["symbol"])
        return rule_code

    @staticmethod
    def render(
        registry: Mapping[str, RuleRegistryEntry],
        rule_code: str,
        args: tuple[object, ...],
    ) -> str:
        """Substitute positional args into the registry template, as Pylint does."""
        entry = RuleMsgBuilder.get_entry(registry, rule_code)
        if not entry or not entry.get("message_template"):
            return " ".join(str(a) for a in args)
        return str(entry["message_template"]) % args
