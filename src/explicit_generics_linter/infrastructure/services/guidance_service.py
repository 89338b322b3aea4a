"""GuidanceService: loads the rule registry and provides message metadata and manual_instructions."""

from pathlib import Path
from typing import cast

import yaml

from explicit_generics_linter.domain.protocols import GuidanceServiceProtocol
from explicit_generics_linter.domain.registry_types import RuleRegistryEntry
from explicit_generics_linter.domain.rule_msgs import RuleMsgBuilder


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and provides get_manual_instructions / get_display_name."""

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
                    cast(dict[str, RuleRegistryEntry],
                         data) if isinstance(data, dict) else {}
                )
        else:
            self._registry = {}

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry for use by domain/use_cases."""
        return dict(self._registry)

    def get_display_name(self, rule_code: str) -> str:
        """Return display name for a rule, by code or symbol."""
        entry = RuleMsgBuilder.get_entry(self._registry, rule_code)
        if not entry:
            return rule_code.replace("-", " ").title()
        return str(
            entry.get("display_name")
            or entry.get("short_description")
            or rule_code.replace("-", " ").title()
        )

    def get_manual_instructions(self, rule_code: str) -> str:
        """Return manual fix instructions for the rule code or symbol."""
        entry = RuleMsgBuilder.get_entry(self._registry, rule_code)
        if entry and "manual_instructions" in entry:
            return str(entry["manual_instructions"])
        return "See project docs. Fix the violation at the reported location."

    def iter_rules(self) -> list[tuple[str, str, str]]:
        """Return (code, symbol, display_name) for every registry entry, sorted by code."""
        out: list[tuple[str, str, str]] = []
        for rule_id, entry in self._registry.items():
            code = rule_id.rsplit(".", 1)[-1]
            out.append((code, str(entry.get("symbol") or code), self.get_display_name(code)))
        return sorted(out)
