"""Audit ESTree JSON dumps with the explicit generics rule."""

from collections.abc import Mapping

from explicit_generics_linter.domain.config import ConfigurationLoader
from explicit_generics_linter.domain.entities import AuditResult, FileAudit
from explicit_generics_linter.domain.protocols import AdvisoryProtocol, EstreeProtocol
from explicit_generics_linter.domain.registry_types import RuleRegistryEntry
from explicit_generics_linter.domain.rules import Violation
from explicit_generics_linter.domain.rules.explicit_generics import ExplicitGenericsRule


class AuditEstreeUseCase:
    """Runs the rule over every call site of each ESTree document, in order."""

    def __init__(
        self,
        estree_gateway: EstreeProtocol,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
        advisory: AdvisoryProtocol,
    ) -> None:
        self._estree_gateway = estree_gateway
        self._config_loader = config_loader
        self._advisory = advisory
        self._rule = ExplicitGenericsRule(config_loader.rule_config, registry)

    def execute(self, file_paths: list[str]) -> AuditResult:
        if not self._config_loader.has_names:
            self._advisory.warn_once()
            return AuditResult(files=[], configured=False)
        return AuditResult(files=[self.audit_file(path) for path in file_paths])

    def audit_file(self, file_path: str) -> FileAudit:
        tree = self._estree_gateway.load_file(file_path)
        violations: list[Violation] = []
        call_sites = 0
        for call_site in self._estree_gateway.iter_call_sites(tree, file_path):
            call_sites += 1
            violations.extend(self._rule.check(call_site))
        return FileAudit(file_path=file_path, violations=violations, call_sites=call_sites)
