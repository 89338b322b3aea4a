"""Explicit generics checks (E9301, E9302)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from explicit_generics_linter.domain.config import ConfigurationLoader
from explicit_generics_linter.domain.constants import CHECKER_CODES
from explicit_generics_linter.domain.protocols import AdvisoryProtocol, AstroidProtocol
from explicit_generics_linter.domain.registry_types import RuleRegistryEntry
from explicit_generics_linter.domain.rule_msgs import RuleMsgBuilder
from explicit_generics_linter.domain.rules.explicit_generics import ExplicitGenericsRule


class ExplicitGenericsChecker(BaseChecker):
    """E9301/E9302: configured callables need explicit generics. Thin: delegates to ExplicitGenericsRule."""

    name: str = "explicit-generics"
    CODES = CHECKER_CODES

    def __init__(
        self,
        linter: "PyLinter",
        ast_gateway: AstroidProtocol,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
        advisory: AdvisoryProtocol,
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self.config_loader = config_loader
        self._ast_gateway = ast_gateway
        self._advisory = advisory
        self._rule = ExplicitGenericsRule(
            rule_config=config_loader.rule_config,
            registry=registry,
        )

    def open(self) -> None:
        """Called once per run: without configured names, advise once and stay idle."""
        if not self.config_loader.has_names:
            self._advisory.warn_once()

    def visit_call(self, node: astroid.nodes.Call) -> None:
        """Delegate E9301/E9302 to domain rule."""
        if not self.config_loader.has_names:
            return
        for v in self._rule.check(self._ast_gateway.to_call_site(node)):
            self.add_message(
                v.code,
                node=v.node,
                args=v.message_args,
            )
