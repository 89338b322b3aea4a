"""Explicit Generics Rule (E9301, E9302)."""

from collections.abc import Mapping

from explicit_generics_linter.domain.call_site import CallSiteKind, CallSiteView, CalleeShape
from explicit_generics_linter.domain.config import RuleConfig
from explicit_generics_linter.domain.constants import (
    ALPHABET_SIZE,
    ASCII_A_OFFSET,
    MISSING_GENERICS_CODE,
    SINGLE_EXAMPLE_GENERIC,
    TOO_FEW_GENERICS_CODE,
    WILDCARD_OWNER,
)
from explicit_generics_linter.domain.registry_types import RuleRegistryEntry
from explicit_generics_linter.domain.rule_msgs import RuleMsgBuilder
from explicit_generics_linter.domain.rules import Violation


class GenericsFormatter:
    """Example generic parameter lists used in fix suggestions."""

    @staticmethod
    def letter_of_alphabet(index: int) -> str:
        return chr(ASCII_A_OFFSET + index % ALPHABET_SIZE)

    @staticmethod
    def example_generics(count: int) -> str:
        """'SomeType' for one generic, else 'TypeA, TypeB, ...' (letters wrap after Z)."""
        if count == 1:
            return SINGLE_EXAMPLE_GENERIC
        return ", ".join(
            "Type" + GenericsFormatter.letter_of_alphabet(index) for index in range(count)
        )


class CallSiteNameResolver:
    """Derives the names a call site may be configured under, most specific first."""

    @staticmethod
    def resolve_names(call_site: CallSiteView) -> list[str]:
        callee = call_site.callee
        if callee.shape is CalleeShape.IDENTIFIER:
            return [callee.name]
        # Tagged templates only match on a bare identifier tag.
        if call_site.kind is CallSiteKind.TAGGED_TEMPLATE:
            return []
        if callee.shape is CalleeShape.MEMBER:
            return [
                f"{callee.object_name}.{callee.property_name}",
                f"{WILDCARD_OWNER}.{callee.property_name}",
                callee.property_name,
            ]
        return []


class ExplicitGenericsRule:
    """
    Flags invocations of configured callables that omit explicit generics.

    A call site is judged against the first candidate name with a configured
    minimum. Fewer generics than the minimum is reported; more is accepted.
    """

    code: str = MISSING_GENERICS_CODE
    description: str = (
        "Explicit Generics: configured functions, constructors and tagged templates "
        "must be invoked with explicit type arguments."
    )

    def __init__(
        self,
        rule_config: RuleConfig,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.rule_config = rule_config
        self._registry = registry

    def check(self, call_site: CallSiteView) -> list[Violation]:
        """Resolve names for the call site and audit it."""
        names = CallSiteNameResolver.resolve_names(call_site)
        violation = self.audit(call_site, call_site.kind.label, names)
        return [violation] if violation else []

    def audit(
        self,
        call_site: CallSiteView,
        node_type: str,
        names: list[str],
    ) -> Violation | None:
        matching_name = self.rule_config.first_match(names)
        if matching_name is None:
            return None
        expected_count = self.rule_config[matching_name]
        if not expected_count:
            return None

        actual_count = ExplicitGenericsRule.count_generics(call_site)
        if actual_count >= expected_count:
            return None

        name = names[0]
        generics = GenericsFormatter.example_generics(expected_count)
        replacement = call_site.render_replacement(name, generics)
        data: dict[str, object] = {
            "node_type": node_type,
            "name": name,
            "generics": generics,
            "expected_count": expected_count,
            "actual_count": actual_count,
        }
        if actual_count == 0:
            code = MISSING_GENERICS_CODE
            args: tuple[object, ...] = (node_type, name, replacement)
        else:
            code = TOO_FEW_GENERICS_CODE
            args = (node_type, name, actual_count, expected_count, replacement)

        return Violation.from_call_site(
            code=code,
            symbol=RuleMsgBuilder.get_symbol(self._registry, code),
            message=RuleMsgBuilder.render(self._registry, code, args),
            call_site=call_site,
            message_args=args,
            data=data,
            suggestion=replacement,
        )

    @staticmethod
    def count_generics(call_site: CallSiteView) -> int:
        """Length of the first non-empty explicit generic list, else 0."""
        for length in call_site.generic_sequences:
            if length:
                return length
        return 0
