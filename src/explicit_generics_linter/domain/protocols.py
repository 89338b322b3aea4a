from typing import TYPE_CHECKING, Iterator, Protocol

from explicit_generics_linter.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    import astroid

    from explicit_generics_linter.domain.call_site import CallSiteView
    from explicit_generics_linter.domain.rules import Violation


class AstroidProtocol(Protocol):
    def to_call_site(self, node: "astroid.nodes.Call") -> "CallSiteView":
        ...


class EstreeProtocol(Protocol):
    def load_file(self, file_path: str) -> dict[str, object]:
        ...

    def iter_call_sites(
        self, tree: dict[str, object], file_path: str = ""
    ) -> Iterator["CallSiteView"]:
        ...


class GuidanceServiceProtocol(Protocol):
    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        ...

    def get_manual_instructions(self, rule_code: str) -> str:
        ...


class AdvisoryProtocol(Protocol):
    @property
    def has_warned(self) -> bool:
        ...

    def warn_once(self) -> bool:
        """Emit the missing-configuration advisory unless already emitted. True if emitted."""
        ...


class ViolationReporterProtocol(Protocol):
    def report(self, violations: list["Violation"]) -> None:
        ...

    def with_format(self, output_format: str) -> "ViolationReporterProtocol":
        ...
