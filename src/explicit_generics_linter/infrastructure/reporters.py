"""Terminal reporter implementation - lives in infrastructure."""

import json
import sys
from typing import TextIO

from explicit_generics_linter.domain.protocols import ViolationReporterProtocol
from explicit_generics_linter.domain.rules import Violation


class TerminalViolationReporter(ViolationReporterProtocol):
    """Prints violations as ``path:line:col: CODE (symbol) message`` lines or a JSON array."""

    FORMATS: tuple[str, ...] = ("text", "json")

    def __init__(self, output: TextIO | None = None, output_format: str = "text") -> None:
        self._output = output
        self.output_format = output_format

    @property
    def out(self) -> TextIO:
        return self._output or sys.stdout

    def with_format(self, output_format: str) -> "TerminalViolationReporter":
        return TerminalViolationReporter(self._output, output_format)

    def report(self, violations: list[Violation]) -> None:
        if self.output_format == "json":
            print(json.dumps([v.to_dict() for v in violations], indent=2), file=self.out)
            return
        for v in violations:
            print(f"{v.location}: {v.code} ({v.symbol}) {v.message}", file=self.out)
        if violations:
            print(f"\nFound {len(violations)} violation(s).", file=self.out)
