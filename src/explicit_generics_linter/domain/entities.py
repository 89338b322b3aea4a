"""Domain entities for audit results."""

from dataclasses import dataclass, field

from explicit_generics_linter.domain.rules import Violation


@dataclass(frozen=True)
class FileAudit:
    """Violations found in one file."""

    file_path: str
    violations: list[Violation] = field(default_factory=list)
    call_sites: int = 0


@dataclass(frozen=True)
class AuditResult:
    """Aggregate result of auditing a set of files."""

    files: list[FileAudit] = field(default_factory=list)
    configured: bool = True

    @property
    def violations(self) -> list[Violation]:
        return [v for f in self.files for v in f.violations]

    @property
    def has_violations(self) -> bool:
        return any(f.violations for f in self.files)
