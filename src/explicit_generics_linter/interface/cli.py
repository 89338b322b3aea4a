"""CLI entry points - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path

import typer

from explicit_generics_linter.domain.config import ConfigurationLoader
from explicit_generics_linter.domain.exceptions import (
    ExplicitGenericsError,
    InvalidConfigurationError,
)
from explicit_generics_linter.domain.protocols import (
    AdvisoryProtocol,
    EstreeProtocol,
    ViolationReporterProtocol,
)
from explicit_generics_linter.infrastructure.services.guidance_service import GuidanceService
from explicit_generics_linter.use_cases.audit_estree import AuditEstreeUseCase

EXIT_VIOLATIONS = 1
EXIT_USAGE = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    estree_gateway: EstreeProtocol
    guidance_service: GuidanceService
    reporter: ViolationReporterProtocol
    advisory: AdvisoryProtocol


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def parse_name_options(options: list[str]) -> list[str] | dict[str, object]:
        """Turn ``--name Foo --name Bar=2`` into the configuration shapes.

        All-plain names stay a list (each requires one generic); any ``NAME=COUNT``
        switches to a table where plain names count as 1.
        """
        if not any("=" in option for option in options):
            return list(options)
        table: dict[str, object] = {}
        for option in options:
            name, sep, count = option.partition("=")
            if not sep:
                table[name] = 1
                continue
            try:
                table[name] = int(count)
            except ValueError as exc:
                raise InvalidConfigurationError(
                    f"--name {option!r}: expected NAME=COUNT with an integer COUNT.",
                    key=name,
                ) from exc
        return table

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="explicit-generics",
            help="Require explicit generics on configured calls in ESTree JSON dumps.",
            add_completion=False,
        )

        @app.command()
        def check(
            files: list[Path] = typer.Argument(..., help="ESTree JSON files to audit"),  # noqa: B008
            name: list[str] = typer.Option(  # noqa: B008
                None, "--name", "-n",
                help="Callable to check, NAME or NAME=COUNT. Replaces [tool.explicit-generics] names."),
            output_format: str = typer.Option(
                "text", "--format", help="Output format: text or json"),
        ) -> None:
            """Report call sites of configured callables that omit explicit generics."""
            if output_format not in ("text", "json"):
                typer.echo(f"explicit-generics: unknown format {output_format!r}", err=True)
                raise typer.Exit(code=EXIT_USAGE)
            try:
                config_loader = deps.config_loader
                if name:
                    config_loader = config_loader.with_names(
                        CLIAppFactory.parse_name_options(name))
                use_case = AuditEstreeUseCase(
                    estree_gateway=deps.estree_gateway,
                    config_loader=config_loader,
                    registry=deps.guidance_service.get_registry(),
                    advisory=deps.advisory,
                )
                result = use_case.execute([str(f) for f in files])
            except (ExplicitGenericsError, OSError) as exc:
                typer.echo(f"explicit-generics: {exc}", err=True)
                raise typer.Exit(code=EXIT_USAGE) from exc

            if not result.configured:
                typer.echo("explicit-generics: no callable names configured, nothing checked.", err=True)
                return
            deps.reporter.with_format(output_format).report(result.violations)
            if result.has_violations:
                raise typer.Exit(code=EXIT_VIOLATIONS)

        @app.command()
        def rules() -> None:
            """List the rule codes with their fix instructions."""
            for code, symbol, display_name in deps.guidance_service.iter_rules():
                typer.echo(f"{code} ({symbol}): {display_name}")
                typer.echo(f"    {deps.guidance_service.get_manual_instructions(code)}")

        return app
