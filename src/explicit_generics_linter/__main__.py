"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging

import typer

from explicit_generics_linter.domain.exceptions import ExplicitGenericsError
from explicit_generics_linter.infrastructure.di.container import ExplicitGenericsContainer
from explicit_generics_linter.interface.cli import EXIT_USAGE, CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    logging.basicConfig(format="%(name)s: %(message)s")
    try:
        container = ExplicitGenericsContainer.get_instance()
    except ExplicitGenericsError as exc:
        typer.echo(f"explicit-generics: {exc}", err=True)
        raise SystemExit(EXIT_USAGE) from exc
    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        estree_gateway=container.get_estree_gateway(),
        guidance_service=container.get_guidance_service(),
        reporter=container.get_reporter(),
        advisory=container.get_advisory(),
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
