"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.
"""

from pylint.lint import PyLinter

from explicit_generics_linter.infrastructure.di.container import ExplicitGenericsContainer
from explicit_generics_linter.use_cases.checks.explicit_generics import ExplicitGenericsChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = ExplicitGenericsContainer.get_instance()
    registry = container.get_guidance_service().get_registry()

    linter.register_checker(ExplicitGenericsChecker(
        linter,
        ast_gateway=container.get_astroid_gateway(),
        config_loader=container.get_config_loader(),
        registry=registry,
        advisory=container.get_advisory(),
    ))
