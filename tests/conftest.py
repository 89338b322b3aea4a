"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so ``tests.*`` helpers import cleanly.
"""

import pytest

from explicit_generics_linter.domain.registry_types import RuleRegistryEntry
from explicit_generics_linter.infrastructure.di.container import ExplicitGenericsContainer
from explicit_generics_linter.infrastructure.services.advisory import AdvisoryNotice
from explicit_generics_linter.infrastructure.services.guidance_service import GuidanceService


@pytest.fixture
def registry() -> dict[str, RuleRegistryEntry]:
    """The packaged rule registry."""
    return GuidanceService().get_registry()


@pytest.fixture
def advisory() -> AdvisoryNotice:
    """A fresh "already warned" flag, independent of the process-wide one."""
    return AdvisoryNotice()


@pytest.fixture(autouse=True)
def _reset_container():
    yield
    ExplicitGenericsContainer.reset()
