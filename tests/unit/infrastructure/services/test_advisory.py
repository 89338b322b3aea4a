"""Unit tests for AdvisoryNotice."""

import logging

from explicit_generics_linter.infrastructure.di.container import ExplicitGenericsContainer
from explicit_generics_linter.infrastructure.services.advisory import AdvisoryNotice


def test_warns_three_lines_once(caplog) -> None:
    advisory = AdvisoryNotice()
    with caplog.at_level(logging.WARNING, logger="explicit_generics_linter"):
        assert advisory.warn_once() is True
        for _ in range(5):
            assert advisory.warn_once() is False
    lines = [r.getMessage() for r in caplog.records]
    assert len(lines) == 3
    assert "was not passed any function or constructor names" in lines[0]
    assert "[tool.explicit-generics]" in lines[1]
    assert lines[2].startswith("For more details visit: https://")


def test_fresh_instances_are_independent() -> None:
    first = AdvisoryNotice(logging.getLogger("test.advisory"))
    first.warn_once()
    second = AdvisoryNotice(logging.getLogger("test.advisory"))
    assert first.has_warned
    assert not second.has_warned


def test_process_advisory_survives_container_reset() -> None:
    before = ExplicitGenericsContainer.process_advisory()
    ExplicitGenericsContainer.reset()
    assert ExplicitGenericsContainer.process_advisory() is before
