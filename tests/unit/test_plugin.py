"""Tests for the Pylint plugin entry point and DI container."""

from pathlib import Path
from unittest.mock import MagicMock

from pylint.lint import PyLinter

import explicit_generics_linter
from explicit_generics_linter.infrastructure.di.container import ExplicitGenericsContainer
from explicit_generics_linter.use_cases.checks.explicit_generics import ExplicitGenericsChecker


def _chdir_with_config(tmp_path: Path, monkeypatch, body: str) -> None:
    (tmp_path / "pyproject.toml").write_text(body, encoding="utf-8")
    monkeypatch.chdir(tmp_path)


def test_register_adds_checker(tmp_path: Path, monkeypatch) -> None:
    _chdir_with_config(tmp_path, monkeypatch, '[tool.explicit-generics]\nnames = ["Box"]\n')
    linter = MagicMock()
    explicit_generics_linter.register(linter)
    checker = linter.register_checker.call_args[0][0]
    assert isinstance(checker, ExplicitGenericsChecker)
    assert checker.config_loader.rule_config["Box"] == 1


def test_register_with_real_linter_defines_messages(tmp_path: Path, monkeypatch) -> None:
    _chdir_with_config(tmp_path, monkeypatch, '[tool.explicit-generics]\nnames = { "Box" = 2 }\n')
    linter = PyLinter()
    explicit_generics_linter.register(linter)
    assert linter.msgs_store.get_message_definitions("missing-explicit-generics")[0].msgid == "E9301"
    assert linter.msgs_store.get_message_definitions("E9302")[0].symbol == "too-few-explicit-generics"


def test_container_wires_services(tmp_path: Path, monkeypatch) -> None:
    _chdir_with_config(tmp_path, monkeypatch, "[project]\nname = 'x'\n")
    container = ExplicitGenericsContainer.get_instance()
    assert container is ExplicitGenericsContainer.get_instance()
    assert not container.get_config_loader().has_names
    assert container.get_advisory() is ExplicitGenericsContainer.process_advisory()
