"""Unit tests for AuditEstreeUseCase."""

import unittest
from pathlib import Path
from unittest.mock import MagicMock

from explicit_generics_linter.domain.config import ConfigurationLoader
from explicit_generics_linter.infrastructure.gateways.estree_gateway import EstreeGateway
from explicit_generics_linter.infrastructure.services.guidance_service import GuidanceService
from explicit_generics_linter.use_cases.audit_estree import AuditEstreeUseCase

FIXTURE = str(Path(__file__).resolve().parents[2] / "fixtures" / "sample_estree.json")


class TestAuditEstreeUseCase(unittest.TestCase):
    """Auditing the sample ESTree document."""

    def setUp(self) -> None:
        self.advisory = MagicMock()

    def _use_case(self, names: object) -> AuditEstreeUseCase:
        config = {"names": names} if names is not None else {}
        return AuditEstreeUseCase(
            estree_gateway=EstreeGateway(),
            config_loader=ConfigurationLoader(config),
            registry=GuidanceService().get_registry(),
            advisory=self.advisory,
        )

    def test_reports_each_missing_generic_in_order(self) -> None:
        result = self._use_case(
            {"createStore": 1, "useQuery": 1, "Map": 2, "*.get": 3, "sql": 1, "div": 1, "name": 1}
        ).execute([FIXTURE])
        self.assertTrue(result.has_violations)
        self.assertEqual(
            [(v.code, v.data["node_type"], v.data["name"]) for v in result.violations],
            [
                ("E9301", "Function", "createStore"),
                ("E9301", "Constructor", "Map"),
                ("E9302", "Function", "api.get"),
                ("E9301", "Tagged template", "sql"),
            ],
        )
        self.assertEqual(result.files[0].call_sites, 7)

    def test_messages_and_locations(self) -> None:
        result = self._use_case(["createStore"]).execute([FIXTURE])
        v = result.violations[0]
        self.assertEqual(v.location, f"{FIXTURE}:1:14")
        self.assertEqual(
            v.message,
            "Function 'createStore' must be called with explicit generics. "
            "Replace with 'createStore<SomeType>(...)' to fix this.",
        )

    def test_satisfied_configuration_is_clean(self) -> None:
        result = self._use_case({"useQuery": 1, "api.get": 2}).execute([FIXTURE])
        self.assertFalse(result.has_violations)
        self.advisory.warn_once.assert_not_called()

    def test_unconfigured_run_only_advises(self) -> None:
        result = self._use_case(None).execute([FIXTURE])
        self.assertFalse(result.configured)
        self.assertEqual(result.files, [])
        self.advisory.warn_once.assert_called_once_with()
