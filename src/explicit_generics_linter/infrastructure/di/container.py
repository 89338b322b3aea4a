from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, cast

from explicit_generics_linter.domain.config import ConfigurationLoader
from explicit_generics_linter.infrastructure.config_file_loader import ConfigFileLoader
from explicit_generics_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from explicit_generics_linter.infrastructure.gateways.estree_gateway import EstreeGateway
from explicit_generics_linter.infrastructure.services.advisory import AdvisoryNotice
from explicit_generics_linter.infrastructure.services.guidance_service import GuidanceService
from explicit_generics_linter.infrastructure.reporters import TerminalViolationReporter

if TYPE_CHECKING:
    from explicit_generics_linter.domain.protocols import (
        AdvisoryProtocol,
        AstroidProtocol,
        EstreeProtocol,
        ViolationReporterProtocol,
    )


class ExplicitGenericsContainer:
    """Dependency Injection Container for the explicit generics linter."""

    _instance: Optional["ExplicitGenericsContainer"] = None
    # Survives reset(): the advisory is printed at most once per process.
    _process_advisory: AdvisoryNotice | None = None

    def __init__(self, config_start: Path | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_start)

    def _register_defaults(self, config_start: Path | None) -> None:
        """Register default implementations for protocols."""
        config_dict = ConfigFileLoader.load_config_from_fs(config_start)
        self.register_singleton(
            "ConfigurationLoader", ConfigurationLoader(config_dict))
        self.register_singleton("AstroidGateway", AstroidGateway())
        self.register_singleton("EstreeGateway", EstreeGateway())
        self.register_singleton("GuidanceService", GuidanceService())
        self.register_singleton("ViolationReporter", TerminalViolationReporter())
        self.register_singleton("AdvisoryNotice", ExplicitGenericsContainer.process_advisory())

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        if key in self._singletons:
            return self._singletons[key]
        raise KeyError(f"Service {key} not registered")

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_astroid_gateway(self) -> "AstroidProtocol":
        return cast("AstroidProtocol", self.get("AstroidGateway"))

    def get_estree_gateway(self) -> "EstreeProtocol":
        return cast("EstreeProtocol", self.get("EstreeGateway"))

    def get_guidance_service(self) -> GuidanceService:
        return cast(GuidanceService, self.get("GuidanceService"))

    def get_reporter(self) -> "ViolationReporterProtocol":
        return cast("ViolationReporterProtocol", self.get("ViolationReporter"))

    def get_advisory(self) -> "AdvisoryProtocol":
        return cast("AdvisoryProtocol", self.get("AdvisoryNotice"))

    @classmethod
    def process_advisory(cls) -> AdvisoryNotice:
        """The process-wide advisory flag, created on first use."""
        if cls._process_advisory is None:
            cls._process_advisory = AdvisoryNotice()
        return cls._process_advisory

    @classmethod
    def get_instance(cls) -> "ExplicitGenericsContainer":
        if cls._instance is None:
            cls._instance = ExplicitGenericsContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached container (tests). The process advisory is kept."""
        cls._instance = None
