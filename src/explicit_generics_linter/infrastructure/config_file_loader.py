"""Load [tool.explicit-generics] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path

from explicit_generics_linter.domain.constants import CONFIG_SECTION
from explicit_generics_linter.domain.exceptions import InvalidConfigurationError

logger = logging.getLogger("explicit_generics_linter")


class ConfigFileLoader:
    """
    Loads config from pyproject.toml.
    """

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Load [tool.explicit-generics] from the nearest pyproject.toml declaring it.

        Returns an empty dict when no file declares the section. A pyproject.toml
        that is not valid TOML raises InvalidConfigurationError.
        """
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except OSError:
                continue
            except tomllib.TOMLDecodeError as exc:
                raise InvalidConfigurationError(
                    f"{config_file}: not valid TOML ({exc})", key=CONFIG_SECTION) from exc
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(CONFIG_SECTION, {}) or {}
            if config_dict:
                logger.debug("Loaded [tool.%s] from %s", CONFIG_SECTION, config_file)
                return config_dict
        return {}
