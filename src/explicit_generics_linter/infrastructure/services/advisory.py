"""One-time advisory for runs where no callable names were configured."""

import logging

from explicit_generics_linter.domain.constants import CONFIG_SECTION, PACKAGE_URL
from explicit_generics_linter.domain.protocols import AdvisoryProtocol

logger = logging.getLogger("explicit_generics_linter")


class AdvisoryNotice(AdvisoryProtocol):
    """
    Holds the "already warned" flag for one process.

    The composition root owns a single instance for the process lifetime;
    tests create a fresh one per case. The flag is never reset.
    """

    LINES: tuple[str, ...] = (
        "explicit-generics was not passed any function or constructor names to check",
        "Pass a list of function and constructor names or a table of names to expected "
        f"counts under [tool.{CONFIG_SECTION}] names in your pyproject.toml",
        "For more details visit: " + PACKAGE_URL,
    )

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger
        self._has_warned = False

    @property
    def has_warned(self) -> bool:
        return self._has_warned

    def warn_once(self) -> bool:
        if self._has_warned:
            return False
        for line in self.LINES:
            self._logger.warning(line)
        self._has_warned = True
        return True
