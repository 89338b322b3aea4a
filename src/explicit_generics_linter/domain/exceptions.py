"""Package exceptions. The matching core never raises; these guard its inputs."""


class ExplicitGenericsError(Exception):
    """Base class for errors raised by explicit_generics_linter."""


class InvalidConfigurationError(ExplicitGenericsError, ValueError):
    """Raised when [tool.explicit-generics] does not match the accepted shapes."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class UnsupportedNodeError(ExplicitGenericsError):
    """Raised when an input document is not a syntax tree the gateways understand."""
