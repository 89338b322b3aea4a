"""Domain models for rules and violations."""

from dataclasses import dataclass, field

from explicit_generics_linter.domain.call_site import CallSiteView

__all__ = [
    "Violation",
]


@dataclass(frozen=True)
class Violation:
    """A rule violation with code, message, location and the data used to render it."""

    code: str
    symbol: str
    message: str
    location: str
    node: object
    message_args: tuple[object, ...] = ()
    """Positional args for Pylint add_message, matching the registry template."""
    data: dict[str, object] = field(default_factory=dict)
    """Named template data: node_type, name, generics, expected_count, actual_count."""
    suggestion: str = ""
    """Suggested replacement text for the call site."""

    @classmethod
    def from_call_site(
        cls,
        *,
        code: str,
        symbol: str,
        message: str,
        call_site: CallSiteView,
        message_args: tuple[object, ...] = (),
        data: dict[str, object] | None = None,
        suggestion: str = "",
    ) -> "Violation":
        """Build a Violation anchored on the call site's callee expression."""
        return cls(
            code=code,
            symbol=symbol,
            message=message,
            location=call_site.location,
            node=call_site.anchor,
            message_args=message_args,
            data=dict(data or {}),
            suggestion=suggestion,
        )

    def to_dict(self) -> dict[str, object]:
        """JSON-friendly representation (the host node is left out)."""
        return {
            "code": self.code,
            "symbol": self.symbol,
            "message": self.message,
            "location": self.location,
            "suggestion": self.suggestion,
            **self.data,
        }
