"""Read-only view of a call site, independent of the host syntax tree."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from explicit_generics_linter.domain.constants import (
    NODE_TYPE_CONSTRUCTOR,
    NODE_TYPE_FUNCTION,
    NODE_TYPE_TAGGED_TEMPLATE,
)


class CallSiteKind(Enum):
    """Kinds of invocation the rule inspects, valued by their diagnostic label."""

    FUNCTION_CALL = NODE_TYPE_FUNCTION
    CONSTRUCTOR_CALL = NODE_TYPE_CONSTRUCTOR
    TAGGED_TEMPLATE = NODE_TYPE_TAGGED_TEMPLATE

    @property
    def label(self) -> str:
        return self.value


class CalleeShape(Enum):
    IDENTIFIER = "identifier"
    MEMBER = "member"
    OTHER = "other"


@dataclass(frozen=True)
class Callee:
    """
    Shape of the invoked expression.

    IDENTIFIER carries ``name``; MEMBER carries ``object_name`` and
    ``property_name`` (empty string when that piece is not a simple identifier).
    OTHER covers computed access, calls used as callees and anything else.
    """

    shape: CalleeShape
    name: str = ""
    object_name: str = ""
    property_name: str = ""

    @classmethod
    def identifier(cls, name: str) -> "Callee":
        return cls(CalleeShape.IDENTIFIER, name=name)

    @classmethod
    def member(cls, object_name: str | None, property_name: str | None) -> "Callee":
        return cls(
            CalleeShape.MEMBER,
            object_name=object_name or "",
            property_name=property_name or "",
        )

    @classmethod
    def other(cls) -> "Callee":
        return cls(CalleeShape.OTHER)


class CallSiteView(Protocol):
    """Facets of a host call node the rule reads. Implementations never mutate the node."""

    @property
    def kind(self) -> CallSiteKind:
        ...

    @property
    def callee(self) -> Callee:
        ...

    @property
    def generic_sequences(self) -> tuple[int | None, ...]:
        """Lengths of the explicit generic lists in preference order; None when absent."""
        ...

    @property
    def anchor(self) -> object:
        """Host node diagnostics attach to: the callee or tag expression."""
        ...

    @property
    def location(self) -> str:
        """path:line:col of the anchor."""
        ...

    def render_replacement(self, name: str, generics: str) -> str:
        """Suggested call text in the host language, e.g. ``name<generics>(...)``."""
        ...
