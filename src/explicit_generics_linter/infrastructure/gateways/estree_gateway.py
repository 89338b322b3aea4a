"""Adapts ESTree JSON documents (typescript-estree, Babel) to CallSiteViews."""

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from explicit_generics_linter.domain.call_site import Callee, CallSiteKind
from explicit_generics_linter.domain.exceptions import UnsupportedNodeError
from explicit_generics_linter.domain.protocols import EstreeProtocol

EstreeNode = dict[str, object]

_KIND_BY_TYPE: dict[str, CallSiteKind] = {
    "CallExpression": CallSiteKind.FUNCTION_CALL,
    "NewExpression": CallSiteKind.CONSTRUCTOR_CALL,
    "TaggedTemplateExpression": CallSiteKind.TAGGED_TEMPLATE,
}

# Keys that hold positional metadata or back-references rather than child nodes.
_SKIPPED_KEYS: frozenset[str] = frozenset({"loc", "range", "parent", "tokens", "comments"})

_MEMBER_TYPES: frozenset[str] = frozenset({"MemberExpression", "OptionalMemberExpression"})
_IDENTIFIER_TYPES: frozenset[str] = frozenset({"Identifier", "PrivateIdentifier"})


@dataclass(frozen=True)
class EstreeCallSite:
    """Read-only view of a CallExpression, NewExpression or TaggedTemplateExpression."""

    node: EstreeNode
    kind: CallSiteKind
    callee: Callee
    generic_sequences: tuple[int | None, ...]
    file_path: str = field(default="")

    @property
    def anchor(self) -> EstreeNode:
        key = "tag" if self.kind is CallSiteKind.TAGGED_TEMPLATE else "callee"
        anchor = self.node.get(key)
        return anchor if isinstance(anchor, dict) else self.node

    @property
    def location(self) -> str:
        loc = self.anchor.get("loc")
        start = loc.get("start", {}) if isinstance(loc, dict) else {}
        line = start.get("line", 0) if isinstance(start, dict) else 0
        column = start.get("column", 0) if isinstance(start, dict) else 0
        return f"{self.file_path}:{line}:{column}"

    def render_replacement(self, name: str, generics: str) -> str:
        return f"{name}<{generics}>(...)"


class EstreeGateway(EstreeProtocol):
    """Loads ESTree JSON dumps and yields the call sites inside them."""

    def load_file(self, file_path: str) -> EstreeNode:
        try:
            with open(Path(file_path), encoding="utf-8") as f:
                tree = json.load(f)
        except json.JSONDecodeError as exc:
            raise UnsupportedNodeError(f"{file_path}: not a JSON document ({exc.msg})") from exc
        except UnicodeDecodeError as exc:
            raise UnsupportedNodeError(f"{file_path}: not UTF-8 encoded ({exc.reason})") from exc
        if not isinstance(tree, dict) or "type" not in tree:
            raise UnsupportedNodeError(f"{file_path}: top level is not an ESTree node")
        return tree

    def iter_call_sites(
        self, tree: EstreeNode, file_path: str = ""
    ) -> Iterator[EstreeCallSite]:
        """Yield call sites in document order."""
        for node in EstreeGateway.walk(tree):
            kind = _KIND_BY_TYPE.get(str(node.get("type")))
            if kind is not None:
                yield self.to_call_site(node, kind, file_path)

    def to_call_site(
        self, node: EstreeNode, kind: CallSiteKind, file_path: str = ""
    ) -> EstreeCallSite:
        if kind is CallSiteKind.TAGGED_TEMPLATE:
            callee = EstreeGateway.describe_tag(node.get("tag"))
        else:
            callee = EstreeGateway.describe_callee(node.get("callee"))
        return EstreeCallSite(
            node=node,
            kind=kind,
            callee=callee,
            generic_sequences=(
                EstreeGateway.params_length(node.get("typeParameters")),
                EstreeGateway.params_length(node.get("typeArguments")),
            ),
            file_path=file_path,
        )

    @staticmethod
    def walk(node: object) -> Iterator[EstreeNode]:
        if isinstance(node, list):
            for item in node:
                yield from EstreeGateway.walk(item)
            return
        if not isinstance(node, dict):
            return
        if "type" in node:
            yield node
        for key, value in node.items():
            if key in _SKIPPED_KEYS:
                continue
            if isinstance(value, (dict, list)):
                yield from EstreeGateway.walk(value)

    @staticmethod
    def identifier_name(node: object) -> str | None:
        if isinstance(node, dict) and node.get("type") in _IDENTIFIER_TYPES:
            name = node.get("name")
            return name if isinstance(name, str) else None
        return None

    @staticmethod
    def describe_callee(node: object) -> Callee:
        name = EstreeGateway.identifier_name(node)
        if name:
            return Callee.identifier(name)
        if (
            isinstance(node, dict)
            and node.get("type") in _MEMBER_TYPES
            and not node.get("computed", False)
        ):
            return Callee.member(
                EstreeGateway.identifier_name(node.get("object")),
                EstreeGateway.identifier_name(node.get("property")),
            )
        return Callee.other()

    @staticmethod
    def describe_tag(node: object) -> Callee:
        name = EstreeGateway.identifier_name(node)
        return Callee.identifier(name) if name else Callee.other()

    @staticmethod
    def params_length(item: object) -> int | None:
        """Length of a generic list given either as a list or as an object with ``params``."""
        if isinstance(item, list):
            return len(item)
        if isinstance(item, dict) and isinstance(item.get("params"), list):
            return len(item["params"])
        return None
