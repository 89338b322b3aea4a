"""Adapts astroid Call nodes to the CallSiteView the rule reads."""

from dataclasses import dataclass
from functools import cached_property

import astroid
from pylint.checkers.utils import safe_infer

from explicit_generics_linter.domain.call_site import Callee, CallSiteKind
from explicit_generics_linter.domain.protocols import AstroidProtocol


@dataclass(frozen=True)
class AstroidCallSite:
    """
    Read-only view of ``Box[int](...)``-style calls.

    Python spells explicit generics as a subscript on the callee, so the
    subscript's value is the callee identity and its elements are the generics.
    """

    node: astroid.nodes.Call
    target: astroid.nodes.NodeNG
    callee: Callee
    generic_sequences: tuple[int | None, ...]

    @cached_property
    def kind(self) -> CallSiteKind:
        """Constructor when the callee infers to a class, else a function call."""
        if isinstance(safe_infer(self.target), astroid.nodes.ClassDef):
            return CallSiteKind.CONSTRUCTOR_CALL
        return CallSiteKind.FUNCTION_CALL

    @property
    def anchor(self) -> astroid.nodes.NodeNG:
        return self.node.func

    @property
    def location(self) -> str:
        """Compute path:lineno:col_offset from the anchor node."""
        root = self.anchor.root()
        path = getattr(root, "file", "") or ""
        lineno = getattr(self.anchor, "lineno", 0)
        col_offset = getattr(self.anchor, "col_offset", 0)
        return f"{path}:{lineno}:{col_offset}"

    def render_replacement(self, name: str, generics: str) -> str:
        return f"{name}[{generics}](...)"


class AstroidGateway(AstroidProtocol):
    """Builds call site views from astroid trees."""

    def to_call_site(self, node: astroid.nodes.Call) -> AstroidCallSite:
        func = node.func
        target = func
        generics: int | None = None
        if isinstance(func, astroid.nodes.Subscript) and isinstance(
            func.value, (astroid.nodes.Name, astroid.nodes.Attribute)
        ):
            target = func.value
            generics = AstroidGateway.count_subscript_elements(func.slice)
        return AstroidCallSite(
            node=node,
            target=target,
            callee=AstroidGateway.describe_callee(target),
            generic_sequences=(generics,),
        )

    @staticmethod
    def describe_callee(target: astroid.nodes.NodeNG) -> Callee:
        if isinstance(target, astroid.nodes.Name):
            return Callee.identifier(target.name)
        if isinstance(target, astroid.nodes.Attribute):
            owner = target.expr.name if isinstance(target.expr, astroid.nodes.Name) else ""
            return Callee.member(owner, target.attrname)
        return Callee.other()

    @staticmethod
    def count_subscript_elements(slice_node: astroid.nodes.NodeNG) -> int:
        """``Box[int, str]`` has two generics, ``Box[int]`` one."""
        if isinstance(slice_node, astroid.nodes.Tuple):
            return len(slice_node.elts)
        return 1
