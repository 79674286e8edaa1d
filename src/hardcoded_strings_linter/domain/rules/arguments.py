"""Resolve whether a literal is a direct argument of a constructor call."""

from typing import TYPE_CHECKING

import astroid

from hardcoded_strings_linter.domain.entities import ArgumentContext

if TYPE_CHECKING:
    from hardcoded_strings_linter.domain.protocols import AstroidProtocol

_FUNCTION_BOUNDARIES = (astroid.nodes.Lambda, astroid.nodes.FunctionDef)


class ArgumentContextResolver:
    """
    Locates the constructor call a literal is passed to directly.

    A literal inside a callback (lambda or nested def) handed to the
    constructor belongs to that callback, not to the constructor, so e.g.
    ``Button(on_click=lambda e: log("Clicked"))`` never binds "Clicked" to
    ``Button``.
    """

    def __init__(self, ast_gateway: "AstroidProtocol") -> None:
        self._ast_gateway = ast_gateway

    @staticmethod
    def enclosing_call(node: astroid.nodes.NodeNG) -> astroid.nodes.Call | None:
        """Nearest Call whose argument list (not callee) contains node."""
        child = node
        parent = node.parent
        while parent is not None:
            if isinstance(parent, astroid.nodes.Call) and child is not parent.func:
                return parent
            child, parent = parent, parent.parent
        return None

    @staticmethod
    def crosses_function_boundary(
        node: astroid.nodes.NodeNG, call: astroid.nodes.Call
    ) -> bool:
        walker = node.parent
        while walker is not None and walker is not call:
            if isinstance(walker, _FUNCTION_BOUNDARIES):
                return True
            walker = walker.parent
        return False

    @staticmethod
    def argument_slot(
        node: astroid.nodes.NodeNG, call: astroid.nodes.Call
    ) -> tuple[int, str | None] | None:
        """Return (index, keyword) for the slot holding exactly this node."""
        for index, arg in enumerate(call.args or ()):
            if arg is node:
                return (index, None)
        for index, keyword in enumerate(call.keywords or ()):
            if keyword.value is node:
                return (index, keyword.arg)
        return None

    def direct_argument_context(
        self, node: astroid.nodes.NodeNG
    ) -> ArgumentContext | None:
        call = self.enclosing_call(node)
        if call is None:
            return None
        if self.crosses_function_boundary(node, call):
            return None

        constructor = self._ast_gateway.resolve_constructor(call)
        if constructor is None:
            return None

        slot = self.argument_slot(node, call)
        if slot is None:
            return None
        index, keyword = slot
        return ArgumentContext(constructor=constructor, index=index, keyword=keyword)
