"""Predicates over string-literal nodes shared by both rules."""

import astroid


class StringLiteralFilter:
    """Structural checks that do not need type information."""

    @staticmethod
    def is_string_literal(node: astroid.nodes.NodeNG) -> bool:
        return isinstance(node, astroid.nodes.Const) and isinstance(node.value, str)

    @staticmethod
    def in_directive(node: astroid.nodes.NodeNG) -> bool:
        """True inside import statements or the module's ``__all__`` export list."""
        for ancestor in node.node_ancestors():
            if isinstance(ancestor, (astroid.nodes.Import, astroid.nodes.ImportFrom)):
                return True
            if isinstance(ancestor, (astroid.nodes.Assign, astroid.nodes.AugAssign, astroid.nodes.AnnAssign)):
                targets = getattr(ancestor, "targets", None) or [ancestor.target]
                return any(
                    isinstance(t, astroid.nodes.AssignName) and t.name == "__all__"
                    for t in targets
                )
        return False

    @staticmethod
    def is_map_key(node: astroid.nodes.NodeNG) -> bool:
        """True for ``{"key": value}`` keys and ``mapping["key"]`` subscripts."""
        parent = node.parent
        if isinstance(parent, astroid.nodes.Subscript):
            return parent.slice is node
        if isinstance(parent, astroid.nodes.Dict):
            return any(key is node for key, _ in parent.items)
        return False
