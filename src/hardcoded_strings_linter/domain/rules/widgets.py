"""Widget type detection by a bounded walk up the supertype chain."""

from itertools import islice
from typing import TYPE_CHECKING

import astroid

from hardcoded_strings_linter.domain.constants import (
    MAX_SUPERTYPE_DEPTH,
    WIDGET_BASE_CLASSES,
)

if TYPE_CHECKING:
    from hardcoded_strings_linter.domain.protocols import AstroidProtocol


class WidgetClassifier:
    """
    Decides whether a constructed class is a UI widget.

    Tests the class and then its ancestors, in method resolution order, by
    simple name against the known widget base classes. Mixins listed ahead of
    the widget base do not hide it. The walk stops at the first match, when
    the chain ends, or after ``max_depth`` ancestors.
    """

    def __init__(
        self,
        ast_gateway: "AstroidProtocol",
        base_classes: frozenset[str] = WIDGET_BASE_CLASSES,
        max_depth: int = MAX_SUPERTYPE_DEPTH,
    ) -> None:
        self._ast_gateway = ast_gateway
        self._base_classes = base_classes
        self._max_depth = max_depth

    def is_widget_type(self, class_node: astroid.nodes.ClassDef | None) -> bool:
        if not isinstance(class_node, astroid.nodes.ClassDef):
            return False
        if class_node.name in self._base_classes:
            return True
        chain = islice(self._ast_gateway.supertypes(class_node), self._max_depth)
        return any(
            isinstance(ancestor, astroid.nodes.ClassDef) and ancestor.name in self._base_classes
            for ancestor in chain
        )
