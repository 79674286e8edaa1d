"""Hardcoded strings rule (W9701) - display text passed straight into widget constructors."""

from typing import TYPE_CHECKING

import astroid

from hardcoded_strings_linter.domain.constants import (
    ACCEPTABLE_PROPERTIES,
    HARDCODED_STRINGS_RULE_ID,
    MIN_STRING_LENGTH,
)
from hardcoded_strings_linter.domain.rules import Checkable, Violation
from hardcoded_strings_linter.domain.rules.arguments import ArgumentContextResolver
from hardcoded_strings_linter.domain.rules.literals import StringLiteralFilter
from hardcoded_strings_linter.domain.rules.suppression import IgnoreMarkerScanner
from hardcoded_strings_linter.domain.rules.technical_strings import (
    TechnicalStringClassifier,
)
from hardcoded_strings_linter.domain.rules.widgets import WidgetClassifier

if TYPE_CHECKING:
    from hardcoded_strings_linter.domain.protocols import AstroidProtocol
    from hardcoded_strings_linter.domain.source import SourceLines


class HardcodedStringRule(Checkable):
    """
    Rule for hardcoded_strings: literals handed directly to a widget constructor.

    A literal is reported only when every exclusion fails:

    - a suppress comment on its line or the line above
    - it is not a direct argument of a constructor call
    - the constructed class is not a widget
    - it is shorter than three characters
    - it is a mapping key or subscript
    - it is bound to an allowlisted keyword (``semantics_label=``, ``key=``, ...)
    - it looks like a technical token (URL, colour, identifier, path)
    """

    code: str = HARDCODED_STRINGS_RULE_ID
    description: str = "Avoid using hardcoded strings in the code."
    correction: str = "Consider using localization or constants for strings."

    def __init__(
        self,
        ast_gateway: "AstroidProtocol",
        widget_base_classes: frozenset[str] | None = None,
        acceptable_properties: frozenset[str] = ACCEPTABLE_PROPERTIES,
        message: str | None = None,
    ) -> None:
        self._scanner = IgnoreMarkerScanner()
        self._resolver = ArgumentContextResolver(ast_gateway)
        self._widgets = (
            WidgetClassifier(ast_gateway, widget_base_classes)
            if widget_base_classes is not None
            else WidgetClassifier(ast_gateway)
        )
        self._acceptable_properties = acceptable_properties
        self._message = message or self.description

    def check(
        self, node: astroid.nodes.NodeNG, source: "SourceLines | None" = None
    ) -> list[Violation]:
        if not StringLiteralFilter.is_string_literal(node):
            return []
        if StringLiteralFilter.in_directive(node):
            return []
        if self._scanner.suppressed(node, source):
            return []

        context = self._resolver.direct_argument_context(node)
        if context is None:
            return []
        if not self._widgets.is_widget_type(context.constructor.class_node):
            return []

        value: str = node.value
        if len(value) < MIN_STRING_LENGTH:
            return []
        if StringLiteralFilter.is_map_key(node):
            return []
        if context.keyword in self._acceptable_properties:
            return []
        if TechnicalStringClassifier.looks_technical(value):
            return []

        return [
            Violation.from_node(
                code=self.code,
                message=self._message,
                node=node,
            )
        ]
