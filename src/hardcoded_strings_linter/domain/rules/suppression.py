"""Inline suppress-comment detection for hardcoded-string findings."""

import astroid

from hardcoded_strings_linter.domain.constants import IGNORE_PATTERNS
from hardcoded_strings_linter.domain.source import SourceLines


class IgnoreMarkerScanner:
    """
    Decides whether a suppress comment applies to a node.

    A marker on the node's own line or on the line directly above it counts.
    Without source text the node is never suppressed, so findings are
    over-reported rather than silently dropped.
    """

    @staticmethod
    def line_has_marker(line: str) -> bool:
        return any(pattern.search(line) for pattern in IGNORE_PATTERNS)

    def suppressed(
        self, node: astroid.nodes.NodeNG, source: SourceLines | None
    ) -> bool:
        if source is None:
            return False
        lineno = getattr(node, "lineno", None)
        if not lineno:
            return False

        current = source.line(lineno)
        if current is not None and self.line_has_marker(current):
            return True

        if lineno > 1:
            previous = source.line(lineno - 1)
            if previous is not None and self.line_has_marker(previous):
                return True
        return False
