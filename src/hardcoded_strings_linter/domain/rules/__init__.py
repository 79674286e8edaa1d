"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Fixable",
    "Violation",
]

from typing import TYPE_CHECKING, Protocol

import astroid

if TYPE_CHECKING:
    from hardcoded_strings_linter.domain.entities import SourceReplacement
    from hardcoded_strings_linter.domain.source import SourceLines


@dataclass(frozen=True)
class Violation:
    """A rule finding: rule id, message, location and the node it is anchored on."""

    code: str
    message: str
    location: str
    node: astroid.nodes.NodeNG
    fixable: bool = False
    fix_failure_reason: str | None = None
    """Reason why an auto-fix is not available (e.g. 'Unrecognised asset path')."""

    @staticmethod
    def _location_from_node(node: astroid.nodes.NodeNG) -> str:
        """Compute path:lineno:col_offset from an astroid node. Used by from_node."""
        root = node.root()
        path = getattr(root, "file", "") or ""
        lineno = getattr(node, "lineno", 0)
        col_offset = getattr(node, "col_offset", 0)
        return f"{path}:{lineno}:{col_offset}"

    @classmethod
    def from_node(
        cls,
        *,
        code: str,
        message: str,
        node: astroid.nodes.NodeNG,
        fixable: bool = False,
        fix_failure_reason: str | None = None,
    ) -> "Violation":
        """Build a Violation with location derived from node. Prefer over manual location=."""
        return cls(
            code=code,
            message=message,
            location=cls._location_from_node(node),
            node=node,
            fixable=fixable,
            fix_failure_reason=fix_failure_reason,
        )


class Checkable(Protocol):
    """Per-literal check: given a string Const and its file's source lines, return findings."""

    code: str
    description: str

    def check(
        self, node: astroid.nodes.NodeNG, source: "SourceLines | None" = None
    ) -> list[Violation]:
        """Interrogate a literal node."""
        ...


class Fixable(Protocol):
    """Optional capability: rule can turn one of its violations into a source replacement."""

    def fix(
        self, violation: Violation, source: "SourceLines"
    ) -> "SourceReplacement | None":
        """
        Return a replacement only when the rewrite is deterministic.

        Returns None when no fix can be synthesised; the violation still stands.
        """
        ...
