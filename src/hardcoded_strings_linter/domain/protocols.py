from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from hardcoded_strings_linter.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    import astroid

    from hardcoded_strings_linter.domain.entities import (
        ConstructorRef,
        FixResult,
        SourceReplacement,
    )
    from hardcoded_strings_linter.domain.source import SourceLines


class AstroidProtocol(Protocol):
    def parse_file(self, file_path: str) -> "astroid.nodes.Module | None":
        ...

    def read_source(self, module: "astroid.nodes.Module") -> "SourceLines | None":
        """Return the module's original source text, or None when it cannot be read."""
        ...

    def resolve_constructor(self, call: "astroid.nodes.Call") -> "ConstructorRef | None":
        """Return the class a call instantiates (plus named-constructor subname), or None."""
        ...

    def supertypes(self, class_node: "astroid.nodes.ClassDef") -> "Iterable[astroid.nodes.ClassDef]":
        """Yield the resolvable ancestors of a class in method resolution order."""
        ...


class FixerGatewayProtocol(Protocol):
    def select(self, replacements: "list[SourceReplacement]") -> "list[SourceReplacement]":
        """Non-overlapping subset that apply() would write, in source order."""
        ...

    def apply(
        self, file_path: str, replacements: "list[SourceReplacement]"
    ) -> "FixResult":
        """Apply replacements to a file as one write. Returns what was applied."""
        ...


class FileSystemProtocol(Protocol):
    def glob_python_files(self, path: str) -> list[str]:
        ...

    def read_bytes(self, path: str) -> bytes:
        ...

    def write_bytes(self, path: str, content: bytes) -> None:
        ...


class GuidanceServiceProtocol(Protocol):
    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        ...

    def get_entry(self, rule_code: str) -> RuleRegistryEntry | None:
        ...

    def get_manual_instructions(self, rule_code: str) -> str:
        ...
