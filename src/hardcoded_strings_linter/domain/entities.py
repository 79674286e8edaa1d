"""Value objects passed between the rules, the checkers and the fixer gateway."""

from dataclasses import dataclass

import astroid


@dataclass(frozen=True)
class ConstructorRef:
    """A resolved constructor invocation: the constructed class plus optional named-constructor subname."""

    call: astroid.nodes.Call
    class_node: astroid.nodes.ClassDef
    subname: str | None = None

    @property
    def class_name(self) -> str:
        return str(self.class_node.name)


@dataclass(frozen=True)
class ArgumentContext:
    """
    Where a literal sits inside its owner constructor call.

    ``index`` is the slot in ``call.args`` (positional) or ``call.keywords``
    (named); a literal binds to at most one slot.
    """

    constructor: ConstructorRef
    index: int
    keyword: str | None = None

    @property
    def call(self) -> astroid.nodes.Call:
        return self.constructor.call

    @property
    def is_named(self) -> bool:
        return self.keyword is not None


@dataclass(frozen=True)
class PathInfo:
    """An asset path with its recognised prefix removed."""

    segments: tuple[str, ...]
    is_lib_prefixed: bool


@dataclass(frozen=True)
class SourceReplacement:
    """
    A single textual edit over the UTF-8 source of one file.

    Offsets are byte offsets; ``end`` is exclusive.
    """

    file: str
    start: int
    end: int
    replacement: str
    message: str
    priority: int = 0

    def overlaps(self, other: "SourceReplacement") -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class FixResult:
    """Outcome of applying replacements to a single file."""

    file: str
    applied: int
    skipped: int
    modified: bool
