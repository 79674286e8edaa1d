"""Per-file source text with a line-offset index, built once per analysis pass."""

from dataclasses import dataclass, field

import astroid


@dataclass(frozen=True)
class SourceLines:
    """
    The original UTF-8 source of one module.

    Lines are 1-based like astroid's ``lineno``; column offsets are UTF-8
    byte offsets like astroid's ``col_offset``.
    """

    data: bytes
    line_starts: tuple[int, ...] = field(repr=False)

    @classmethod
    def from_bytes(cls, data: bytes) -> "SourceLines":
        starts = [0]
        for i, byte in enumerate(data):
            if byte == 0x0A:
                starts.append(i + 1)
        return cls(data=data, line_starts=tuple(starts))

    @classmethod
    def from_text(cls, text: str) -> "SourceLines":
        return cls.from_bytes(text.encode("utf-8"))

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def line(self, lineno: int) -> str | None:
        """Return the text of a 1-based line without its terminator, or None when out of range."""
        if lineno < 1 or lineno > self.line_count:
            return None
        start = self.line_starts[lineno - 1]
        end = (
            self.line_starts[lineno] - 1
            if lineno < self.line_count
            else len(self.data)
        )
        return self.data[start:end].decode("utf-8", errors="replace").rstrip("\r")

    def offset(self, lineno: int, col_offset: int) -> int | None:
        if lineno < 1 or lineno > self.line_count or col_offset < 0:
            return None
        return self.line_starts[lineno - 1] + col_offset

    def node_range(self, node: astroid.nodes.NodeNG) -> tuple[int, int] | None:
        """Byte range [start, end) covered by a node, or None when it has no position."""
        lineno = getattr(node, "lineno", None)
        col = getattr(node, "col_offset", None)
        end_lineno = getattr(node, "end_lineno", None)
        end_col = getattr(node, "end_col_offset", None)
        if None in (lineno, col, end_lineno, end_col):
            return None
        start = self.offset(lineno, col)
        end = self.offset(end_lineno, end_col)
        if start is None or end is None or end < start or end > len(self.data):
            return None
        return (start, end)

    def segment(self, node: astroid.nodes.NodeNG) -> str:
        """Verbatim source text of a node; falls back to astroid's rendering."""
        span = self.node_range(node)
        if span is None:
            return str(node.as_string())
        return self.data[span[0]:span[1]].decode("utf-8")
