"""Tests for AstroidGateway."""

import astroid

from hardcoded_strings_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from tests.unit.widget_toolkit import find_call, parse


class TestAstroidGateway:
    def setup_method(self) -> None:
        self.gateway = AstroidGateway()

    def test_parse_file(self, tmp_path) -> None:
        path = tmp_path / "screen.py"
        path.write_text("x = 'Hello there'\n", encoding="utf-8")
        module = self.gateway.parse_file(str(path))
        assert module is not None
        assert module.file == str(path)
        assert self.gateway.read_source(module).line(1) == "x = 'Hello there'"

    def test_parse_file_keeps_raw_line_endings(self, tmp_path) -> None:
        path = tmp_path / "screen.py"
        raw = b"x = 1\r\n    \r\ny = 'Hello there'\r\n"
        path.write_bytes(raw)
        module = self.gateway.parse_file(str(path))
        source = self.gateway.read_source(module)
        assert source.data == raw
        literal = next(
            c for c in module.nodes_of_class(astroid.nodes.Const) if c.value == "Hello there"
        )
        start, end = source.node_range(literal)
        assert raw[start:end] == b"'Hello there'"

    def test_parse_file_missing_or_invalid(self, tmp_path) -> None:
        assert self.gateway.parse_file(str(tmp_path / "missing.py")) is None
        broken = tmp_path / "broken.py"
        broken.write_text("def (:\n", encoding="utf-8")
        assert self.gateway.parse_file(str(broken)) is None

    def test_read_source_of_parsed_string(self) -> None:
        module = astroid.parse("a = 1\nb = 2\n")
        assert self.gateway.read_source(module).line(2) == "b = 2"

    def test_resolve_unnamed_constructor(self) -> None:
        module = parse('Text("Hello")\n')
        ref = self.gateway.resolve_constructor(find_call(module, "Text"))
        assert ref is not None
        assert ref.class_name == "Text"
        assert ref.subname is None

    def test_resolve_classmethod_constructor(self) -> None:
        module = parse('Image.asset("assets/a.png")\n')
        ref = self.gateway.resolve_constructor(find_call(module, "Image.asset"))
        assert ref is not None
        assert ref.class_name == "Image"
        assert ref.subname == "asset"

    def test_plain_method_is_not_constructor(self) -> None:
        module = parse('Logger().info("Hello")\n')
        assert self.gateway.resolve_constructor(find_call(module, "Logger().info")) is None

    def test_function_is_not_constructor(self) -> None:
        module = parse('log("Hello")\n')
        assert self.gateway.resolve_constructor(find_call(module, "log")) is None

    def test_supertypes_in_resolution_order(self) -> None:
        module = parse("")
        text = next(c for c in module.nodes_of_class(astroid.nodes.ClassDef) if c.name == "Text")
        assert [c.name for c in self.gateway.supertypes(text)] == [
            "StatelessWidget",
            "Widget",
            "object",
        ]

    def test_supertypes_keep_leading_mixins(self) -> None:
        module = parse(
            "class TapMixin:\n    pass\n\n\nclass Label(TapMixin, StatelessWidget):\n    pass\n"
        )
        label = next(c for c in module.nodes_of_class(astroid.nodes.ClassDef) if c.name == "Label")
        names = [c.name for c in self.gateway.supertypes(label)]
        assert names[0] == "TapMixin"
        assert "StatelessWidget" in names
        assert "Widget" in names

    def test_supertypes_of_unresolvable_base(self) -> None:
        cls = astroid.extract_node("class Orphan(MissingBase):\n    pass\n")
        assert self.gateway.supertypes(cls) == []
