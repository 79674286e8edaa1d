"""astroid-backed parsing and type resolution."""

import logging
from pathlib import Path

import astroid
from astroid import bases
from astroid.builder import AstroidBuilder
from astroid.exceptions import InferenceError, MroError
from pylint.checkers.utils import safe_infer

from hardcoded_strings_linter.domain.entities import ConstructorRef
from hardcoded_strings_linter.domain.protocols import AstroidProtocol
from hardcoded_strings_linter.domain.source import SourceLines

logger = logging.getLogger(__name__)


class AstroidGateway(AstroidProtocol):
    """AST gateway: parsing, source access and constructor/supertype resolution."""

    def parse_file(self, file_path: str) -> astroid.nodes.Module | None:
        """
        Parse a file and return the astroid Module node.

        The text is decoded from the raw bytes without newline translation or
        dedenting, so node offsets index the same bytes the fixer rewrites.
        """
        path = Path(file_path)
        try:
            source = path.read_bytes().decode("utf-8")
            return AstroidBuilder(astroid.MANAGER).string_build(
                source, modname=path.stem, path=str(path)
            )
        except (OSError, UnicodeDecodeError, astroid.AstroidSyntaxError) as exc:
            logger.debug("Skipping %s: %s", file_path, exc)
            return None

    def read_source(self, module: astroid.nodes.Module) -> SourceLines | None:
        try:
            stream = module.stream()
        except OSError as exc:
            logger.debug("No source for %s: %s", module.name, exc)
            return None
        if stream is None:
            return None
        with stream:
            return SourceLines.from_bytes(stream.read())

    def resolve_constructor(self, call: astroid.nodes.Call) -> ConstructorRef | None:
        """
        Resolve what a call instantiates.

        ``Text("hi")`` -> (Text, None); ``Image.asset("...")`` where ``asset``
        is a classmethod -> (Image, "asset"). Anything else -> None.
        """
        func = call.func
        inferred = safe_infer(func)
        if isinstance(inferred, astroid.nodes.ClassDef):
            return ConstructorRef(call=call, class_node=inferred)

        if not isinstance(func, astroid.nodes.Attribute):
            return None
        if not isinstance(inferred, (astroid.nodes.FunctionDef, bases.UnboundMethod)):
            return None
        if getattr(inferred, "type", None) != "classmethod":
            return None

        owner = safe_infer(func.expr)
        if isinstance(owner, astroid.nodes.ClassDef):
            return ConstructorRef(call=call, class_node=owner, subname=func.attrname)
        return None

    def supertypes(self, class_node: astroid.nodes.ClassDef) -> list[astroid.nodes.ClassDef]:
        """
        Ancestors in method resolution order, nearest first.

        Mixins listed before the real base (``class Label(TapMixin, StatelessWidget)``)
        stay in the chain. Unresolvable bases are left out; an inconsistent
        hierarchy falls back to plain ancestor order.
        """
        try:
            chain = class_node.mro()[1:]
        except (MroError, InferenceError):
            try:
                chain = list(class_node.ancestors())
            except InferenceError:
                return []
        return [c for c in chain if isinstance(c, astroid.nodes.ClassDef)]
