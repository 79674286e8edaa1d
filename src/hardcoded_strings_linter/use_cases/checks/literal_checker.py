"""Shared plumbing for checkers driven once per string literal."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar

import astroid
from pylint.checkers import BaseChecker

from hardcoded_strings_linter.domain.protocols import AstroidProtocol
from hardcoded_strings_linter.domain.registry_types import RuleRegistryEntry
from hardcoded_strings_linter.domain.rule_msgs import RuleMsgBuilder
from hardcoded_strings_linter.domain.rules import Checkable
from hardcoded_strings_linter.domain.source import SourceLines

if TYPE_CHECKING:
    from pylint.lint import PyLinter


class LiteralRuleChecker(BaseChecker):
    """
    Thin checker: reads the module source once in visit_module, then hands every
    string Const to its rule and forwards findings to pylint.
    """

    CODES: ClassVar[list[str]] = []

    def __init__(
        self,
        linter: "PyLinter",
        rule: Checkable,
        ast_gateway: AstroidProtocol,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self._rule = rule
        self._ast_gateway = ast_gateway
        self._source: SourceLines | None = None

    @property
    def symbol(self) -> str:
        msg = self.msgs.get(self.CODES[0])
        return msg[1] if msg else self.CODES[0]

    def visit_module(self, node: astroid.nodes.Module) -> None:
        self._source = self._ast_gateway.read_source(node)

    def leave_module(self, node: astroid.nodes.Module) -> None:
        self._source = None

    def visit_const(self, node: astroid.nodes.Const) -> None:
        """Delegate to the rule for string literals only."""
        if not isinstance(node.value, str):
            return
        for v in self._rule.check(node, self._source):
            self.add_message(self.symbol, node=v.node)
