"""Hardcoded assets rule (W9702) - detection + rewrite into the generated assets API."""

import logging
from typing import TYPE_CHECKING

import astroid

from hardcoded_strings_linter.domain.constants import (
    ASSET_FIX_PRIORITY,
    HARDCODED_ASSETS_RULE_ID,
)
from hardcoded_strings_linter.domain.entities import ConstructorRef, SourceReplacement
from hardcoded_strings_linter.domain.rules import Checkable, Fixable, Violation
from hardcoded_strings_linter.domain.rules.arguments import ArgumentContextResolver
from hardcoded_strings_linter.domain.rules.asset_paths import (
    PathToSymbolConverter,
    RewriteBuilder,
)
from hardcoded_strings_linter.domain.rules.assets import (
    AssetHandler,
    AssetHandlerRegistry,
    AssetPathValidator,
)
from hardcoded_strings_linter.domain.rules.literals import StringLiteralFilter
from hardcoded_strings_linter.domain.rules.suppression import IgnoreMarkerScanner

if TYPE_CHECKING:
    from hardcoded_strings_linter.domain.protocols import AstroidProtocol
    from hardcoded_strings_linter.domain.source import SourceLines

logger = logging.getLogger(__name__)


class HardcodedAssetRule(Checkable, Fixable):
    """
    Rule for hardcoded_assets: asset paths passed to Image.asset, SvgPicture.asset or AssetImage.

    - Detection: reported on the owning constructor call, not the literal.
    - Fix: replaces the whole call with ``Assets.<path>.<suffix>(<other args>)``.
    """

    code: str = HARDCODED_ASSETS_RULE_ID
    description: str = "Avoid using hardcoded assets in the code."
    correction: str = "Consider using localization or constants for assets."

    def __init__(self, ast_gateway: "AstroidProtocol", message: str | None = None) -> None:
        self._ast_gateway = ast_gateway
        self._scanner = IgnoreMarkerScanner()
        self._resolver = ArgumentContextResolver(ast_gateway)
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
        if not AssetPathValidator.is_asset_path(node):
            return []

        context = self._resolver.direct_argument_context(node)
        if context is None:
            return []
        if self._handler_for(context.constructor) is None:
            return []

        fixable = PathToSymbolConverter.convert(node.value.strip()) is not None
        return [
            Violation.from_node(
                code=self.code,
                message=self._message,
                node=context.call,
                fixable=fixable,
                fix_failure_reason=None if fixable else "Unrecognised asset path shape",
            )
        ]

    def fix(
        self, violation: Violation, source: "SourceLines"
    ) -> SourceReplacement | None:
        call = violation.node
        if violation.code != self.code or not isinstance(call, astroid.nodes.Call):
            return None

        constructor = self._ast_gateway.resolve_constructor(call)
        if constructor is None:
            return None
        handler = self._handler_for(constructor)
        if handler is None:
            return None

        asset_node = self.find_asset_path_node(call)
        if asset_node is None:
            return None
        asset_path = asset_node.value.strip()

        symbol = PathToSymbolConverter.convert(asset_path)
        if symbol is None:
            logger.debug("No generated symbol for asset path %r", asset_path)
            return None

        span = source.node_range(call)
        if span is None:
            logger.debug("Call at %s has no source range; fix skipped", violation.location)
            return None

        replacement = RewriteBuilder.build(
            symbol,
            self.remaining_arguments(call, asset_node, source),
            handler.suffix(asset_path),
        )
        return SourceReplacement(
            file=str(getattr(call.root(), "file", "") or ""),
            start=span[0],
            end=span[1],
            replacement=replacement,
            message=f"Extract to generated assets: {symbol}",
            priority=ASSET_FIX_PRIORITY,
        )

    @staticmethod
    def _handler_for(constructor: ConstructorRef) -> AssetHandler | None:
        handler = AssetHandlerRegistry.handler_for(constructor.class_name)
        if handler is None or not handler.can_handle(constructor.subname):
            return None
        return handler

    @staticmethod
    def find_asset_path_node(call: astroid.nodes.Call) -> astroid.nodes.Const | None:
        """First positional, then named, argument whose literal value is an asset path."""
        for arg in call.args or ():
            if AssetPathValidator.is_asset_path(arg):
                return arg
        for keyword in call.keywords or ():
            if AssetPathValidator.is_asset_path(keyword.value):
                return keyword.value
        return None

    @staticmethod
    def remaining_arguments(
        call: astroid.nodes.Call,
        asset_node: astroid.nodes.NodeNG,
        source: "SourceLines",
    ) -> list[str]:
        """Source text of every argument except the asset path, named ones as ``name=expr``."""
        remaining: list[str] = []
        for arg in call.args or ():
            if arg is asset_node:
                continue
            remaining.append(source.segment(arg))
        for keyword in call.keywords or ():
            if keyword.value is asset_node:
                continue
            value = source.segment(keyword.value)
            remaining.append(f"{keyword.arg}={value}" if keyword.arg else f"**{value}")
        return remaining
