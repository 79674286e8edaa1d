"""Apply Fixes Use Case - rewrite hardcoded asset constructors into generated accessors."""

import logging
from typing import TYPE_CHECKING

import astroid

from hardcoded_strings_linter.domain.entities import FixResult, SourceReplacement

if TYPE_CHECKING:
    from hardcoded_strings_linter.domain.config import ConfigurationLoader
    from hardcoded_strings_linter.domain.protocols import (
        AstroidProtocol,
        FileSystemProtocol,
        FixerGatewayProtocol,
    )
    from hardcoded_strings_linter.domain.rules.hardcoded_assets import HardcodedAssetRule

logger = logging.getLogger(__name__)


class ApplyAssetFixesUseCase:
    """Collect the asset rule's replacements per file and hand them to the fixer gateway."""

    def __init__(
        self,
        asset_rule: "HardcodedAssetRule",
        ast_gateway: "AstroidProtocol",
        filesystem: "FileSystemProtocol",
        fixer_gateway: "FixerGatewayProtocol",
        config_loader: "ConfigurationLoader",
    ) -> None:
        self._asset_rule = asset_rule
        self._ast_gateway = ast_gateway
        self._filesystem = filesystem
        self._fixer_gateway = fixer_gateway
        self._config_loader = config_loader

    def collect_replacements(self, file_path: str) -> list[SourceReplacement]:
        module = self._ast_gateway.parse_file(file_path)
        if module is None:
            return []
        source = self._ast_gateway.read_source(module)
        if source is None:
            logger.debug("No source text for %s; nothing to fix", file_path)
            return []

        replacements: list[SourceReplacement] = []
        for const in module.nodes_of_class(astroid.nodes.Const):
            for violation in self._asset_rule.check(const, source):
                replacement = self._asset_rule.fix(violation, source)
                if replacement is None:
                    logger.debug(
                        "No fix for %s: %s",
                        violation.location,
                        violation.fix_failure_reason or "unresolved constructor",
                    )
                    continue
                replacements.append(replacement)
        return replacements

    def execute(self, paths: list[str], dry_run: bool = False) -> list[FixResult]:
        results: list[FixResult] = []
        for path in paths:
            for file_path in self._filesystem.glob_python_files(path):
                if self._config_loader.is_excluded(file_path):
                    continue
                replacements = self.collect_replacements(file_path)
                if not replacements:
                    continue
                if dry_run:
                    accepted = self._fixer_gateway.select(replacements)
                    for r in accepted:
                        logger.info("%s: %s", file_path, r.message)
                    results.append(
                        FixResult(
                            file=file_path,
                            applied=len(accepted),
                            skipped=len(replacements) - len(accepted),
                            modified=False,
                        )
                    )
                    continue
                results.append(self._fixer_gateway.apply(file_path, replacements))
        return results
