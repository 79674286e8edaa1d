"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.
"""

from pylint.lint import PyLinter

from hardcoded_strings_linter.infrastructure.di.container import HardcodedStringsContainer
from hardcoded_strings_linter.use_cases.checks.hardcoded_assets import HardcodedAssetsChecker
from hardcoded_strings_linter.use_cases.checks.hardcoded_strings import (
    HardcodedStringsChecker,
)


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = HardcodedStringsContainer.get_instance()
    ast_gateway = container.get_astroid_gateway()
    registry = container.get_guidance_service().get_registry()

    linter.register_checker(HardcodedStringsChecker(
        linter,
        rule=container.get_hardcoded_string_rule(),
        ast_gateway=ast_gateway,
        registry=registry,
    ))
    linter.register_checker(HardcodedAssetsChecker(
        linter,
        rule=container.get_hardcoded_asset_rule(),
        ast_gateway=ast_gateway,
        registry=registry,
    ))
