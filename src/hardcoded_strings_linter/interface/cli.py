"""CLI entry points for hslint - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path

import typer

from hardcoded_strings_linter.domain.config import ConfigurationLoader
from hardcoded_strings_linter.domain.protocols import (
    AstroidProtocol,
    FileSystemProtocol,
    FixerGatewayProtocol,
    GuidanceServiceProtocol,
)
from hardcoded_strings_linter.domain.rules.hardcoded_assets import HardcodedAssetRule
from hardcoded_strings_linter.infrastructure.adapters.pylint_adapter import PylintAdapter
from hardcoded_strings_linter.use_cases.apply_fixes import ApplyAssetFixesUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    guidance_service: GuidanceServiceProtocol
    astroid_gateway: AstroidProtocol
    filesystem: FileSystemProtocol
    fixer_gateway: FixerGatewayProtocol
    asset_rule: HardcodedAssetRule
    pylint_adapter: PylintAdapter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_paths(paths: list[Path] | None) -> list[str]:
        """Explicit paths, else src/ if it exists, else '.'."""
        if paths:
            return [str(p) for p in paths]
        src_dir = Path.cwd() / "src"
        if src_dir.is_dir():
            return [str(src_dir)]
        return ["."]

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="hslint",
            help="Find display text and asset paths hardcoded into widget constructors.",
            add_completion=False,
        )

        @app.command()
        def check(
            paths: list[Path] | None = typer.Argument(None, help="Files or directories (default: src/ or .)"),  # noqa: B008
            output_format: str = typer.Option("text", "--output-format", help="pylint output format"),
            verbose: bool = typer.Option(False, "--verbose", "-v"),
        ) -> None:
            """Run pylint with the hardcoded-strings and hardcoded-assets checks only."""
            CLIAppFactory.configure_logging(verbose)
            status = deps.pylint_adapter.run(
                CLIAppFactory.resolve_target_paths(paths), output_format)
            if status:
                raise typer.Exit(code=1)

        @app.command()
        def fix(
            paths: list[Path] | None = typer.Argument(None, help="Files or directories (default: src/ or .)"),  # noqa: B008
            dry_run: bool = typer.Option(False, "--dry-run", help="Report rewrites without writing"),
            verbose: bool = typer.Option(False, "--verbose", "-v"),
        ) -> None:
            """Rewrite hardcoded asset constructors into generated asset accessors."""
            CLIAppFactory.configure_logging(verbose)
            use_case = ApplyAssetFixesUseCase(
                asset_rule=deps.asset_rule,
                ast_gateway=deps.astroid_gateway,
                filesystem=deps.filesystem,
                fixer_gateway=deps.fixer_gateway,
                config_loader=deps.config_loader,
            )
            results = use_case.execute(
                CLIAppFactory.resolve_target_paths(paths), dry_run=dry_run)
            applied = sum(r.applied for r in results)
            for r in results:
                verb = "would rewrite" if dry_run else "rewrote"
                typer.echo(f"{r.file}: {verb} {r.applied} call(s), skipped {r.skipped}")
            typer.echo(f"{applied} asset reference(s) {'to fix' if dry_run else 'fixed'}.")

        @app.command()
        def explain(
            rule: str = typer.Argument(..., help="Rule id, pylint symbol or msgid"),
        ) -> None:
            """Print the manual fix instructions for a rule."""
            typer.echo(deps.guidance_service.get_manual_instructions(rule))

        return app
