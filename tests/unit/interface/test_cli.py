"""Unit tests for the Typer-based CLI interface."""

import os
from pathlib import Path
from unittest.mock import Mock

from typer.testing import CliRunner

from hardcoded_strings_linter.domain.config import ConfigurationLoader
from hardcoded_strings_linter.domain.entities import FixResult
from hardcoded_strings_linter.infrastructure.services.guidance_service import GuidanceService
from hardcoded_strings_linter.interface.cli import CLIAppFactory, CLIDependencies

runner = CliRunner()


def _make_mock_deps(**overrides) -> CLIDependencies:
    """Create CLIDependencies with mock adapters/services for testing."""
    defaults: dict = {
        "config_loader": ConfigurationLoader({}),
        "guidance_service": GuidanceService(),
        "astroid_gateway": Mock(),
        "filesystem": Mock(),
        "fixer_gateway": Mock(),
        "asset_rule": Mock(),
        "pylint_adapter": Mock(),
    }
    defaults.update(overrides)
    return CLIDependencies(**defaults)


class TestResolveTargetPaths:
    def test_explicit_paths(self) -> None:
        assert CLIAppFactory.resolve_target_paths([Path("a"), Path("b/c.py")]) == ["a", "b/c.py"]

    def test_defaults_to_src_when_exists(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        original_cwd = Path.cwd()
        try:
            os.chdir(tmp_path)
            (resolved,) = CLIAppFactory.resolve_target_paths(None)
            assert Path(resolved).name == "src"
        finally:
            os.chdir(original_cwd)

    def test_defaults_to_dot(self, tmp_path: Path) -> None:
        original_cwd = Path.cwd()
        try:
            os.chdir(tmp_path)
            assert CLIAppFactory.resolve_target_paths(None) == ["."]
        finally:
            os.chdir(original_cwd)


class TestCheckCommand:
    def test_clean_run_exits_zero(self) -> None:
        adapter = Mock()
        adapter.run.return_value = 0
        app = CLIAppFactory.create_app(_make_mock_deps(pylint_adapter=adapter))

        result = runner.invoke(app, ["check", "pkg"])

        assert result.exit_code == 0
        adapter.run.assert_called_once_with(["pkg"], "text")

    def test_findings_exit_one(self) -> None:
        adapter = Mock()
        adapter.run.return_value = 4
        app = CLIAppFactory.create_app(_make_mock_deps(pylint_adapter=adapter))

        result = runner.invoke(app, ["check", "pkg", "--output-format", "json"])

        assert result.exit_code == 1
        adapter.run.assert_called_once_with(["pkg"], "json")


class TestFixCommand:
    def test_dry_run_reports_without_writing(self) -> None:
        filesystem = Mock()
        filesystem.glob_python_files.return_value = ["pkg/screen.py"]
        fixer = Mock()
        astroid_gateway = Mock()
        astroid_gateway.parse_file.return_value = None
        app = CLIAppFactory.create_app(
            _make_mock_deps(
                filesystem=filesystem, fixer_gateway=fixer, astroid_gateway=astroid_gateway
            )
        )

        result = runner.invoke(app, ["fix", "pkg", "--dry-run"])

        assert result.exit_code == 0
        assert "0 asset reference(s) to fix." in result.output
        fixer.apply.assert_not_called()

    def test_reports_each_rewritten_file(self, monkeypatch) -> None:
        results = [FixResult(file="pkg/screen.py", applied=2, skipped=1, modified=True)]
        monkeypatch.setattr(
            "hardcoded_strings_linter.interface.cli.ApplyAssetFixesUseCase.execute",
            lambda self, paths, dry_run=False: results,
        )
        app = CLIAppFactory.create_app(_make_mock_deps())

        result = runner.invoke(app, ["fix", "pkg"])

        assert result.exit_code == 0
        assert "pkg/screen.py: rewrote 2 call(s), skipped 1" in result.output
        assert "2 asset reference(s) fixed." in result.output


class TestExplainCommand:
    def test_prints_manual_instructions(self) -> None:
        app = CLIAppFactory.create_app(_make_mock_deps())
        result = runner.invoke(app, ["explain", "hardcoded-assets"])
        assert result.exit_code == 0
        assert "Assets.icons.homeIcon.image(width=24)" in result.output

    def test_unknown_rule_falls_back(self) -> None:
        app = CLIAppFactory.create_app(_make_mock_deps())
        result = runner.invoke(app, ["explain", "nope"])
        assert "Fix the finding at the reported location." in result.output
