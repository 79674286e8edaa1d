"""Runs pylint in-process with only this plugin's messages enabled."""

from pylint.lint import Run

from hardcoded_strings_linter.domain.constants import (
    HARDCODED_ASSETS_MSGID,
    HARDCODED_STRINGS_MSGID,
)

PLUGIN_MODULE = "hardcoded_strings_linter.infrastructure.checker"


class PylintAdapter:
    """Adapter for the pylint run behind ``hslint check``."""

    @staticmethod
    def build_args(paths: list[str], output_format: str = "text") -> list[str]:
        return [
            f"--load-plugins={PLUGIN_MODULE}",
            "--disable=all",
            f"--enable={HARDCODED_STRINGS_MSGID},{HARDCODED_ASSETS_MSGID}",
            f"--output-format={output_format}",
            "--score=n",
            *paths,
        ]

    def run(self, paths: list[str], output_format: str = "text") -> int:
        """Return pylint's exit status (0 when nothing was reported)."""
        result = Run(self.build_args(paths, output_format), exit=False)
        return int(result.linter.msg_status)
