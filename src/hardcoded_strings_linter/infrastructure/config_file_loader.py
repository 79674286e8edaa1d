"""Load [tool.hardcoded-strings] and [tool] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path

logger = logging.getLogger(__name__)

TOOL_SECTION = "hardcoded-strings"


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml above a start directory."""

    @staticmethod
    def load_config_from_fs(
        start: Path | None = None,
    ) -> tuple[dict[str, object], dict[str, object]]:
        """Returns (config_dict, tool_section); both empty when nothing is found."""
        current_path = (start or Path.cwd()).resolve()
        empty: dict[str, object] = {}
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("Could not read %s: %s", config_file, exc)
                continue
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(TOOL_SECTION, {}) or {}
            return (config_dict, tool_section)
        return (empty, empty)
