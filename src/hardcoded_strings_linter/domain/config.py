"""Configuration for the hardcoded-string rules. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from hardcoded_strings_linter.domain.constants import (
    ACCEPTABLE_PROPERTIES,
    WIDGET_BASE_CLASSES,
)

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration read from ``[tool.hardcoded-strings]``.

    Created by Infrastructure from (config_dict, tool_section). Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict, tool_section) at composition root.
    Configured names only extend the built-in tables.
    """

    KNOWN_KEYS: frozenset[str] = frozenset(
        {"widget_base_classes", "acceptable_properties", "exclude_paths"}
    )

    def __init__(
        self,
        config_dict: dict[str, object],
        tool_section: dict[str, object] | None = None,
    ) -> None:
        self._config = dict(config_dict)
        self._tool_section = dict(tool_section or {})
        if self._config:
            self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about unknown keys and values that are not lists of strings."""
        for key, value in config.items():
            if key not in self.KNOWN_KEYS:
                logger.warning("Configuration Warning: unknown key '%s' ignored.", key)
                continue
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                logger.warning(
                    "Configuration Warning: '%s' must be a list of strings; ignored.", key
                )

    def _string_list(self, key: str) -> list[str]:
        raw = self._config.get(key, [])
        if isinstance(raw, list):
            return [x for x in raw if isinstance(x, str)]
        return []

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return dict(self._config)

    @property
    def widget_base_classes(self) -> frozenset[str]:
        return WIDGET_BASE_CLASSES | frozenset(self._string_list("widget_base_classes"))

    @property
    def acceptable_properties(self) -> frozenset[str]:
        return ACCEPTABLE_PROPERTIES | frozenset(self._string_list("acceptable_properties"))

    @property
    def exclude_paths(self) -> list[str]:
        """Path fragments the fix command skips (e.g. generated code)."""
        return self._string_list("exclude_paths")

    def is_excluded(self, file_path: str) -> bool:
        return any(fragment in file_path for fragment in self.exclude_paths)
