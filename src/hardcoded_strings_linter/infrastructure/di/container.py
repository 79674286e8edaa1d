from typing import Any, Optional

from hardcoded_strings_linter.domain.config import ConfigurationLoader
from hardcoded_strings_linter.domain.rules.hardcoded_assets import HardcodedAssetRule
from hardcoded_strings_linter.domain.rules.hardcoded_strings import HardcodedStringRule
from hardcoded_strings_linter.domain.rule_msgs import RuleMsgBuilder
from hardcoded_strings_linter.domain.constants import (
    HARDCODED_ASSETS_MSGID,
    HARDCODED_STRINGS_MSGID,
)
from hardcoded_strings_linter.infrastructure.config_file_loader import ConfigFileLoader
from hardcoded_strings_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from hardcoded_strings_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from hardcoded_strings_linter.infrastructure.gateways.source_fixer_gateway import (
    SourceFixerGateway,
)
from hardcoded_strings_linter.infrastructure.services.guidance_service import GuidanceService


class HardcodedStringsContainer:
    """Dependency Injection Container for the hardcoded-strings linter."""

    _instance: Optional["HardcodedStringsContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict, tool_section = ConfigFileLoader.load_config_from_fs()
        self.register_singleton(
            "ConfigurationLoader", ConfigurationLoader(config_dict, tool_section)
        )
        self.register_singleton("GuidanceService", GuidanceService())
        self.register_singleton("AstroidGateway", AstroidGateway())
        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton("SourceFixerGateway", SourceFixerGateway(filesystem))

    @classmethod
    def get_instance(cls) -> "HardcodedStringsContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        if key not in self._singletons:
            raise ValueError(f"No registration for {key}")
        return self._singletons[key]

    def get_config_loader(self) -> ConfigurationLoader:
        return self.get("ConfigurationLoader")

    def get_guidance_service(self) -> GuidanceService:
        return self.get("GuidanceService")

    def get_astroid_gateway(self) -> AstroidGateway:
        return self.get("AstroidGateway")

    def get_filesystem_gateway(self) -> FileSystemGateway:
        return self.get("FileSystemGateway")

    def get_fixer_gateway(self) -> SourceFixerGateway:
        return self.get("SourceFixerGateway")

    def get_hardcoded_string_rule(self) -> HardcodedStringRule:
        config = self.get_config_loader()
        registry = self.get_guidance_service().get_registry()
        return HardcodedStringRule(
            self.get_astroid_gateway(),
            widget_base_classes=config.widget_base_classes,
            acceptable_properties=config.acceptable_properties,
            message=RuleMsgBuilder.message_for(
                registry, HARDCODED_STRINGS_MSGID, HardcodedStringRule.description
            ),
        )

    def get_hardcoded_asset_rule(self) -> HardcodedAssetRule:
        registry = self.get_guidance_service().get_registry()
        return HardcodedAssetRule(
            self.get_astroid_gateway(),
            message=RuleMsgBuilder.message_for(
                registry, HARDCODED_ASSETS_MSGID, HardcodedAssetRule.description
            ),
        )
