"""Asset-path recognition and the constructor shapes that consume asset paths."""

from types import MappingProxyType
from typing import Protocol

import astroid

from hardcoded_strings_linter.domain.constants import ASSETS_PREFIX, LIB_ASSETS_PREFIX


class AssetPathValidator:
    @staticmethod
    def is_asset_path_value(value: str) -> bool:
        stripped = value.strip()
        return stripped.startswith(ASSETS_PREFIX) or stripped.startswith(LIB_ASSETS_PREFIX)

    @staticmethod
    def is_asset_path(node: astroid.nodes.NodeNG) -> bool:
        if not (isinstance(node, astroid.nodes.Const) and isinstance(node.value, str)):
            return False
        return AssetPathValidator.is_asset_path_value(node.value)


class AssetHandler(Protocol):
    """One asset-consuming constructor shape."""

    def can_handle(self, constructor_subname: str | None) -> bool:
        ...

    def suffix(self, asset_path: str) -> str:
        """Accessor on the generated symbol that yields this constructor's value."""
        ...


class ImageAssetHandler:
    """``Image.asset(...)``"""

    def can_handle(self, constructor_subname: str | None) -> bool:
        return constructor_subname == "asset"

    def suffix(self, asset_path: str) -> str:
        return "svg" if asset_path.lower().endswith(".svg") else "image"


class SvgPictureAssetHandler:
    """``SvgPicture.asset(...)``"""

    def can_handle(self, constructor_subname: str | None) -> bool:
        return constructor_subname == "asset"

    def suffix(self, asset_path: str) -> str:
        return "svg"


class AssetImageHandler:
    """``AssetImage(...)``, which has no named constructor."""

    def can_handle(self, constructor_subname: str | None) -> bool:
        return True

    def suffix(self, asset_path: str) -> str:
        return "provider"


class AssetHandlerRegistry:
    """Fixed mapping from constructed class name to its asset handler."""

    HANDLERS: MappingProxyType[str, AssetHandler] = MappingProxyType(
        {
            "Image": ImageAssetHandler(),
            "SvgPicture": SvgPictureAssetHandler(),
            "AssetImage": AssetImageHandler(),
        }
    )

    @classmethod
    def handler_for(cls, class_name: str | None) -> AssetHandler | None:
        if class_name is None:
            return None
        return cls.HANDLERS.get(class_name)
