"""Tests for AssetPathValidator and AssetHandlerRegistry."""

import astroid
import pytest

from hardcoded_strings_linter.domain.rules.assets import (
    AssetHandlerRegistry,
    AssetImageHandler,
    AssetPathValidator,
    ImageAssetHandler,
    SvgPictureAssetHandler,
)


class TestAssetPathValidator:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("assets/logo.png", True),
            ("lib/assets/logo.png", True),
            ("  assets/logo.png  ", True),
            ("images/logo.png", False),
            ("Assets/logo.png", False),
            ("", False),
        ],
    )
    def test_is_asset_path_value(self, value: str, expected: bool) -> None:
        assert AssetPathValidator.is_asset_path_value(value) is expected

    def test_non_string_nodes_are_not_asset_paths(self) -> None:
        assert AssetPathValidator.is_asset_path(astroid.extract_node("42")) is False
        assert AssetPathValidator.is_asset_path(astroid.extract_node("'assets/a.png'")) is True


class TestAssetHandlers:
    def test_registry_mapping(self) -> None:
        assert isinstance(AssetHandlerRegistry.handler_for("Image"), ImageAssetHandler)
        assert isinstance(AssetHandlerRegistry.handler_for("SvgPicture"), SvgPictureAssetHandler)
        assert isinstance(AssetHandlerRegistry.handler_for("AssetImage"), AssetImageHandler)
        assert AssetHandlerRegistry.handler_for("Text") is None
        assert AssetHandlerRegistry.handler_for(None) is None

    def test_image_handler(self) -> None:
        handler = ImageAssetHandler()
        assert handler.can_handle("asset") is True
        assert handler.can_handle(None) is False
        assert handler.can_handle("network") is False
        assert handler.suffix("assets/logo.png") == "image"
        assert handler.suffix("assets/LOGO.SVG") == "svg"

    def test_svg_handler(self) -> None:
        handler = SvgPictureAssetHandler()
        assert handler.can_handle("asset") is True
        assert handler.can_handle(None) is False
        assert handler.suffix("assets/logo.png") == "svg"

    def test_asset_image_handler_accepts_any_constructor(self) -> None:
        handler = AssetImageHandler()
        assert handler.can_handle(None) is True
        assert handler.can_handle("anything") is True
        assert handler.suffix("assets/logo.svg") == "provider"
