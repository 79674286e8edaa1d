"""Tests for HardcodedAssetRule detection and fix synthesis."""

import pytest

from hardcoded_strings_linter.domain.rules import Violation
from hardcoded_strings_linter.domain.rules.hardcoded_assets import HardcodedAssetRule
from hardcoded_strings_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from tests.unit.widget_toolkit import find_call, find_const, parse


@pytest.fixture
def gateway() -> AstroidGateway:
    return AstroidGateway()


@pytest.fixture
def rule(gateway: AstroidGateway) -> HardcodedAssetRule:
    return HardcodedAssetRule(gateway)


def fix_for(rule: HardcodedAssetRule, gateway: AstroidGateway, snippet: str, value: str):
    module = parse(snippet)
    source = gateway.read_source(module)
    violations = rule.check(find_const(module, value), source)
    assert len(violations) == 1
    return violations[0], rule.fix(violations[0], source), source


class TestHardcodedAssetRuleCheck:
    def test_rule_attributes(self, rule: HardcodedAssetRule) -> None:
        assert rule.code == "hardcoded_assets"
        assert rule.description == "Avoid using hardcoded assets in the code."
        assert rule.correction == "Consider using localization or constants for assets."

    def test_reports_on_owner_call(self, rule, gateway) -> None:
        module = parse('Image.asset("assets/icons/home_icon.png", width=24)\n')
        literal = find_const(module, "assets/icons/home_icon.png")
        violations = rule.check(literal, gateway.read_source(module))
        assert len(violations) == 1
        assert violations[0].node is find_call(module, "Image.asset")
        assert violations[0].fixable is True

    @pytest.mark.parametrize(
        ("snippet", "value"),
        [
            ('SvgPicture.asset("assets/icons/home.svg")\n', "assets/icons/home.svg"),
            ('AssetImage("assets/images/logo.png")\n', "assets/images/logo.png"),
            ('AssetImage(asset_name="assets/images/logo.png")\n', "assets/images/logo.png"),
        ],
    )
    def test_supported_constructors(self, rule, gateway, snippet: str, value: str) -> None:
        module = parse(snippet)
        assert len(rule.check(find_const(module, value), gateway.read_source(module))) == 1

    @pytest.mark.parametrize(
        ("snippet", "value"),
        [
            ('Image(image="assets/images/logo.png")\n', "assets/images/logo.png"),
            ('Text("assets/images/logo.png")\n', "assets/images/logo.png"),
            ('Image.asset("images/logo.png")\n', "images/logo.png"),
            ('Image.asset(tr("assets/images/logo.png"))\n', "assets/images/logo.png"),
            ('Image.asset("assets/images/logo.png")  # hardcoded.ok\n', "assets/images/logo.png"),
            ('path = "assets/images/logo.png"\n', "assets/images/logo.png"),
        ],
    )
    def test_not_reported(self, rule, gateway, snippet: str, value: str) -> None:
        module = parse(snippet)
        assert rule.check(find_const(module, value), gateway.read_source(module)) == []

    def test_unconvertible_path_is_reported_without_fix(self, rule, gateway) -> None:
        violation, replacement, _ = fix_for(rule, gateway, 'Image.asset("assets/")\n', "assets/")
        assert violation.fixable is False
        assert violation.fix_failure_reason
        assert replacement is None

    def test_padded_path_is_fixable(self, rule, gateway) -> None:
        violation, replacement, _ = fix_for(
            rule, gateway, 'Image.asset(" assets/icons/home_icon.svg ")\n',
            " assets/icons/home_icon.svg ",
        )
        assert violation.fixable is True
        assert violation.fix_failure_reason is None
        assert replacement.replacement == "Assets.icons.homeIcon.svg()"


class TestHardcodedAssetRuleFix:
    def test_image_with_named_argument(self, rule, gateway) -> None:
        _, replacement, source = fix_for(
            rule, gateway, 'Image.asset("assets/icons/home_icon.png", width=24)\n',
            "assets/icons/home_icon.png",
        )
        assert replacement is not None
        assert replacement.replacement == "Assets.icons.homeIcon.image(width=24)"
        assert replacement.message == "Extract to generated assets: Assets.icons.homeIcon"
        assert replacement.priority == 70
        assert source.data[replacement.start:replacement.end] == (
            b'Image.asset("assets/icons/home_icon.png", width=24)'
        )

    def test_svg_image_uses_svg_suffix(self, rule, gateway) -> None:
        _, replacement, _ = fix_for(
            rule, gateway, 'Image.asset("assets/icons/home_icon.svg")\n', "assets/icons/home_icon.svg"
        )
        assert replacement.replacement == "Assets.icons.homeIcon.svg()"

    def test_svg_picture(self, rule, gateway) -> None:
        _, replacement, _ = fix_for(
            rule, gateway, 'SvgPicture.asset("assets/icons/home_icon.svg", width=16, color=None)\n',
            "assets/icons/home_icon.svg",
        )
        assert replacement.replacement == "Assets.icons.homeIcon.svg(width=16, color=None)"

    def test_asset_image_keeps_argument_text_verbatim(self, rule, gateway) -> None:
        _, replacement, _ = fix_for(
            rule, gateway, 'AssetImage("lib/assets/images/logo.png", package="brand_kit")\n',
            "lib/assets/images/logo.png",
        )
        assert replacement.replacement == (
            'Assets.lib.assets.images.logo.provider(package="brand_kit")'
        )

    def test_named_asset_argument_is_dropped(self, rule, gateway) -> None:
        _, replacement, _ = fix_for(
            rule, gateway, 'Image.asset(width=24, name="assets/images/logo.png", height=2 * 12)\n',
            "assets/images/logo.png",
        )
        assert replacement.replacement == "Assets.images.logo.image(width=24, height=2 * 12)"

    def test_wrong_code_is_ignored(self, rule, gateway) -> None:
        module = parse('Image.asset("assets/icons/home_icon.png")\n')
        violation = Violation.from_node(
            code="hardcoded_strings", message="x", node=find_call(module, "Image.asset")
        )
        assert rule.fix(violation, gateway.read_source(module)) is None
