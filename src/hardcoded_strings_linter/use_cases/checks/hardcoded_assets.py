"""Hardcoded assets check (W9702)."""

from hardcoded_strings_linter.domain.constants import HARDCODED_ASSETS_MSGID
from hardcoded_strings_linter.use_cases.checks.literal_checker import LiteralRuleChecker


class HardcodedAssetsChecker(LiteralRuleChecker):
    """W9702: raw asset paths in image constructors. Thin: delegates to HardcodedAssetRule.

    Pylint has no fix channel; the rewrite is applied by ``hslint fix``.
    """

    name: str = "hardcoded-assets"
    CODES = [HARDCODED_ASSETS_MSGID]
