"""Hardcoded strings check (W9701)."""

from hardcoded_strings_linter.domain.constants import HARDCODED_STRINGS_MSGID
from hardcoded_strings_linter.use_cases.checks.literal_checker import LiteralRuleChecker


class HardcodedStringsChecker(LiteralRuleChecker):
    """W9701: display text hardcoded into widget constructors. Thin: delegates to HardcodedStringRule."""

    name: str = "hardcoded-strings"
    CODES = [HARDCODED_STRINGS_MSGID]
