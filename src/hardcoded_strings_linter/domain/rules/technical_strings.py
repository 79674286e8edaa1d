"""Technical-token detection: URLs, colours, identifiers and paths are not display text."""

from hardcoded_strings_linter.domain.constants import TECHNICAL_PATTERNS


class TechnicalStringClassifier:
    """Pure classifier over literal values. Patterns are independent; any match wins."""

    @staticmethod
    def looks_technical(value: str) -> bool:
        stripped = value.strip()
        return any(pattern.match(stripped) for pattern in TECHNICAL_PATTERNS)
