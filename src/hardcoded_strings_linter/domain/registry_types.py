from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    rule_id: str
    symbol: str
    display_name: str
    short_description: str
    message_template: str
    correction_message: str
    manual_instructions: str
    fixable: bool
    references: list[str]
