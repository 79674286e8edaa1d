"""Immutable lookup tables shared by the hardcoded-string and asset rules."""

import re

RULE_PREFIX: str = "hslint."

HARDCODED_STRINGS_RULE_ID: str = "hardcoded_strings"
HARDCODED_ASSETS_RULE_ID: str = "hardcoded_assets"

HARDCODED_STRINGS_MSGID: str = "W9701"
HARDCODED_ASSETS_MSGID: str = "W9702"

# Hard cap on supertype walks; the host type system owns acyclicity.
MAX_SUPERTYPE_DEPTH: int = 64

# Literals this short are operators, separators or single glyphs.
MIN_STRING_LENGTH: int = 3

WIDGET_BASE_CLASSES: frozenset[str] = frozenset(
    {
        "Widget",
        "StatelessWidget",
        "StatefulWidget",
        "InheritedWidget",
        "RenderObjectWidget",
        "LeafRenderObjectWidget",
        "SingleChildRenderObjectWidget",
        "MultiChildRenderObjectWidget",
        "ProxyWidget",
        "ParentDataWidget",
        "InheritedTheme",
        "PreferredSizeWidget",
        "ImplicitlyAnimatedWidget",
        "AnimatedWidget",
    }
)

ACCEPTABLE_PROPERTIES: frozenset[str] = frozenset(
    {
        # Accessibility and semantics
        "semantics_label",
        "exclude_semantics",
        # Technical identifiers
        "restoration_id",
        "hero_tag",
        "key",
        "debug_label",
        # Asset and resource references
        "font_family",
        "package",
        "name",
        "asset",
        "tooltip",
        # Layout and text enums passed as strings
        "text_direction",
        "locale",
        "material_type",
        "clip_behavior",
        "cross_axis_alignment",
        "main_axis_alignment",
        "text_align",
        "text_baseline",
        "overflow",
        "soft_wrap",
        "text_scale_factor",
    }
)

TECHNICAL_PATTERNS: tuple[re.Pattern[str], ...] = (
    # URLs
    re.compile(r"^\w+://"),
    # Email addresses
    re.compile(r"^[\w\-.]+@[\w\-.]+\.\w+"),
    # Hex colors
    re.compile(r"^#[0-9A-Fa-f]{3,8}"),
    # Numbers with optional units
    re.compile(r"^\d+(\.\d+)?[a-zA-Z]*"),
    # CONSTANT_CASE
    re.compile(r"^[A-Z][A-Z0-9]*_[A-Z0-9_]*"),
    # snake_case
    re.compile(r"^[a-z]+_[a-z_]+"),
    # Absolute file paths
    re.compile(r"^/[\w/\-.]*"),
    # Dotted notation (package.asset)
    re.compile(r"^\w+\.\w+"),
    # File names with extensions
    re.compile(r"^[\w\-]+\.\w+"),
    # Identifiers mixing digits, underscores or hyphens with letters
    re.compile(r"^[a-zA-Z0-9]*[_\-0-9]+[a-zA-Z0-9_\-]*"),
)

IGNORE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"#\s*ignore:\s*avoid_hardcoded_strings_in_widgets"),
    re.compile(r"#\s*ignore_for_file:\s*avoid_hardcoded_strings_in_widgets"),
    re.compile(r"#\s*ignore:\s*hardcoded.string", re.IGNORECASE),
    re.compile(r"#\s*hardcoded.ok", re.IGNORECASE),
)

ASSETS_PREFIX: str = "assets/"
LIB_ASSETS_PREFIX: str = "lib/assets/"

GENERATED_ASSETS_ROOT: str = "Assets"

ASSET_FIX_PRIORITY: int = 70
