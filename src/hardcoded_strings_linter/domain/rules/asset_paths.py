"""Asset path -> generated symbol conversion and call rewrite synthesis."""

from hardcoded_strings_linter.domain.constants import (
    ASSETS_PREFIX,
    GENERATED_ASSETS_ROOT,
    LIB_ASSETS_PREFIX,
)
from hardcoded_strings_linter.domain.entities import PathInfo


class PathToSymbolConverter:
    """
    Maps a raw asset path onto the generated assets API.

    ``assets/icons/home_icon.svg``   -> ``Assets.icons.homeIcon``
    ``lib/assets/images/logo.png``   -> ``Assets.lib.assets.images.logo``

    Directory segments and the file's base name (extension dropped) are
    converted from snake_case to camelCase. Paths outside the two recognised
    prefixes, or with nothing after the prefix, do not convert.
    """

    @staticmethod
    def snake_to_camel(value: str) -> str:
        parts = value.split("_")
        if len(parts) == 1:
            return value
        head, *rest = parts
        return head + "".join(part[0].upper() + part[1:] for part in rest if part)

    @staticmethod
    def parse_path(raw_path: str) -> PathInfo | None:
        if raw_path.startswith(LIB_ASSETS_PREFIX):
            remainder = raw_path[len(LIB_ASSETS_PREFIX):]
            is_lib = True
        elif raw_path.startswith(ASSETS_PREFIX):
            remainder = raw_path[len(ASSETS_PREFIX):]
            is_lib = False
        else:
            return None
        segments = tuple(segment for segment in remainder.split("/") if segment)
        if not segments:
            return None
        return PathInfo(segments=segments, is_lib_prefixed=is_lib)

    @classmethod
    def convert(cls, raw_path: str) -> str | None:
        info = cls.parse_path(raw_path)
        if info is None:
            return None

        *directories, file_name = info.segments
        base_name = file_name[: file_name.rindex(".")] if "." in file_name else file_name

        symbol_parts: list[str] = ["lib", "assets"] if info.is_lib_prefixed else []
        symbol_parts.extend(cls.snake_to_camel(d) for d in directories)
        symbol_parts.append(cls.snake_to_camel(base_name))
        return f"{GENERATED_ASSETS_ROOT}.{'.'.join(symbol_parts)}"


class RewriteBuilder:
    @staticmethod
    def build(symbol: str, remaining_args: list[str], suffix: str) -> str:
        """``<symbol>.<suffix>(<remaining args>)``"""
        return f"{symbol}.{suffix}({', '.join(remaining_args)})"
