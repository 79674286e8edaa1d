"""Applies textual source replacements, guarded by a LibCST re-parse."""

import logging

import libcst as cst

from hardcoded_strings_linter.domain.entities import FixResult, SourceReplacement
from hardcoded_strings_linter.domain.protocols import FileSystemProtocol, FixerGatewayProtocol

logger = logging.getLogger(__name__)


class SourceFixerGateway(FixerGatewayProtocol):
    """
    Gateway for applying replacements to one file in a single write.

    Replacements are taken by descending priority, then source order; one that
    overlaps an already accepted replacement is skipped. Edits are applied from
    the end of the file backwards so earlier offsets stay valid. The result must
    still parse as a module or the file is left untouched.
    """

    def __init__(self, filesystem: FileSystemProtocol) -> None:
        self._filesystem = filesystem

    @staticmethod
    def select(replacements: list[SourceReplacement]) -> list[SourceReplacement]:
        """Non-overlapping subset, in ascending offset order."""
        accepted: list[SourceReplacement] = []
        for candidate in sorted(replacements, key=lambda r: (-r.priority, r.start, r.end)):
            if any(candidate.overlaps(kept) for kept in accepted):
                logger.debug("Overlapping fix skipped: %s", candidate.message)
                continue
            accepted.append(candidate)
        return sorted(accepted, key=lambda r: r.start)

    @staticmethod
    def rewrite(data: bytes, replacements: list[SourceReplacement]) -> bytes:
        for replacement in sorted(replacements, key=lambda r: r.start, reverse=True):
            data = (
                data[: replacement.start]
                + replacement.replacement.encode("utf-8")
                + data[replacement.end:]
            )
        return data

    def apply(self, file_path: str, replacements: list[SourceReplacement]) -> FixResult:
        accepted = self.select(replacements)
        skipped = len(replacements) - len(accepted)
        if not accepted:
            return FixResult(file=file_path, applied=0, skipped=skipped, modified=False)

        try:
            original = self._filesystem.read_bytes(file_path)
            rewritten = self.rewrite(original, accepted)
            cst.parse_module(rewritten)
            if rewritten == original:
                return FixResult(file=file_path, applied=0, skipped=skipped, modified=False)
            self._filesystem.write_bytes(file_path, rewritten)
        except cst.ParserSyntaxError as exc:
            logger.warning("Fixes for %s would not parse; file left unchanged: %s", file_path, exc)
            return FixResult(file=file_path, applied=0, skipped=len(replacements), modified=False)
        except OSError as exc:
            logger.warning("Could not rewrite %s: %s", file_path, exc)
            return FixResult(file=file_path, applied=0, skipped=len(replacements), modified=False)

        return FixResult(file=file_path, applied=len(accepted), skipped=skipped, modified=True)
