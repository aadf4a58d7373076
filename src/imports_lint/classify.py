"""Classification of code lines as import declarations."""

from __future__ import annotations

from enum import Enum

from imports_lint.lines import RawLine

IMPORT_PREFIX = "import "
TESTABLE_PREFIX = "@testable import "


class ImportKind(Enum):
    """What a code line declares."""

    NOT_IMPORT = "not-import"
    PLAIN = "plain"
    TESTABLE = "testable"


def normalize(content: str, lower: bool = False) -> str:
    """Trim surrounding whitespace, optionally case-folding the result."""
    normalized = content.strip()
    return normalized.lower() if lower else normalized


def classify(line: RawLine) -> ImportKind:
    """Classify a line by its trimmed, case-sensitive prefix.

    The testable prefix contains the plain one, so it is tested first.
    """
    text = normalize(line.content)
    if text.startswith(TESTABLE_PREFIX):
        return ImportKind.TESTABLE
    if text.startswith(IMPORT_PREFIX):
        return ImportKind.PLAIN
    return ImportKind.NOT_IMPORT


def is_import(line: RawLine) -> bool:
    return classify(line) is not ImportKind.NOT_IMPORT


def is_testable(line: RawLine) -> bool:
    return classify(line) is ImportKind.TESTABLE


__all__ = [
    "IMPORT_PREFIX",
    "TESTABLE_PREFIX",
    "ImportKind",
    "classify",
    "is_import",
    "is_testable",
    "normalize",
]
