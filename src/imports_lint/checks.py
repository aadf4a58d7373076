"""Position, order and duplicate checks over comment-stripped code lines.

Each check takes the code lines of one file, the file path and the rule
configuration, and returns its violations in ascending line order. A check
disabled by its configuration toggle returns nothing and does no work.

Violations:
- imports-position: import declared after the first line of code
- imports-order: imports not alphabetically sorted
- imports-testable-order: testable import placed before a plain one
- imports-duplicate: same import declared more than once
"""

from __future__ import annotations

from collections.abc import Sequence

from imports_lint.classify import ImportKind, classify, is_import, is_testable, normalize
from imports_lint.config import ImportsConfig
from imports_lint.lines import RawLine
from imports_lint.rules import Violation

KIND_POSITION = "imports-position"
KIND_ORDER = "imports-order"
KIND_TESTABLE_ORDER = "imports-testable-order"
KIND_DUPLICATE = "imports-duplicate"

REASON_POSITION = "imports must be declared at the top of the file"
REASON_ORDER = "imports must be alphabetically sorted"
REASON_TESTABLE_ORDER = "testable imports must be grouped after normal imports"
REASON_DUPLICATE = "duplicated imports should be avoided"


def _violation(
    path: str, line: RawLine, kind: str, reason: str, config: ImportsConfig
) -> Violation:
    return Violation(
        file=path,
        line_no=line.index,
        kind=kind,
        severity=config.severity,
        reason=reason,
    )


# =============================================================================
# Position
# =============================================================================


def check_position(
    code_lines: Sequence[RawLine], path: str, config: ImportsConfig
) -> list[Violation]:
    """Report every import that follows the first line of code."""
    if config.ignore_position:
        return []

    first_code = next(
        (i for i, line in enumerate(code_lines) if classify(line) is ImportKind.NOT_IMPORT),
        None,
    )
    if first_code is None:
        return []

    return [
        _violation(path, line, KIND_POSITION, REASON_POSITION, config)
        for line in code_lines[first_code + 1 :]
        if is_import(line)
    ]


# =============================================================================
# Order
# =============================================================================


def is_greater(lhs: RawLine, rhs: RawLine, ignore_case: bool) -> bool:
    """Return True if ``lhs`` must be placed after ``rhs``.

    Testable imports sort after every plain import; within each group the
    normalized text decides.
    """
    lhs_testable = is_testable(lhs)
    rhs_testable = is_testable(rhs)
    if lhs_testable != rhs_testable:
        return lhs_testable
    return normalize(lhs.content, lower=ignore_case) > normalize(rhs.content, lower=ignore_case)


def check_order(
    code_lines: Sequence[RawLine], path: str, config: ImportsConfig
) -> list[Violation]:
    """Report each adjacent pair of imports that is out of order.

    The violation is located at the second line of the pair.
    """
    if config.ignore_order:
        return []

    imports = [line for line in code_lines if is_import(line)]
    violations: list[Violation] = []
    for current, following in zip(imports, imports[1:]):
        if not is_greater(current, following, config.ignore_case):
            continue
        if is_testable(current) and not is_testable(following):
            kind, reason = KIND_TESTABLE_ORDER, REASON_TESTABLE_ORDER
        else:
            kind, reason = KIND_ORDER, REASON_ORDER
        violations.append(_violation(path, following, kind, reason, config))
    return violations


# =============================================================================
# Duplicates
# =============================================================================


def check_duplicates(
    code_lines: Sequence[RawLine], path: str, config: ImportsConfig
) -> list[Violation]:
    """Report every repeated import after its first occurrence."""
    if config.ignore_duplicated:
        return []

    def key(line: RawLine) -> str:
        return normalize(line.content, lower=config.ignore_case)

    # sorted() is stable, so the first of equal keys is the earliest line.
    seen: set[str] = set()
    duplicates: list[RawLine] = []
    for line in sorted((line for line in code_lines if is_import(line)), key=key):
        text = key(line)
        if text in seen:
            duplicates.append(line)
        else:
            seen.add(text)

    return [
        _violation(path, line, KIND_DUPLICATE, REASON_DUPLICATE, config)
        for line in sorted(duplicates, key=lambda line: line.index)
    ]


__all__ = [
    "KIND_DUPLICATE",
    "KIND_ORDER",
    "KIND_POSITION",
    "KIND_TESTABLE_ORDER",
    "REASON_DUPLICATE",
    "REASON_ORDER",
    "REASON_POSITION",
    "REASON_TESTABLE_ORDER",
    "check_duplicates",
    "check_order",
    "check_position",
    "is_greater",
]
