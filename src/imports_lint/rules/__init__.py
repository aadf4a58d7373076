"""Lint rules and the value types they report.

A rule is anything with a ``name`` and a ``validate`` method taking one
source file; the runner depends on nothing else.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol

from imports_lint.config import Severity
from imports_lint.lines import SourceFile


class Violation(NamedTuple):
    """A single rule violation."""

    file: str
    line_no: int
    kind: str
    severity: Severity
    reason: str


class RuleReport(NamedTuple):
    """Summary of violations for a rule."""

    name: str
    violations: int


class Rule(Protocol):
    """Protocol for lint rules."""

    @property
    def name(self) -> str: ...

    def validate(self, source: SourceFile) -> list[Violation]: ...


__all__ = ["Rule", "RuleReport", "Violation"]
