"""Lint import declarations: at the top of the file, sorted and unique."""

from imports_lint.config import ImportsConfig, UnknownConfigurationError, config_from_mapping
from imports_lint.lines import RawLine, SourceFile, strip_comments
from imports_lint.rules import Rule, Violation
from imports_lint.rules.imports_rule import RULE_DESCRIPTION, ImportsRule, validate

__all__ = [
    "ImportsConfig",
    "ImportsRule",
    "RULE_DESCRIPTION",
    "RawLine",
    "Rule",
    "SourceFile",
    "UnknownConfigurationError",
    "Violation",
    "config_from_mapping",
    "strip_comments",
    "validate",
]
