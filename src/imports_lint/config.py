"""Configuration of the imports rule.

Configuration is a flat key-value object, usually read from a JSON file::

    {
        "imports": {
            "ignore_case": true,
            "ignore_duplicated": false,
            "ignore_order": false,
            "ignore_position": false,
            "severity": "error"
        }
    }
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Literal, NamedTuple

from imports_lint._types import UnknownJson

Severity = Literal["warning", "error"]

SEVERITIES: tuple[Severity, ...] = ("warning", "error")

RULE_SECTION = "imports"


class UnknownConfigurationError(ValueError):
    """Raised when a configuration value cannot be understood."""


class ImportsConfig(NamedTuple):
    """Toggles and severity of the imports rule.

    The defaults are the rule's built-in configuration, which sorts
    case-insensitively.
    """

    ignore_case: bool = True
    ignore_duplicated: bool = False
    ignore_order: bool = False
    ignore_position: bool = False
    severity: Severity = "warning"


DEFAULT_CONFIG = ImportsConfig()


def _decode_severity(raw: UnknownJson) -> Severity:
    """Decode a severity name."""
    if raw == "warning":
        return "warning"
    if raw == "error":
        return "error"
    msg = f"Unknown severity {raw!r}, expected one of {', '.join(SEVERITIES)}"
    raise UnknownConfigurationError(msg)


def config_from_mapping(raw: UnknownJson | Mapping[str, UnknownJson]) -> ImportsConfig:
    """Build a configuration from a key-value object.

    A toggle is enabled only when its value is exactly ``True``; absent keys
    and values of any other type leave it disabled.

    Args:
        raw: Parsed configuration value.

    Returns:
        The decoded configuration.

    Raises:
        UnknownConfigurationError: If ``raw`` is not a mapping, or names an
            unknown severity.
    """
    if not isinstance(raw, Mapping):
        msg = f"Expected a key-value configuration, got {type(raw).__name__}"
        raise UnknownConfigurationError(msg)

    severity: Severity = "warning"
    if "severity" in raw:
        severity = _decode_severity(raw["severity"])

    return ImportsConfig(
        ignore_case=raw.get("ignore_case") is True,
        ignore_duplicated=raw.get("ignore_duplicated") is True,
        ignore_order=raw.get("ignore_order") is True,
        ignore_position=raw.get("ignore_position") is True,
        severity=severity,
    )


def load_config_file(path: Path) -> ImportsConfig:
    """Load a configuration from a JSON file.

    If the top-level object has an ``"imports"`` object, that section is
    used; otherwise the whole object is.

    Raises:
        UnknownConfigurationError: If the file is not valid JSON or its
            content is not a valid configuration.
        RuntimeError: If the file cannot be read.
    """
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as exc:
        raise RuntimeError(f"failed to read {path}: {exc}") from exc
    try:
        raw: UnknownJson = json.loads(text)
    except json.JSONDecodeError as exc:
        raise UnknownConfigurationError(f"Invalid JSON in {path}: {exc}") from exc

    if isinstance(raw, dict):
        section = raw.get(RULE_SECTION)
        if isinstance(section, dict):
            return config_from_mapping(section)
    return config_from_mapping(raw)


def describe_config(config: ImportsConfig) -> str:
    """Render a configuration for display."""
    return (
        f"{config.severity}"
        f", ignore_case: {str(config.ignore_case).lower()}"
        f", ignore_duplicated: {str(config.ignore_duplicated).lower()}"
        f", ignore_order: {str(config.ignore_order).lower()}"
        f", ignore_position: {str(config.ignore_position).lower()}"
    )


__all__ = [
    "DEFAULT_CONFIG",
    "RULE_SECTION",
    "SEVERITIES",
    "ImportsConfig",
    "Severity",
    "UnknownConfigurationError",
    "config_from_mapping",
    "describe_config",
    "load_config_file",
]
