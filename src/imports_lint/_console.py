"""Rich console wrapper for styled terminal output.

This module provides typed console functions for lint output.
All print statements in the codebase should use these functions instead.
"""

from __future__ import annotations

from typing import Protocol


class _RichConsole(Protocol):
    """Protocol for rich.console.Console interface."""

    def print(
        self,
        *objects: str,
        style: str | None = None,
        highlight: bool = True,
        markup: bool | None = None,
    ) -> None:
        """Print styled output to console."""
        ...


def _get_console(stderr: bool = False) -> _RichConsole:
    """Get rich Console instance with strict typing."""
    rich_console_mod = __import__("rich.console", fromlist=["Console"])
    console_cls = rich_console_mod.Console
    # Locations must stay on one line so editors can jump to them.
    console: _RichConsole = console_cls(stderr=stderr, soft_wrap=True, emoji=False)
    return console


# Module-level console instances
_console: _RichConsole = _get_console()
_err_console: _RichConsole = _get_console(stderr=True)


# =============================================================================
# Style Constants
# =============================================================================

STYLE_HEADER = "bold cyan"
STYLE_VALUE = "green"
STYLE_RULE = "magenta"
STYLE_WARNING = "yellow"
STYLE_ERROR = "bold red"
STYLE_SUCCESS = "bold green"
STYLE_INFO = "cyan"

_SEVERITY_STYLES = {
    "warning": STYLE_WARNING,
    "error": STYLE_ERROR,
}


# =============================================================================
# Output Functions
# =============================================================================


def log_header(text: str) -> None:
    """Print a section header with separator lines."""
    separator = "=" * 60
    _console.print(separator, style=STYLE_HEADER)
    _console.print(text, style=STYLE_HEADER)
    _console.print(separator, style=STYLE_HEADER)


def log_config(label: str, value: str | int | bool) -> None:
    """Print a configuration key-value pair."""
    _console.print(f"  [dim]{label}:[/dim] [{STYLE_VALUE}]{value}[/{STYLE_VALUE}]")


def log_info(text: str) -> None:
    """Print an informational message."""
    _console.print(text, style=STYLE_INFO, markup=False)


def log_rule_summary(name: str, violations: int) -> None:
    """Print the violation count of one rule."""
    style = STYLE_WARNING if violations else STYLE_SUCCESS
    _console.print(f"  [{STYLE_RULE}]{name}[/{STYLE_RULE}]: [{style}]{violations} violations[/{style}]")


def log_violation(location: str, severity: str, kind: str, reason: str) -> None:
    """Print a single violation to stderr, styled by severity."""
    style = _SEVERITY_STYLES.get(severity, STYLE_WARNING)
    _err_console.print(
        f"  {location}: {severity} {kind} {reason}",
        style=style,
        highlight=False,
        markup=False,
    )


def log_success(text: str) -> None:
    """Print a success message."""
    _console.print(text, style=STYLE_SUCCESS, markup=False)


def log_error(text: str) -> None:
    """Print an error message to stderr."""
    _err_console.print(text, style=STYLE_ERROR, highlight=False, markup=False)


__all__ = [
    "log_config",
    "log_error",
    "log_header",
    "log_info",
    "log_rule_summary",
    "log_success",
    "log_violation",
]
