"""Rule runner and command line entry point.

Runs every configured rule over the given source files and reports the
violations.

Run with: imports-lint [--config FILE] [--strict] PATH [PATH ...]
"""

from __future__ import annotations

import argparse
from collections.abc import Generator, Iterable, Sequence
from pathlib import Path

from imports_lint._console import (
    log_config,
    log_error,
    log_header,
    log_info,
    log_rule_summary,
    log_success,
    log_violation,
)
from imports_lint.config import (
    DEFAULT_CONFIG,
    ImportsConfig,
    UnknownConfigurationError,
    describe_config,
    load_config_file,
)
from imports_lint.lines import SourceFile
from imports_lint.rules import Rule, RuleReport, Violation
from imports_lint.rules.imports_rule import ImportsRule

DEFAULT_EXTENSIONS = (".swift",)

EXCLUDED_DIRS = frozenset({".git", ".hg", ".svn", ".build", "Pods", "Carthage", "build"})

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_VIOLATIONS = 2


def iter_source_files(
    paths: Iterable[Path], extensions: tuple[str, ...]
) -> Generator[Path, None, None]:
    """Yield files to lint, recursing into directories.

    Files named explicitly are always yielded; files found inside directories
    must match one of ``extensions`` and lie outside excluded directories.
    A file reachable through several paths is yielded once.
    """
    seen: set[Path] = set()
    for path in paths:
        if path.is_dir():
            candidates = [
                found
                for found in sorted(path.rglob("*"))
                if found.is_file()
                and found.suffix in extensions
                and not any(part in EXCLUDED_DIRS for part in found.relative_to(path).parts)
            ]
        elif path.is_file():
            candidates = [path]
        else:
            continue
        for candidate in candidates:
            key = candidate.resolve()
            if key in seen:
                continue
            seen.add(key)
            yield candidate


def load_sources(files: Iterable[Path]) -> tuple[list[SourceFile], list[str]]:
    """Read every file, collecting read failures instead of stopping at the first."""
    sources: list[SourceFile] = []
    failures: list[str] = []
    for path in files:
        try:
            sources.append(SourceFile.from_path(path))
        except RuntimeError as exc:
            failures.append(str(exc))
    return sources, failures


def run_rules(
    rules: Sequence[Rule], sources: Iterable[SourceFile]
) -> dict[str, list[Violation]]:
    """Validate every source with every rule, grouping violations by rule name."""
    by_rule: dict[str, list[Violation]] = {rule.name: [] for rule in rules}
    for source in sources:
        for rule in rules:
            by_rule[rule.name].extend(rule.validate(source))
    return by_rule


def summarize(by_rule: dict[str, list[Violation]]) -> list[RuleReport]:
    """Count violations per rule."""
    return [RuleReport(name=name, violations=len(found)) for name, found in by_rule.items()]


def exit_code(violations: Sequence[Violation], strict: bool) -> int:
    """Map violations to a process exit code.

    Warnings fail the run only in strict mode.
    """
    if strict and violations:
        return EXIT_VIOLATIONS
    if any(v.severity == "error" for v in violations):
        return EXIT_VIOLATIONS
    return EXIT_OK


def _parse_extensions(raw: str) -> tuple[str, ...]:
    """Parse a comma-separated extension list, adding leading dots."""
    return tuple(
        e.strip() if e.strip().startswith(".") else f".{e.strip()}"
        for e in raw.split(",")
        if e.strip()
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="imports-lint",
        description="Check that imports are at the top of the file, sorted and unique",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Files or directories to check (directories are scanned recursively)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON configuration file",
    )
    parser.add_argument(
        "--extensions",
        type=str,
        default=",".join(DEFAULT_EXTENSIONS),
        help="Comma-separated extensions to scan in directories (default: .swift)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on warnings as well as errors",
    )
    return parser


def run(
    paths: Sequence[Path],
    config: ImportsConfig,
    extensions: tuple[str, ...],
    strict: bool,
) -> int:
    """Lint the given paths and report results, returning the exit code."""
    rules: list[Rule] = [ImportsRule(config)]

    log_header("Imports lint")
    log_config("Config", describe_config(config))
    log_config("Extensions", ", ".join(extensions))

    log_info(f"Scanning {len(paths)} path(s)...")
    sources, failures = load_sources(iter_source_files(paths, extensions))
    log_config("Files", len(sources))
    for failure in failures:
        log_error(f"ERROR: {failure}")

    by_rule = run_rules(rules, sources)
    violations = [v for found in by_rule.values() for v in found]

    log_header("Rule summary")
    for report in summarize(by_rule):
        log_rule_summary(report.name, report.violations)

    for v in violations:
        log_violation(f"{v.file}:{v.line_no}", v.severity, v.kind, v.reason)

    code = exit_code(violations, strict)
    if code == EXIT_OK and failures:
        return EXIT_USAGE
    if not violations and not failures:
        log_success("Lint checks passed: no violations found.")
    return code


def main(argv: list[str] | None = None) -> int:
    """Entry point for the imports-lint command."""
    args = build_parser().parse_args(argv)

    try:
        config = DEFAULT_CONFIG if args.config is None else load_config_file(Path(args.config))
        return run(
            [Path(p) for p in args.paths],
            config,
            _parse_extensions(args.extensions),
            args.strict,
        )
    except UnknownConfigurationError as exc:
        log_error(f"Unknown configuration: {exc}")
        return EXIT_USAGE
    except RuntimeError as exc:
        log_error(f"ERROR: {exc}")
        return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
