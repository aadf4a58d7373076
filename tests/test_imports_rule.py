"""Tests for imports_lint.rules.imports_rule module."""

from __future__ import annotations

from collections import Counter

import pytest

from imports_lint.checks import KIND_DUPLICATE, KIND_ORDER, KIND_POSITION, KIND_TESTABLE_ORDER
from imports_lint.config import ImportsConfig
from imports_lint.lines import SourceFile
from imports_lint.rules import Rule, Violation
from imports_lint.rules.imports_rule import RULE_DESCRIPTION, ImportsRule, validate


def _validate(text: str, config: ImportsConfig | None = None) -> list[Violation]:
    source = SourceFile.from_text(text, path="Test.swift")
    return validate(source.lines, source.path, config if config is not None else ImportsConfig())


def _kinds(violations: list[Violation]) -> list[tuple[int, str]]:
    return sorted((v.line_no, v.kind) for v in violations)


class TestRuleDescription:
    """Tests for the static rule description."""

    def test_identifier(self) -> None:
        assert RULE_DESCRIPTION.identifier == "imports"
        assert RULE_DESCRIPTION.name == "Imports"

    @pytest.mark.parametrize("example", RULE_DESCRIPTION.non_triggering_examples)
    def test_non_triggering_examples(self, example: str) -> None:
        assert _validate(example) == []

    @pytest.mark.parametrize("example", RULE_DESCRIPTION.triggering_examples)
    def test_triggering_examples(self, example: str) -> None:
        assert _validate(example) != []


class TestValidate:
    """End-to-end scenarios over raw file text."""

    def test_unsorted(self) -> None:
        violations = _validate("import UIKit\nimport Foundation")
        assert _kinds(violations) == [(2, KIND_ORDER)]
        assert "alphabetically sorted" in violations[0].reason

    def test_testable_before_plain(self) -> None:
        assert _kinds(_validate("@testable import Test\nimport Foundation")) == [
            (2, KIND_TESTABLE_ORDER)
        ]

    def test_import_after_code(self) -> None:
        violations = _validate("import Foundation\n\nstruct Test {}\nimport Test")
        assert _kinds(violations) == [(4, KIND_POSITION)]

    def test_duplicate(self) -> None:
        assert _kinds(_validate("import UIKit\nimport UIKit")) == [(2, KIND_DUPLICATE)]

    def test_empty(self) -> None:
        assert _validate("") == []

    def test_position_and_order_both_report(self) -> None:
        """Test the checks run independently on the same line."""
        violations = _validate("import B\nstruct Test { }\nimport A")
        assert _kinds(violations) == [(3, KIND_ORDER), (3, KIND_POSITION)]

    def test_violations_carry_path_and_severity(self) -> None:
        violations = _validate("import B\nimport A", ImportsConfig(severity="error"))
        assert [(v.file, v.severity) for v in violations] == [("Test.swift", "error")]

    def test_lines_after_form_feed_keep_editor_numbers(self) -> None:
        violations = _validate("let a = 1 \x0c x\nimport B\nimport A")
        assert _kinds(violations) == [(2, KIND_POSITION), (3, KIND_ORDER), (3, KIND_POSITION)]

    def test_comments_hide_imports(self) -> None:
        text = (
            "// Copyright\n"
            "/*\n"
            " import Zzz\n"
            "*/\n"
            "import Foundation // comment\n"
            "import UIKit\n"
            "\n"
            "class View { }\n"
        )
        assert _validate(text) == []


@pytest.mark.parametrize(
    ("flag", "silenced"),
    [
        ("ignore_position", (KIND_POSITION,)),
        ("ignore_order", (KIND_ORDER, KIND_TESTABLE_ORDER)),
        ("ignore_duplicated", (KIND_DUPLICATE,)),
    ],
)
def test_each_toggle_disables_only_its_check(flag: str, silenced: tuple[str, ...]) -> None:
    """Test each toggle removes exactly its own kinds of violation."""
    text = (
        "import UIKit\n"
        "import Foundation\n"
        "import UIKit\n"
        "@testable import App\n"
        "import Bar\n"
        "struct Test { }\n"
        "import Zzz"
    )
    before = Counter(v.kind for v in _validate(text))
    after = Counter(v.kind for v in _validate(text, ImportsConfig(**{flag: True})))

    for kind in (KIND_POSITION, KIND_ORDER, KIND_TESTABLE_ORDER, KIND_DUPLICATE):
        assert before[kind] > 0
        if kind in silenced:
            assert after[kind] == 0
        else:
            assert after[kind] == before[kind]


class TestImportsRule:
    """Tests for the ImportsRule adapter."""

    def test_default_config(self) -> None:
        rule = ImportsRule()
        assert rule.name == "imports"
        assert rule.config == ImportsConfig()

    def test_validate_source(self) -> None:
        rule: Rule = ImportsRule(ImportsConfig(ignore_case=False))
        source = SourceFile.from_text("import b\nimport A", path="Sources/B.swift")
        violations = rule.validate(source)
        assert [(v.file, v.line_no, v.kind) for v in violations] == [
            ("Sources/B.swift", 2, KIND_ORDER)
        ]
