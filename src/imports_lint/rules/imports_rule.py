"""The imports rule: imports at the top of the file, sorted and unique."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from imports_lint.checks import check_duplicates, check_order, check_position
from imports_lint.config import DEFAULT_CONFIG, ImportsConfig
from imports_lint.lines import RawLine, SourceFile, strip_comments
from imports_lint.rules import Violation


class RuleDescription(NamedTuple):
    """Identifier, documentation and examples of a rule."""

    identifier: str
    name: str
    description: str
    non_triggering_examples: tuple[str, ...]
    triggering_examples: tuple[str, ...]


RULE_DESCRIPTION = RuleDescription(
    identifier="imports",
    name="Imports",
    description="Imports should be at the top of the file and alphabetically sorted.",
    non_triggering_examples=(
        "",
        "import UIKit",
        "@testable import Test",
        "import UIKit\n@testeable import Test",
        "import AVKit.AVError\nimport enum Test.Enum\nimport GameKit\nimport struct Test.Struct",
        "import Foundation\n\nimport UIKit",
        "import Foundation\n\nstruct Test { }",
        "@testable import Test\n\nstruct Test { }",
        "struct Test { }",
    ),
    triggering_examples=(
        "import UIKit\nimport Foundation",
        "@testable import Test\nimport Foundation",
        "import Foundation\n\nstruct Test { }\nimport Test",
        "@testable import Test\nimport Foundation\nstruct Test { }",
        "struct Test { }\n\nimport Foundation",
        "struct Test { }\n\n@testable import Foundation",
        "import UIKit\nimport UIKit",
    ),
)


def validate(lines: Iterable[RawLine], path: str, config: ImportsConfig) -> list[Violation]:
    """Run the position, order and duplicate checks over one file's lines."""
    code_lines = strip_comments(lines)
    violations: list[Violation] = []
    violations.extend(check_position(code_lines, path, config))
    violations.extend(check_order(code_lines, path, config))
    violations.extend(check_duplicates(code_lines, path, config))
    return violations


class ImportsRule:
    """Rule adapter exposing ``validate`` over a whole source file."""

    name = RULE_DESCRIPTION.identifier

    def __init__(self, config: ImportsConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def validate(self, source: SourceFile) -> list[Violation]:
        return validate(source.lines, source.path, self.config)


__all__ = ["RULE_DESCRIPTION", "ImportsRule", "RuleDescription", "validate"]
