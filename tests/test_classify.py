"""Tests for imports_lint.classify module."""

from __future__ import annotations

import pytest

from imports_lint.classify import ImportKind, classify, is_import, is_testable, normalize
from imports_lint.lines import RawLine


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("import UIKit", ImportKind.PLAIN),
        ("   import UIKit  ", ImportKind.PLAIN),
        ("import struct Test.Struct", ImportKind.PLAIN),
        ("@testable import Test", ImportKind.TESTABLE),
        ("\t@testable import Test", ImportKind.TESTABLE),
        ("@testeable import Test", ImportKind.NOT_IMPORT),
        ("Import UIKit", ImportKind.NOT_IMPORT),
        ("importUIKit", ImportKind.NOT_IMPORT),
        ("struct Test { }", ImportKind.NOT_IMPORT),
        ("", ImportKind.NOT_IMPORT),
    ],
)
def test_classify(content: str, expected: ImportKind) -> None:
    """Test classification by trimmed, case-sensitive prefix."""
    assert classify(RawLine(1, content)) is expected


def test_testable_is_not_plain() -> None:
    """Test a testable import is classified only as testable."""
    line = RawLine(1, "@testable import Test")
    assert is_testable(line) is True
    assert is_import(line) is True
    assert classify(line) is not ImportKind.PLAIN


def test_plain_is_not_testable() -> None:
    line = RawLine(1, "import Test")
    assert is_import(line) is True
    assert is_testable(line) is False


def test_normalize_trims() -> None:
    assert normalize("  import UIKit \t") == "import UIKit"


def test_normalize_lowercases_when_asked() -> None:
    assert normalize(" import UIKit ", lower=True) == "import uikit"
