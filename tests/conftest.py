"""Pytest fixtures for imports_lint tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from imports_lint.config import ImportsConfig


@pytest.fixture
def case_sensitive() -> ImportsConfig:
    """Configuration comparing imports case-sensitively, all checks enabled."""
    return ImportsConfig(ignore_case=False)


@pytest.fixture
def swift_project(tmp_path: Path) -> Path:
    """Create a small project with one clean and one unsorted Swift file."""
    sources = tmp_path / "Sources"
    sources.mkdir()
    (sources / "Clean.swift").write_text(
        "import Foundation\nimport UIKit\n\nstruct Clean { }\n", encoding="utf-8"
    )
    (sources / "Unsorted.swift").write_text(
        "import UIKit\nimport Foundation\n\nstruct Unsorted { }\n", encoding="utf-8"
    )
    return tmp_path
