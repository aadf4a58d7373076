"""Source lines and comment stripping.

The comment stripper is line oriented, not a lexer. It recognizes ``//`` line
comments and ``/* ... */`` block comments and reduces a file to the lines that
carry code, keeping their original 1-based line numbers.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import NamedTuple

LINE_COMMENT = "//"
BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"

_LINE_COMMENT_BEFORE_BLOCK = re.compile(r"//.*/\*")


class RawLine(NamedTuple):
    """A physical source line."""

    index: int
    content: str


# Lines kept by the comment stripper are still plain RawLine values.
CodeLine = RawLine


class SourceFile(NamedTuple):
    """The lines of one source file and the path they were read from."""

    path: str
    lines: tuple[RawLine, ...]

    @classmethod
    def from_text(cls, text: str, path: str = "") -> SourceFile:
        """Split text into numbered lines.

        An empty string yields no lines at all.
        """
        return cls(path=path, lines=to_raw_lines(split_lines(text)))

    @classmethod
    def from_path(cls, path: Path) -> SourceFile:
        """Read a file from disk."""
        return cls(path=str(path), lines=to_raw_lines(read_lines(path)))


def read_lines(path: Path) -> list[str]:
    """Read file contents as a list of lines.

    Uses utf-8-sig to handle optional BOM.
    """
    try:
        text = path.read_text(encoding="utf-8-sig", errors="strict")
    except (OSError, UnicodeDecodeError) as exc:
        raise RuntimeError(f"failed to read {path}: {exc}") from exc
    return split_lines(text)


def split_lines(text: str) -> list[str]:
    """Split text on line feeds only, dropping a trailing carriage return.

    Form feeds and other separators that str.splitlines() honours stay inside
    the line, so numbering matches what an editor shows.
    """
    if not text:
        return []
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines


def to_raw_lines(contents: Iterable[str]) -> tuple[RawLine, ...]:
    """Number lines starting at 1."""
    return tuple(RawLine(index=i, content=c) for i, c in enumerate(contents, start=1))


class ScanState(Enum):
    """States of the comment scanner."""

    NORMAL = "normal"
    IN_BLOCK_COMMENT = "in-block-comment"


class CommentScanner:
    """Finite-state scanner deciding, line by line, which lines hold code.

    ``feed`` consumes one line and returns whether it should be kept. The
    scanner enters ``IN_BLOCK_COMMENT`` on a ``/*`` that is not closed on the
    same line, and leaves it on the first later line containing ``*/``. That
    closing line is dropped even if code follows the marker.
    """

    def __init__(self) -> None:
        self.state = ScanState.NORMAL

    def feed(self, content: str) -> bool:
        if self.state is ScanState.IN_BLOCK_COMMENT:
            if BLOCK_CLOSE in content:
                self.state = ScanState.NORMAL
            return False
        return self._scan_normal(content.strip())

    def _scan_normal(self, text: str) -> bool:
        if _LINE_COMMENT_BEFORE_BLOCK.search(text) is not None:
            # The block opener sits inside a line comment.
            return not text.startswith(LINE_COMMENT)
        if BLOCK_OPEN in text and BLOCK_CLOSE in text:
            return not text.startswith(BLOCK_OPEN)
        if BLOCK_OPEN in text:
            self.state = ScanState.IN_BLOCK_COMMENT
            return not text.startswith(BLOCK_OPEN)
        return text != "" and not text.startswith(LINE_COMMENT)


def strip_comments(lines: Iterable[RawLine]) -> list[RawLine]:
    """Return the lines that lie outside comments, in their original order.

    Blank lines and lines starting with a comment marker are dropped. A block
    comment that is never closed swallows every remaining line.
    """
    scanner = CommentScanner()
    return [line for line in lines if scanner.feed(line.content)]


__all__ = [
    "BLOCK_CLOSE",
    "BLOCK_OPEN",
    "LINE_COMMENT",
    "CodeLine",
    "CommentScanner",
    "RawLine",
    "ScanState",
    "SourceFile",
    "read_lines",
    "split_lines",
    "strip_comments",
    "to_raw_lines",
]
