"""Bounds helpers shared by line sources."""

from __future__ import annotations

import re

from .source import BufferValidationError

LEADING_WHITESPACE = re.compile(r"^\s*")


def ensure_line(line_count: int, line: int) -> int:
    if line < 0 or line >= line_count:
        raise BufferValidationError(
            f"Line {line} out of range for {line_count} line(s)", line=line
        )
    return line


def leading_whitespace_length(text: str) -> int:
    match = LEADING_WHITESPACE.match(text)
    return match.end() if match else 0


__all__ = ["ensure_line", "leading_whitespace_length", "LEADING_WHITESPACE"]
