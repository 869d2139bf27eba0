"""In-memory line snapshot implementing ``LineSource``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from .validation import ensure_line, leading_whitespace_length


@dataclass(frozen=True, slots=True)
class BufferDocument:
    """Immutable list-of-lines snapshot.

    Holds at least one line. Derive a new document with ``replace`` rather
    than mutating; positions computed against an older snapshot have to be
    re-validated against the new one.
    """

    _lines: Tuple[str, ...] = field(default=("",))
    version: int = 0

    def __post_init__(self) -> None:
        lines = tuple(self._lines)
        object.__setattr__(self, "_lines", lines or ("",))

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        lines = text.splitlines()
        if not lines:
            lines = [""]
        elif text.endswith(("\n", "\r")):
            lines.append("")
        return cls(_lines=tuple(lines))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BufferDocument":
        return cls(_lines=tuple(lines))

    def snapshot(self) -> Sequence[str]:
        return self._lines

    def replace(self, *, lines: Iterable[str]) -> "BufferDocument":
        """Return a new document with ``lines`` and a bumped version."""

        return BufferDocument(_lines=tuple(lines), version=self.version + 1)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_text(self, line: int) -> str:
        return self._lines[ensure_line(self.line_count, line)]

    def first_non_whitespace_offset(self, line: int) -> int:
        return leading_whitespace_length(self.line_text(line))

    def is_first_line(self, line: int) -> bool:
        return line <= 0

    def is_last_line(self, line: int) -> bool:
        return line >= self.line_count - 1

    @property
    def text(self) -> str:
        return "\n".join(self._lines)
