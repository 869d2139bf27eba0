"""Immutable caret coordinate and its single-step derivations."""

from __future__ import annotations

from dataclasses import dataclass

from vim_motion.buffer import LineSource, leading_whitespace_length

from .caret import CaretMode, line_length, require_mode


@dataclass(frozen=True, slots=True)
class Position:
    """``(line, character)`` under a fixed caret mode.

    Positions only carry coordinates. Anything that depends on line text
    takes the ``LineSource`` snapshot explicitly, so the same value can be
    checked against a newer snapshot with ``is_valid``.
    """

    line: int
    character: int
    mode: CaretMode

    def __post_init__(self) -> None:
        require_mode(self.mode)

    def with_coordinates(self, line: int, character: int) -> "Position":
        """Same mode, new coordinates. No validation is performed."""

        return Position(line, character, self.mode)

    def as_tuple(self) -> tuple[int, int]:
        return (self.line, self.character)

    # horizontal

    def left(self) -> "Position":
        if self.is_line_beginning():
            return self
        return self.with_coordinates(self.line, self.character - 1)

    def right(self, source: LineSource) -> "Position":
        if self.is_line_end(source):
            return self
        return self.with_coordinates(self.line, self.character + 1)

    # vertical

    def down(self, source: LineSource, desired_column: int) -> "Position":
        """One line down, landing on ``desired_column`` clamped to that line."""

        if source.is_last_line(self.line):
            return self
        target = self.line + 1
        column = min(line_length(source, target, self.mode), desired_column)
        return self.with_coordinates(target, column)

    def up(self, source: LineSource, desired_column: int) -> "Position":
        """One line up, landing on ``desired_column`` clamped to that line."""

        if self.line == 0:
            return self
        target = self.line - 1
        column = min(line_length(source, target, self.mode), desired_column)
        return self.with_coordinates(target, column)

    # line / document edges

    def line_begin(self) -> "Position":
        return self.with_coordinates(self.line, 0)

    def line_end(self, source: LineSource) -> "Position":
        return self.with_coordinates(
            self.line, line_length(source, self.line, self.mode)
        )

    def document_begin(self) -> "Position":
        return self.with_coordinates(0, 0)

    def document_end(self, source: LineSource) -> "Position":
        if source.line_count <= 0:
            return self.with_coordinates(0, 0)
        last = source.line_count - 1
        return self.with_coordinates(last, line_length(source, last, self.mode))

    # predicates

    def is_valid(self, source: LineSource) -> bool:
        if not isinstance(self.mode, CaretMode):
            return False
        if self.line < 0 or self.line >= source.line_count:
            return False
        if self.character < 0:
            return False
        return self.character <= line_length(source, self.line, self.mode)

    def is_line_beginning(self) -> bool:
        return self.character == 0

    def is_line_end(self, source: LineSource) -> bool:
        return self.character == line_length(source, self.line, self.mode)

    @staticmethod
    def first_non_blank_character(source: LineSource, line: int) -> int:
        return leading_whitespace_length(source.line_text(line))


__all__ = ["Position"]
