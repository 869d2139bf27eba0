"""``LineSource`` view over a Textual ``TextArea`` document."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from vim_motion.buffer import ensure_line, leading_whitespace_length
from vim_motion.motion import CaretMode, Position

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textual.widgets.text_area import DocumentBase
    from textual.widgets import TextArea

Location = Tuple[int, int]  # (row, column), as used by TextArea


class TextAreaLineSource:
    """Reads lines straight from a Textual document.

    The document is live; hold the widget still (no edits) while a motion
    runs against it.
    """

    def __init__(self, document: "DocumentBase") -> None:
        self.document = document

    @classmethod
    def from_text_area(cls, text_area: "TextArea") -> "TextAreaLineSource":
        return cls(text_area.document)

    @property
    def line_count(self) -> int:
        return self.document.line_count

    def line_text(self, line: int) -> str:
        return self.document.get_line(ensure_line(self.line_count, line))

    def first_non_whitespace_offset(self, line: int) -> int:
        return leading_whitespace_length(self.line_text(line))

    def is_first_line(self, line: int) -> bool:
        return line <= 0

    def is_last_line(self, line: int) -> bool:
        return line >= self.line_count - 1


def position_to_location(position: Position) -> Location:
    return position.as_tuple()


def location_to_position(location: Location, mode: CaretMode) -> Position:
    row, column = location
    return Position(row, column, mode)


__all__ = [
    "Location",
    "TextAreaLineSource",
    "location_to_position",
    "position_to_location",
]
