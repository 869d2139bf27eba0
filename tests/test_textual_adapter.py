from __future__ import annotations

from dataclasses import dataclass

import pytest
from textual.widgets.text_area import Document

from vim_motion.adapters.textual import (
    TextAreaLineSource,
    TextAreaMotionController,
    location_to_position,
    position_to_location,
)
from vim_motion.buffer import BufferDocument, BufferValidationError, LineSource
from vim_motion.motion import CaretMode, Position


@dataclass
class FakeTextArea:
    """Just the surface the controller touches on a Textual ``TextArea``."""

    document: Document
    cursor_location: tuple[int, int] = (0, 0)


def make_text_area(text: str, cursor: tuple[int, int] = (0, 0)) -> FakeTextArea:
    return FakeTextArea(document=Document(text), cursor_location=cursor)


def test_line_source_reads_textual_document() -> None:
    source = TextAreaLineSource(Document("foo\n  bar"))

    assert isinstance(source, LineSource)
    assert source.line_count == 2
    assert source.line_text(1) == "  bar"
    assert source.first_non_whitespace_offset(1) == 2
    assert source.is_first_line(0)
    assert source.is_last_line(1)


def test_line_source_rejects_out_of_range_line() -> None:
    source = TextAreaLineSource(Document("foo"))

    with pytest.raises(BufferValidationError):
        source.line_text(3)


def test_location_conversion_round_trips() -> None:
    position = location_to_position((3, 4), CaretMode.INCLUSIVE)

    assert position == Position(3, 4, CaretMode.INCLUSIVE)
    assert position_to_location(position) == (3, 4)


def test_controller_moves_cursor_by_word() -> None:
    text_area = make_text_area("foo bar baz")
    controller = TextAreaMotionController(text_area, mode=CaretMode.EXCLUSIVE)

    controller.move("word_right")
    assert text_area.cursor_location == (0, 4)

    controller.move("word_right", count=2)
    assert text_area.cursor_location == (0, 10)


def test_controller_remembers_desired_column() -> None:
    text_area = make_text_area("abcdef\nab\nabcdef", cursor=(0, 5))
    controller = TextAreaMotionController(text_area, mode=CaretMode.EXCLUSIVE)

    controller.move("down")
    assert text_area.cursor_location == (1, 1)

    controller.move("down")
    assert text_area.cursor_location == (2, 5)
    assert controller.desired_column == 5


def test_horizontal_motion_resets_desired_column() -> None:
    text_area = make_text_area("abcdef\nab\nabcdef", cursor=(2, 5))
    controller = TextAreaMotionController(text_area, mode=CaretMode.EXCLUSIVE)

    controller.move("left")
    assert controller.desired_column is None

    controller.move("up")
    controller.move("up")
    assert text_area.cursor_location == (0, 4)


def test_controller_rebinds_to_replaced_document() -> None:
    text_area = make_text_area("foo")
    controller = TextAreaMotionController(text_area, mode=CaretMode.INCLUSIVE)

    text_area.document = Document("foo\nbar")
    controller.rebind()
    controller.move("document_end")

    assert text_area.cursor_location == (1, 3)


@pytest.mark.parametrize(
    "text",
    ["foo\nbar", "foo\n", "a\r\nb\n", "x\ry", "a\x0cb", "one two"],
)
def test_buffer_document_splits_lines_like_textual(text: str) -> None:
    assert BufferDocument.from_text(text).snapshot() == tuple(Document(text).lines)
