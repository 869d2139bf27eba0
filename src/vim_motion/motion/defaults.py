"""Built-in motion set seeded into every engine registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from .paragraphs import paragraph_begin, paragraph_end
from .position import Position
from .registry import MotionRef, MotionRegistry
from .words import current_word_end_with, word_left_with, word_right_with

if TYPE_CHECKING:
    from vim_motion.engine import MotionEngine


def _left(engine: "MotionEngine", position: Position) -> Position:
    return position.left()


def _right(engine: "MotionEngine", position: Position) -> Position:
    return position.right(engine.source)


def _up(engine: "MotionEngine", position: Position, desired_column: int) -> Position:
    return position.up(engine.source, desired_column)


def _down(engine: "MotionEngine", position: Position, desired_column: int) -> Position:
    return position.down(engine.source, desired_column)


def _line_begin(engine: "MotionEngine", position: Position) -> Position:
    return position.line_begin()


def _line_end(engine: "MotionEngine", position: Position) -> Position:
    return position.line_end(engine.source)


def _first_non_blank(engine: "MotionEngine", position: Position) -> Position:
    column = Position.first_non_blank_character(engine.source, position.line)
    return position.with_coordinates(
        position.line,
        min(column, position.line_end(engine.source).character),
    )


def _document_begin(engine: "MotionEngine", position: Position) -> Position:
    return position.document_begin()


def _document_end(engine: "MotionEngine", position: Position) -> Position:
    return position.document_end(engine.source)


def _word_left(engine: "MotionEngine", position: Position) -> Position:
    return word_left_with(position, engine.source, engine.word_classifier)


def _word_right(engine: "MotionEngine", position: Position) -> Position:
    return word_right_with(position, engine.source, engine.word_classifier)


def _word_end(engine: "MotionEngine", position: Position) -> Position:
    return current_word_end_with(position, engine.source, engine.word_classifier)


def _big_word_left(engine: "MotionEngine", position: Position) -> Position:
    return word_left_with(position, engine.source, engine.big_word_classifier)


def _big_word_right(engine: "MotionEngine", position: Position) -> Position:
    return word_right_with(position, engine.source, engine.big_word_classifier)


def _big_word_end(engine: "MotionEngine", position: Position) -> Position:
    return current_word_end_with(position, engine.source, engine.big_word_classifier)


def _paragraph_begin(engine: "MotionEngine", position: Position) -> Position:
    return paragraph_begin(position, engine.source)


def _paragraph_end(engine: "MotionEngine", position: Position) -> Position:
    return paragraph_end(position, engine.source)


DEFAULT_MOTIONS: tuple[MotionRef, ...] = (
    MotionRef("left", _left, "One character left (h)"),
    MotionRef("right", _right, "One character right (l)"),
    MotionRef("up", _up, "One line up (k)", vertical=True),
    MotionRef("down", _down, "One line down (j)", vertical=True),
    MotionRef("line_begin", _line_begin, "Start of line (0)"),
    MotionRef("line_end", _line_end, "End of line ($)"),
    MotionRef("first_non_blank", _first_non_blank, "First non-blank (^)"),
    MotionRef("document_begin", _document_begin, "Start of document (gg)"),
    MotionRef("document_end", _document_end, "End of document (G)"),
    MotionRef("word_left", _word_left, "Previous word start (b)"),
    MotionRef("word_right", _word_right, "Next word start (w)"),
    MotionRef("word_end", _word_end, "Current word end (e)"),
    MotionRef("big_word_left", _big_word_left, "Previous WORD start (B)"),
    MotionRef("big_word_right", _big_word_right, "Next WORD start (W)"),
    MotionRef("big_word_end", _big_word_end, "Current WORD end (E)"),
    MotionRef("paragraph_begin", _paragraph_begin, "Paragraph start ({)"),
    MotionRef("paragraph_end", _paragraph_end, "Paragraph end (})"),
)


def load_default_motions(
    registry: MotionRegistry,
    *,
    include: Optional[Iterable[str]] = None,
    replace: bool = False,
) -> MotionRegistry:
    """Register the built-in motions, optionally only the ids in ``include``."""

    wanted = set(include) if include is not None else None
    for motion in DEFAULT_MOTIONS:
        if wanted is not None and motion.id not in wanted:
            continue
        registry.register(motion, replace=replace)
    return registry


__all__ = ["DEFAULT_MOTIONS", "load_default_motions"]
