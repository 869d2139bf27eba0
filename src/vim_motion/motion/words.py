"""Word and WORD motions (``b``/``B``, ``w``/``W``, ``e``/``E``)."""

from __future__ import annotations

from vim_motion.buffer import LineSource

from .caret import line_length
from .classifier import BIG_WORD_CLASSIFIER, WORD_CLASSIFIER, BoundaryClassifier
from .position import Position


def _next_line_start(position: Position, source: LineSource) -> Position:
    # whitespace-only lines: first non-blank lies past the last caret slot
    target = position.line + 1
    column = min(
        source.first_non_whitespace_offset(target),
        line_length(source, target, position.mode),
    )
    return position.with_coordinates(target, column)


def word_left_with(
    position: Position, source: LineSource, classifier: BoundaryClassifier
) -> Position:
    """Start of the run before the caret, crossing to the previous line.

    From the leading whitespace (or column 0) of any line but the first,
    the previous line is searched as if the caret sat just past its end.
    """

    line = position.line
    character = position.character
    if not source.is_first_line(position.line) and (
        position.character <= source.first_non_whitespace_offset(position.line)
    ):
        line = position.line - 1
        character = line_length(source, line, position.mode) + 1

    for start in reversed(classifier.starts(source.line_text(line))):
        if start < character:
            return position.with_coordinates(line, start)

    if position.line == 0:
        return position.line_begin()
    return position.with_coordinates(position.line - 1, 0).line_end(source)


def word_right_with(
    position: Position, source: LineSource, classifier: BoundaryClassifier
) -> Position:
    """Start of the next run, or the next line's first non-blank."""

    last_line = source.is_last_line(position.line)
    if not last_line and position.character >= line_length(
        source, position.line, position.mode
    ):
        return _next_line_start(position, source)

    for start in classifier.starts(source.line_text(position.line)):
        if start > position.character:
            return position.with_coordinates(position.line, start)

    if last_line:
        return position.line_end(source)
    return _next_line_start(position, source)


def current_word_end_with(
    position: Position, source: LineSource, classifier: BoundaryClassifier
) -> Position:
    """Last character of the current or next run.

    At the end of a non-final line the search continues on the following
    line from column 0. When nothing qualifies the caret falls back to the
    end of its own line.
    """

    line = position.line
    character = position.character
    if not source.is_last_line(position.line) and position.character >= line_length(
        source, position.line, position.mode
    ):
        line = position.line + 1
        character = 0

    for end in classifier.ends(source.line_text(line)):
        if end > character:
            return position.with_coordinates(line, end)

    return position.line_end(source)


def word_left(
    position: Position,
    source: LineSource,
    classifier: BoundaryClassifier = WORD_CLASSIFIER,
) -> Position:
    return word_left_with(position, source, classifier)


def big_word_left(position: Position, source: LineSource) -> Position:
    return word_left_with(position, source, BIG_WORD_CLASSIFIER)


def word_right(
    position: Position,
    source: LineSource,
    classifier: BoundaryClassifier = WORD_CLASSIFIER,
) -> Position:
    return word_right_with(position, source, classifier)


def big_word_right(position: Position, source: LineSource) -> Position:
    return word_right_with(position, source, BIG_WORD_CLASSIFIER)


def word_end(
    position: Position,
    source: LineSource,
    classifier: BoundaryClassifier = WORD_CLASSIFIER,
) -> Position:
    return current_word_end_with(position, source, classifier)


def big_word_end(position: Position, source: LineSource) -> Position:
    return current_word_end_with(position, source, BIG_WORD_CLASSIFIER)


__all__ = [
    "big_word_end",
    "big_word_left",
    "big_word_right",
    "current_word_end_with",
    "word_end",
    "word_left",
    "word_left_with",
    "word_right",
    "word_right_with",
]
