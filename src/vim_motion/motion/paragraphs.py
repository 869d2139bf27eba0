"""Paragraph motions (``{`` and ``}``).

Only empty lines separate paragraphs; a line holding whitespace belongs
to the paragraph around it.
"""

from __future__ import annotations

from vim_motion.buffer import LineSource

from .position import Position


def is_paragraph_separator(source: LineSource, line: int) -> bool:
    return source.line_text(line) == ""


def paragraph_end(position: Position, source: LineSource) -> Position:
    current = position

    # reach a paragraph first
    while is_paragraph_separator(source, current.line):
        if source.is_last_line(current.line):
            break
        current = current.down(source, 0)

    while not is_paragraph_separator(source, current.line):
        if source.is_last_line(current.line):
            break
        current = current.down(source, 0)

    return current.line_end(source)


def paragraph_begin(position: Position, source: LineSource) -> Position:
    current = position

    while is_paragraph_separator(source, current.line):
        if source.is_first_line(current.line):
            break
        current = current.up(source, 0)

    while current.line > 0 and not is_paragraph_separator(source, current.line):
        current = current.up(source, 0)

    return current.line_begin()


__all__ = ["is_paragraph_separator", "paragraph_begin", "paragraph_end"]
