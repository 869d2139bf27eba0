"""Caret modes and the per-mode line length rule."""

from __future__ import annotations

from enum import Enum

from vim_motion.buffer import LineSource


class CaretMode(str, Enum):
    """Whether the end-of-line slot is itself a valid caret offset."""

    INCLUSIVE = "inclusive"  # valid offsets: [0, len]
    EXCLUSIVE = "exclusive"  # valid offsets: [0, len - 1], or [0, 0] on empty lines


class CaretModeError(TypeError):
    """Raised when a caret mode is missing or not a ``CaretMode`` member."""

    def __init__(self, mode: object) -> None:
        super().__init__(f"Unhandled caret mode: {mode!r}")
        self.mode = mode


def require_mode(mode: object) -> CaretMode:
    if not isinstance(mode, CaretMode):
        raise CaretModeError(mode)
    return mode


def line_length(source: LineSource, line: int, mode: CaretMode) -> int:
    """Largest valid caret offset on ``line`` under ``mode``.

    ``line`` is not bounds-checked here; callers stay within the source.
    """

    if mode is CaretMode.EXCLUSIVE:
        return max(len(source.line_text(line)) - 1, 0)
    if mode is CaretMode.INCLUSIVE:
        return len(source.line_text(line))
    raise CaretModeError(mode)


__all__ = ["CaretMode", "CaretModeError", "line_length", "require_mode"]
