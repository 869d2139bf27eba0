"""Caret coordinates, boundary classification and motion algorithms."""

from .caret import CaretMode, CaretModeError, line_length
from .classifier import (
    BIG_WORD_CLASSIFIER,
    BIG_WORD_PUNCTUATION,
    WORD_CLASSIFIER,
    WORD_PUNCTUATION,
    BoundaryClassifier,
    Run,
    RunKind,
)
from .defaults import DEFAULT_MOTIONS, load_default_motions
from .paragraphs import paragraph_begin, paragraph_end
from .position import Position
from .registry import (
    MotionConflictError,
    MotionRef,
    MotionRegistry,
    UnknownMotionError,
)
from .words import (
    big_word_end,
    big_word_left,
    big_word_right,
    current_word_end_with,
    word_end,
    word_left,
    word_left_with,
    word_right,
    word_right_with,
)

__all__ = [
    "BIG_WORD_CLASSIFIER",
    "BIG_WORD_PUNCTUATION",
    "BoundaryClassifier",
    "CaretMode",
    "CaretModeError",
    "DEFAULT_MOTIONS",
    "MotionConflictError",
    "MotionRef",
    "MotionRegistry",
    "Position",
    "Run",
    "RunKind",
    "UnknownMotionError",
    "WORD_CLASSIFIER",
    "WORD_PUNCTUATION",
    "big_word_end",
    "big_word_left",
    "big_word_right",
    "current_word_end_with",
    "line_length",
    "load_default_motions",
    "paragraph_begin",
    "paragraph_end",
    "word_end",
    "word_left",
    "word_left_with",
    "word_right",
    "word_right_with",
]
