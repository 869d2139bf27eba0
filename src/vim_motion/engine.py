"""Session-level motion dispatch over one buffer snapshot."""

from __future__ import annotations

from typing import Optional

from vim_motion.buffer import LineSource
from vim_motion.config import MotionConfig
from vim_motion.motion import (
    BIG_WORD_CLASSIFIER,
    WORD_CLASSIFIER,
    BoundaryClassifier,
    MotionRegistry,
    Position,
    load_default_motions,
)
from vim_motion.runtime import telemetry


class MotionEngine:
    """Owns the compiled classifiers and resolves named motions.

    The engine is stateless with respect to the caret: every call takes a
    ``Position`` and returns a new one. Vertical callers thread
    ``desired_column`` themselves.
    """

    def __init__(
        self,
        source: LineSource,
        *,
        config: Optional[MotionConfig] = None,
        registry: Optional[MotionRegistry] = None,
        word_classifier: Optional[BoundaryClassifier] = None,
        logger_name: str = "vim_motion.engine",
    ) -> None:
        self.source = source
        self.config = config or MotionConfig()
        if word_classifier is None:
            if self.config.word_punctuation == WORD_CLASSIFIER.punctuation:
                word_classifier = WORD_CLASSIFIER
            else:
                word_classifier = BoundaryClassifier(self.config.word_punctuation)
        self.word_classifier = word_classifier
        self.big_word_classifier = BIG_WORD_CLASSIFIER
        if registry is None:
            registry = load_default_motions(MotionRegistry())
        self.registry = registry
        self._logger_name = logger_name

    def with_source(self, source: LineSource) -> "MotionEngine":
        """Engine over a new snapshot sharing this engine's classifiers."""

        return MotionEngine(
            source,
            config=self.config,
            registry=self.registry,
            word_classifier=self.word_classifier,
            logger_name=self._logger_name,
        )

    def apply(
        self,
        motion_id: str,
        position: Position,
        *,
        desired_column: Optional[int] = None,
        count: int = 1,
    ) -> Position:
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        motion = self.registry.get(motion_id)
        with telemetry.span(
            f"motion::{motion_id}",
            logger_name=self._logger_name,
            component="motion",
            metadata={"motion": motion_id, "count": count},
        ) as handle:
            current = position
            if motion.vertical:
                column = position.character if desired_column is None else desired_column
                for _ in range(count):
                    current = motion.handler(self, current, column)
            else:
                for _ in range(count):
                    current = motion.handler(self, current)
            handle.debug(
                "motion::resolved",
                start=position.as_tuple(),
                end=current.as_tuple(),
            )
        return current

    def left(self, position: Position, *, count: int = 1) -> Position:
        return self.apply("left", position, count=count)

    def right(self, position: Position, *, count: int = 1) -> Position:
        return self.apply("right", position, count=count)

    def up(
        self,
        position: Position,
        desired_column: Optional[int] = None,
        *,
        count: int = 1,
    ) -> Position:
        return self.apply("up", position, desired_column=desired_column, count=count)

    def down(
        self,
        position: Position,
        desired_column: Optional[int] = None,
        *,
        count: int = 1,
    ) -> Position:
        return self.apply(
            "down", position, desired_column=desired_column, count=count
        )

    def line_begin(self, position: Position) -> Position:
        return self.apply("line_begin", position)

    def line_end(self, position: Position) -> Position:
        return self.apply("line_end", position)

    def first_non_blank(self, position: Position) -> Position:
        return self.apply("first_non_blank", position)

    def document_begin(self, position: Position) -> Position:
        return self.apply("document_begin", position)

    def document_end(self, position: Position) -> Position:
        return self.apply("document_end", position)

    def word_left(self, position: Position, *, count: int = 1) -> Position:
        return self.apply("word_left", position, count=count)

    def word_right(self, position: Position, *, count: int = 1) -> Position:
        return self.apply("word_right", position, count=count)

    def word_end(self, position: Position, *, count: int = 1) -> Position:
        return self.apply("word_end", position, count=count)

    def big_word_left(self, position: Position, *, count: int = 1) -> Position:
        return self.apply("big_word_left", position, count=count)

    def big_word_right(self, position: Position, *, count: int = 1) -> Position:
        return self.apply("big_word_right", position, count=count)

    def big_word_end(self, position: Position, *, count: int = 1) -> Position:
        return self.apply("big_word_end", position, count=count)

    def paragraph_begin(self, position: Position, *, count: int = 1) -> Position:
        return self.apply("paragraph_begin", position, count=count)

    def paragraph_end(self, position: Position, *, count: int = 1) -> Position:
        return self.apply("paragraph_end", position, count=count)


__all__ = ["MotionEngine"]
