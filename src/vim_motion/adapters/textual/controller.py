"""Drives a Textual ``TextArea`` cursor with named motions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from vim_motion.engine import MotionEngine
from vim_motion.motion import CaretMode, Position
from vim_motion.runtime import telemetry

from .source import TextAreaLineSource, location_to_position, position_to_location

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textual.widgets import TextArea


class TextAreaMotionController:
    """Applies motions to ``text_area.cursor_location``.

    Remembers the column a run of vertical motions started from, so moving
    through a short line and back restores the original column. Any
    non-vertical motion resets it.
    """

    def __init__(
        self,
        text_area: "TextArea",
        *,
        mode: CaretMode,
        engine: Optional[MotionEngine] = None,
    ) -> None:
        self.text_area = text_area
        self.mode = mode
        source = TextAreaLineSource.from_text_area(text_area)
        self.engine = (
            engine.with_source(source) if engine is not None else MotionEngine(source)
        )
        self.desired_column: Optional[int] = None

    def rebind(self) -> None:
        """Pick up a document the widget swapped in (e.g. after ``load_text``)."""

        self.engine = self.engine.with_source(
            TextAreaLineSource.from_text_area(self.text_area)
        )
        self.desired_column = None

    @property
    def position(self) -> Position:
        return location_to_position(self.text_area.cursor_location, self.mode)

    def move(self, motion_id: str, *, count: int = 1) -> Position:
        start = self.position
        motion = self.engine.registry.get(motion_id)
        if motion.vertical:
            if self.desired_column is None:
                self.desired_column = start.character
            target = self.engine.apply(
                motion_id,
                start,
                desired_column=self.desired_column,
                count=count,
            )
        else:
            target = self.engine.apply(motion_id, start, count=count)
            self.desired_column = None

        self.text_area.cursor_location = position_to_location(target)
        telemetry.record_event(
            "cursor.move",
            level="debug",
            data={
                "motion": motion_id,
                "from": start.as_tuple(),
                "to": target.as_tuple(),
            },
            logger_name="vim_motion.adapters.textual",
        )
        return target


__all__ = ["TextAreaMotionController"]
