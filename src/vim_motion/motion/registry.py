"""Registry of named motions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional

from .position import Position

MotionHandler = Callable[..., Position]


@dataclass(frozen=True, slots=True)
class MotionRef:
    """A motion callable plus the metadata the engine dispatches on.

    Handlers are called as ``handler(engine, position)``; vertical handlers
    additionally receive ``desired_column``.
    """

    id: str
    handler: MotionHandler
    description: str = ""
    vertical: bool = False

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("MotionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")


class UnknownMotionError(KeyError):
    """Raised when a motion id has not been registered."""

    def __init__(self, motion_id: str) -> None:
        super().__init__(motion_id)
        self.motion_id = motion_id

    def __str__(self) -> str:
        return f"Motion '{self.motion_id}' is not registered"


class MotionConflictError(RuntimeError):
    """Raised when registering a motion id that already exists."""

    def __init__(self, motion: MotionRef, existing: MotionRef) -> None:
        super().__init__(f"Motion '{motion.id}' is already registered")
        self.motion = motion
        self.existing = existing


class MotionRegistry:
    def __init__(self) -> None:
        self._motions: Dict[str, MotionRef] = {}

    def register(self, motion: MotionRef, *, replace: bool = False) -> MotionRef:
        existing = self._motions.get(motion.id)
        if existing is not None and not replace:
            raise MotionConflictError(motion, existing)
        self._motions[motion.id] = motion
        return motion

    def unregister(self, motion_id: str) -> Optional[MotionRef]:
        return self._motions.pop(motion_id, None)

    def get(self, motion_id: str) -> MotionRef:
        try:
            return self._motions[motion_id]
        except KeyError as exc:
            raise UnknownMotionError(motion_id) from exc

    def __contains__(self, motion_id: object) -> bool:
        return motion_id in self._motions

    def __iter__(self) -> Iterator[MotionRef]:
        return iter(self._motions.values())

    def __len__(self) -> int:
        return len(self._motions)

    def ids(self) -> tuple[str, ...]:
        return tuple(self._motions)


__all__ = [
    "MotionConflictError",
    "MotionHandler",
    "MotionRef",
    "MotionRegistry",
    "UnknownMotionError",
]
