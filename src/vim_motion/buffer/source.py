"""Read-only line provider contract consumed by the motion core."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSource(Protocol):
    """Snapshot of a line-oriented buffer.

    Motions call into the source several times per invocation and assume
    the content does not change in between; owners that mutate the
    underlying text must serialize edits against motion calls.
    """

    @property
    def line_count(self) -> int: ...

    def line_text(self, line: int) -> str:
        """Return the text of ``line`` without its line terminator."""
        ...

    def first_non_whitespace_offset(self, line: int) -> int:
        """Return the length of the leading whitespace run of ``line``."""
        ...

    def is_first_line(self, line: int) -> bool: ...

    def is_last_line(self, line: int) -> bool: ...


class BufferValidationError(RuntimeError):
    """Raised when a line index falls outside the buffer snapshot."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


__all__ = ["LineSource", "BufferValidationError"]
