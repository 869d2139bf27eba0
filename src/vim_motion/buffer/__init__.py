"""Read-only buffer contract and the in-memory snapshot implementation."""

from .document import BufferDocument
from .source import BufferValidationError, LineSource
from .validation import ensure_line, leading_whitespace_length

__all__ = [
    "BufferDocument",
    "BufferValidationError",
    "LineSource",
    "ensure_line",
    "leading_whitespace_length",
]
