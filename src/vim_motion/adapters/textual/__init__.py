"""Textual ``TextArea`` integration."""

from .controller import TextAreaMotionController
from .source import (
    Location,
    TextAreaLineSource,
    location_to_position,
    position_to_location,
)

__all__ = [
    "Location",
    "TextAreaLineSource",
    "TextAreaMotionController",
    "location_to_position",
    "position_to_location",
]
