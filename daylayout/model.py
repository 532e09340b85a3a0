"""
Central data model definitions used across the project.

Events themselves travel through the pipeline as plain dicts
({"start": int, "end": int, ...}) so that extra display fields
(name, location, ...) survive the layout untouched.

This module defines the box geometry produced by the presentation
layer and the error raised for invalid input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class InvalidEventError(ValueError):
    """
    Raised when an input event cannot be laid out
    (missing or non-integer times, or start >= end).
    """

    def __init__(self, event: Any, index: int, reason: str) -> None:
        self.event = event
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid event at index {index}: {reason} ({event!r})")


@dataclass(frozen=True)
class EventPosition:
    """
    Pixel insets of one event box inside the calendar canvas
    (CSS absolute positioning: distance from each edge).
    """

    top: float
    bottom: float
    left: float
    right: float

