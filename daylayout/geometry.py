"""
Pixel geometry of laid-out events.

Vertical position comes from start/end mapped linearly onto the canvas
height; horizontal position splits the canvas width into clashes + 1
equal slots and uses the event's column.
"""

from __future__ import annotations

from typing import Any

from daylayout.config import DEFAULT_CONFIG, CalendarConfig
from daylayout.model import EventPosition


def event_position(event: dict[str, Any], config: CalendarConfig = DEFAULT_CONFIG) -> EventPosition:
    """
    Insets of the event box from the canvas edges.

    The event must come out of lay_out_day (needs 'column' and 'clashes').
    """
    scale = config.height / config.visible_minutes

    top = event["start"] * scale
    bottom = config.height - event["end"] * scale

    column = event["column"]
    event_width = config.width / (event["clashes"] + 1)

    left = column * event_width
    right = config.width - (column + 1) * event_width

    return EventPosition(top=top, bottom=bottom, left=left, right=right)


def _px(value: float) -> str:
    # 540.0 -> '540px', 333.33 -> '333.33px'
    return f"{round(value, 2):g}px"


def event_style(event: dict[str, Any], config: CalendarConfig = DEFAULT_CONFIG) -> dict[str, str]:
    """
    CSS declarations for an absolutely positioned event box.
    """
    pos = event_position(event, config)
    return {
        "top": _px(pos.top),
        "bottom": _px(pos.bottom),
        "left": _px(pos.left),
        "right": _px(pos.right),
    }
