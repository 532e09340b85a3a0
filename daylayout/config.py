"""
Calendar canvas configuration.

Event offsets are minutes from the start of the visible day
(start_hour:00). The visible range is mapped onto the canvas height;
with the defaults (9:00-21:00 on 720px) one minute is one pixel.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class CalendarConfig:
    width: int = 600
    height: int = 720
    start_hour: int = 9
    end_hour: int = 21

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive: {self.width}x{self.height}")
        if not (0 <= self.start_hour < self.end_hour <= 24):
            raise ValueError(f"Invalid hour range: {self.start_hour}-{self.end_hour}")

    @property
    def visible_minutes(self) -> int:
        return (self.end_hour - self.start_hour) * 60


DEFAULT_CONFIG = CalendarConfig()


def config_from_args(args: argparse.Namespace) -> CalendarConfig:
    """
    Build a CalendarConfig from CLI options; options left unset keep the defaults.
    """
    return CalendarConfig(
        width=args.width if args.width is not None else DEFAULT_CONFIG.width,
        height=args.height if args.height is not None else DEFAULT_CONFIG.height,
        start_hour=args.start_hour if args.start_hour is not None else DEFAULT_CONFIG.start_hour,
        end_hour=args.end_hour if args.end_hour is not None else DEFAULT_CONFIG.end_hour,
    )
