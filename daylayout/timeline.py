"""
Time axis helpers (labels on the left of the day view).
"""

from __future__ import annotations

from dataclasses import dataclass


def show_two_digits(x: int | str) -> str:
    s = str(x)
    return "0" + s if len(s) == 1 else s


def twelve_hour_time(hour: int, minutes: int) -> str:
    """
    12-hour clock label without AM/PM, e.g. (13, 30) -> '1:30'.
    """
    hour = hour % 12 if hour > 12 else hour
    return f"{hour}:{show_two_digits(minutes)}"


@dataclass(frozen=True)
class TimeMark:
    """
    One label on the time axis, e.g. 9:00 AM or 9:30.
    """

    hour: int
    minutes: int

    @property
    def is_major(self) -> bool:
        return self.minutes == 0

    @property
    def am_pm(self) -> str:
        return "AM" if self.hour < 12 else "PM"

    @property
    def label(self) -> str:
        return twelve_hour_time(self.hour, self.minutes)


def time_marks(start_hour: int, end_hour: int) -> list[TimeMark]:
    """
    One mark per half hour from start_hour:00 up to and including end_hour:00.
    """
    marks = [TimeMark(hour, minutes) for hour in range(start_hour, end_hour + 1) for minutes in (0, 30)]
    # the day ends at end_hour:00
    return marks[:-1]


def hour_boxes(start_hour: int, end_hour: int) -> list[int]:
    return list(range(start_hour, end_hour))
