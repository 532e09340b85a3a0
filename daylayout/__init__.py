"""
Side-by-side layout of clashing events on a single day.
"""

from daylayout.layout import events_overlap, lay_out_day
from daylayout.model import InvalidEventError

__all__ = ["events_overlap", "lay_out_day", "InvalidEventError"]
