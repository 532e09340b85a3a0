"""
The sample day shown by `daylayout demo`.

Offsets are minutes after the start of the visible day (9:00 by default).
"""

from __future__ import annotations

import copy
from typing import Any

SAMPLE_EVENTS: list[dict[str, Any]] = [
    {"start": 30, "end": 150},
    {"start": 540, "end": 600},
    {"start": 560, "end": 620},
    {"start": 610, "end": 670},
]


def sample_events() -> list[dict[str, Any]]:
    return copy.deepcopy(SAMPLE_EVENTS)
