"""
Day layout.

Given the events of one day, assign every event a column so that
overlapping ("clashing") events can be drawn side by side.

Overlap rule (start inclusive, end inclusive, but touching is NOT a clash):
    starts_during(t, e):  e.start <= t < e.end
    ends_during(t, e):    e.start < t <= e.end

Pipeline:
    validate + copy -> sort by (start, end) -> group clashing events
    -> lay out each group in columns -> annotate column / clashes
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any, Iterable

from daylayout.model import InvalidEventError

logger = logging.getLogger(__name__)


def starts_during(time: int, event: dict[str, Any]) -> bool:
    return event["start"] <= time < event["end"]


def ends_during(time: int, event: dict[str, Any]) -> bool:
    return event["start"] < time <= event["end"]


def events_overlap(a: dict[str, Any], b: dict[str, Any]) -> bool:
    """
    True if the two events clash. An event ending exactly when
    the other one starts does not count as an overlap.
    """
    return (
        starts_during(a["start"], b)
        or ends_during(a["end"], b)
        or starts_during(b["start"], a)
        or ends_during(b["end"], a)
    )


def _compare_times(a: int, b: int) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_events(a: dict[str, Any], b: dict[str, Any]) -> int:
    """
    Earlier events first: by start time, then by end time.
    """
    by_start = _compare_times(a["start"], b["start"])
    return by_start if by_start != 0 else _compare_times(a["end"], b["end"])


def sort_events(events: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    return sorted(events, key=cmp_to_key(compare_events))


def find_clashing_event(event: dict[str, Any], others: list[dict[str, Any]]) -> dict[str, Any] | None:
    """
    Return the first event in `others` that overlaps `event`, or None.
    """
    for other in others:
        if events_overlap(event, other):
            return other
    return None


def group_clashing_events(events: list[dict[str, Any]]) -> list[list[dict[str, Any]]]:
    """
    Split time-sorted events into groups of clashing events.

    Each event joins the FIRST existing group that contains any event
    it overlaps, otherwise it opens a new group. Groups are never merged,
    even if a later event overlaps members of two different groups.
    """
    groups: list[list[dict[str, Any]]] = []

    for event in events:
        for group in groups:
            if find_clashing_event(event, group) is not None:
                group.append(event)
                break
        else:
            groups.append([event])

    return groups


def layout_in_columns(events: list[dict[str, Any]]) -> list[list[dict[str, Any]]]:
    """
    Greedy first-fit column assignment for one group.

    Every event goes into the lowest-numbered column that has no event
    overlapping it; a new column is opened when none fits.
    """
    columns: list[list[dict[str, Any]]] = []

    for event in events:
        for column in columns:
            if find_clashing_event(event, column) is None:
                column.append(event)
                break
        else:
            columns.append([event])

    return columns


def layout_group(group: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Annotate one group: column index + clashes (= number of columns - 1).
    Output is column-major (all of column 0, then column 1, ...).
    """
    columns = layout_in_columns(group)
    clashes = len(columns) - 1

    out: list[dict[str, Any]] = []
    for col_no, column in enumerate(columns):
        for event in column:
            out.append({**event, "clashes": clashes, "column": col_no})
    return out


def validate_events(events: Iterable[Any]) -> None:
    """
    Raise InvalidEventError for the first event that cannot be laid out.
    """
    for index, event in enumerate(events):
        if not isinstance(event, Mapping):
            raise InvalidEventError(event, index, "event must be a mapping")
        for key in ("start", "end"):
            if key not in event:
                raise InvalidEventError(event, index, f"missing '{key}'")
            value = event[key]
            # bool is an int subclass but not a time
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidEventError(event, index, f"'{key}' must be an integer")
        if event["start"] >= event["end"]:
            raise InvalidEventError(event, index, "start must be before end")


def lay_out_groups(events: Iterable[Mapping[str, Any]]) -> list[list[dict[str, Any]]]:
    """
    Same as lay_out_day, but keeps the clash groups apart
    (one list of annotated events per group, in group order).
    """
    items = list(events)
    validate_events(items)

    snapshot = [dict(copy.deepcopy(ev)) for ev in items]

    groups = group_clashing_events(sort_events(snapshot))
    return [layout_group(group) for group in groups]


def lay_out_day(events: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """
    Lay out the events of one day.

    Returns a NEW list with one dict per input event, each carrying
    every input field plus:
    - column:  horizontal slot inside its clash group
    - clashes: number of columns in the group minus one

    The input is validated first and copied, so the caller's data is
    never modified and a failure never returns a partial layout.
    """
    groups = lay_out_groups(events)

    laid_out: list[dict[str, Any]] = []
    for group in groups:
        laid_out.extend(group)

    logger.debug(
        "Laid out %d events in %d groups (max clashes: %d)",
        len(laid_out),
        len(groups),
        max((ev["clashes"] for ev in laid_out), default=0),
    )
    return laid_out
