"""
Terminal view of a laid-out day.

Lays out the events, then prints a rich table (in layout order)
and, per clash group, a small diagram of which events share a column.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Iterable

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from daylayout.config import DEFAULT_CONFIG, CalendarConfig
from daylayout.layout import lay_out_groups
from daylayout.timeline import show_two_digits


def _safe_str(x: Any) -> str:
    return "" if x is None else str(x)


def format_minutes(offset: int, start_hour: int = DEFAULT_CONFIG.start_hour) -> str:
    """
    Offset in minutes from start_hour:00 -> 'HH:MM' (24h).
    """
    total = start_hour * 60 + offset
    return f"{show_two_digits(total // 60)}:{show_two_digits(total % 60)}"


def _column_diagram(group: list[dict[str, Any]], start_hour: int) -> str:
    by_column: dict[int, list[dict[str, Any]]] = defaultdict(list)
    for ev in group:
        by_column[ev["column"]].append(ev)

    lines: list[str] = []
    for col_no in sorted(by_column):
        spans = "  ".join(
            f"[{format_minutes(ev['start'], start_hour)}-{format_minutes(ev['end'], start_hour)}]"
            for ev in by_column[col_no]
        )
        lines.append(f"  col {col_no}: {spans}")
    return "\n".join(lines)


def render_day(
    events: Iterable[dict[str, Any]],
    console: Console | None = None,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> None:
    """
    Lay out events and print the day.
    """
    console = console or Console()

    groups = lay_out_groups(events)
    if not groups:
        console.print("No events.")
        return

    table = Table(box=box.SIMPLE, title="Day layout")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Column", justify="right")
    table.add_column("Clashes", justify="right")
    table.add_column("Name")
    table.add_column("Location")

    for group in groups:
        for ev in group:
            clashes = ev["clashes"]
            table.add_row(
                format_minutes(ev["start"], config.start_hour),
                format_minutes(ev["end"], config.start_hour),
                str(ev["column"]),
                f"[yellow]{clashes}[/]" if clashes else str(clashes),
                escape(_safe_str(ev.get("name"))),
                escape(_safe_str(ev.get("location"))),
            )
    console.print(table)

    for i, group in enumerate(groups, start=1):
        width = group[0]["clashes"] + 1
        size = len(group)
        console.print(
            f"Group {i} ({size} event{'s' if size != 1 else ''}, {width} column{'s' if width != 1 else ''})"
        )
        console.print(_column_diagram(group, config.start_hour), markup=False)
