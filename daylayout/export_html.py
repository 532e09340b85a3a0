"""
HTML export.

Writes a standalone page showing one day:
- time marks on the left (every half hour)
- one background box per hour
- one absolutely positioned box per event
"""

from __future__ import annotations

import html
import logging
from pathlib import Path
from typing import Any, Iterable

from daylayout.config import DEFAULT_CONFIG, CalendarConfig
from daylayout.geometry import event_style
from daylayout.layout import lay_out_day
from daylayout.timeline import TimeMark, hour_boxes, time_marks

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Sample name"
DEFAULT_LOCATION = "Sample location"


def _stylesheet(config: CalendarConfig) -> str:
    hour_height = config.height / (config.end_hour - config.start_hour)
    return f"""
body {{ font-family: sans-serif; background: #ececec; }}
.calendar {{ display: flex; padding: 20px; }}
.timings {{ width: 80px; text-align: right; padding-right: 8px; }}
.timeMark {{ height: {hour_height / 2:g}px; line-height: 0; font-weight: bold; }}
.timeMark span {{ margin-left: 4px; font-weight: normal; font-size: 0.8em; color: #666; }}
.timeMark-minor {{ font-weight: normal; font-size: 0.8em; color: #666; }}
.calendar-body {{ position: relative; width: {config.width}px; height: {config.height}px; }}
.background {{ position: absolute; top: 0; left: 0; right: 0; bottom: 0; }}
.hourBox {{ height: {hour_height:g}px; box-sizing: border-box; border-top: 1px solid #ddd; }}
.event {{ position: absolute; box-sizing: border-box; background: #fff; border: 1px solid #d5d5d5;
  border-left: 4px solid #4b6ea9; overflow: hidden; }}
.event-body {{ padding: 4px 8px; }}
.event-name {{ margin: 0; color: #4b6ea9; font-weight: bold; }}
.event-location {{ margin: 0; font-size: 0.8em; }}
""".strip()


def _time_mark_html(mark: TimeMark) -> str:
    css_class = "timeMark" if mark.is_major else "timeMark timeMark-minor"
    suffix = f"<span>{mark.am_pm}</span>" if mark.is_major else ""
    return f'<div class="{css_class}">{mark.label}{suffix}</div>'


def _event_html(event: dict[str, Any], config: CalendarConfig) -> str:
    style = "; ".join(f"{k}: {v}" for k, v in event_style(event, config).items())
    name = html.escape(str(event.get("name") or DEFAULT_NAME))
    location = html.escape(str(event.get("location") or DEFAULT_LOCATION))
    return (
        f'<div class="event" style="{style}">'
        f'<div class="event-body">'
        f'<p class="event-name">{name}</p>'
        f'<p class="event-location">{location}</p>'
        f"</div></div>"
    )


def render_day_html(laid_out: list[dict[str, Any]], config: CalendarConfig = DEFAULT_CONFIG) -> str:
    """
    Build the HTML page for events that already went through lay_out_day.
    """
    lines: list[str] = []
    lines.append("<!DOCTYPE html>")
    lines.append('<html lang="en">')
    lines.append("<head>")
    lines.append('<meta charset="utf-8">')
    lines.append("<title>Day layout</title>")
    lines.append(f"<style>\n{_stylesheet(config)}\n</style>")
    lines.append("</head>")
    lines.append("<body>")
    lines.append('<div class="calendar">')

    lines.append('<div class="timings">')
    for mark in time_marks(config.start_hour, config.end_hour):
        lines.append(_time_mark_html(mark))
    lines.append("</div>")

    lines.append('<div class="calendar-body">')
    lines.append('<div class="background">')
    for _ in hour_boxes(config.start_hour, config.end_hour):
        lines.append('<div class="hourBox"></div>')
    lines.append("</div>")
    for event in laid_out:
        lines.append(_event_html(event, config))
    lines.append("</div>")

    lines.append("</div>")
    lines.append("</body>")
    lines.append("</html>")
    return "\n".join(lines) + "\n"


def export_day_to_html(
    events: Iterable[dict[str, Any]],
    out_path: str | Path,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> int:
    """
    Lay out events and write the day view to an .html file.
    Returns number of exported events.
    """
    laid_out = lay_out_day(events)

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_day_html(laid_out, config), encoding="utf-8")

    logger.debug("Wrote %d events to %s", len(laid_out), out)
    return len(laid_out)
