"""
Reading event files and writing layout results.

Accepted input file formats:

    [{"start": 30, "end": 150}, ...]
    {"events": [{"start": 30, "end": 150}, ...]}

Unlike a user-state file, an events file is explicit input:
a missing or broken file is an error, not an empty day.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable


def load_events(path: str | Path) -> list[dict[str, Any]]:
    """
    Load a list of event dicts from a JSON file.

    Raises FileNotFoundError if the file is missing and ValueError
    if it is not valid JSON or has an unexpected shape.
    Event contents are checked later by lay_out_day.
    """
    events_path = Path(path)
    try:
        data = json.loads(events_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{events_path}: invalid JSON ({exc})") from exc

    if isinstance(data, dict):
        data = data.get("events")
    if not isinstance(data, list):
        raise ValueError(f"{events_path}: expected a list of events or {{\"events\": [...]}}")

    return data


def save_layout(events: Iterable[dict[str, Any]], path: str | Path) -> None:
    """
    Write laid-out events as JSON. Creates parent directories if needed.
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(list(events), indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
