"""
CLI (Command Line Interface).

Quick terminal commands, e.g.:

    daylayout layout <events.json> [--out layout.json]
    daylayout show <events.json>
    daylayout export <events.json> <day.html>
    daylayout demo [--html day.html]

Global options adjust the canvas (--width, --height, --start-hour, --end-hour)
and logging (--verbose). Event times are minutes after --start-hour.
"""

from __future__ import annotations

import argparse
import json
import logging

from rich.console import Console

from daylayout.config import CalendarConfig, config_from_args
from daylayout.display import render_day
from daylayout.export_html import export_day_to_html
from daylayout.layout import lay_out_day
from daylayout.logger import setup_logging
from daylayout.model import InvalidEventError
from daylayout.sample import sample_events
from daylayout.storage import load_events, save_layout

logger = logging.getLogger(__name__)

console = Console()


def _cmd_layout(args: argparse.Namespace) -> int:
    """
    Print (or save) the laid-out events as JSON.
    """
    laid_out = lay_out_day(load_events(args.events))

    out_path = (args.out or "").strip()
    if out_path:
        save_layout(laid_out, out_path)
        console.print(f"Laid out {len(laid_out)} events to: {out_path}")
    else:
        console.print_json(json.dumps(laid_out, ensure_ascii=False))
    return 0


def _cmd_show(args: argparse.Namespace, config: CalendarConfig) -> int:
    render_day(load_events(args.events), console=console, config=config)
    return 0


def _cmd_export(args: argparse.Namespace, config: CalendarConfig) -> int:
    """
    Export the day view into an .html file.
    """
    out_path = (args.out or "").strip()
    if not out_path:
        console.print("Please provide output .html path.")
        return 1

    n = export_day_to_html(load_events(args.events), out_path, config)
    console.print(f"Exported {n} events to: {out_path}")
    return 0


def _cmd_demo(args: argparse.Namespace, config: CalendarConfig) -> int:
    """
    Lay out the built-in sample day.
    """
    events = sample_events()
    render_day(events, console=console, config=config)

    if args.html:
        n = export_day_to_html(events, args.html, config)
        console.print(f"Exported {n} events to: {args.html}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="daylayout", description="Lay out clashing events of one day")
    parser.add_argument("--width", type=int, default=None, help="Canvas width in px (default 600)")
    parser.add_argument("--height", type=int, default=None, help="Canvas height in px (default 720)")
    parser.add_argument("--start-hour", type=int, default=None, help="First visible hour (default 9)")
    parser.add_argument("--end-hour", type=int, default=None, help="Last visible hour (default 21)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_layout = sub.add_parser("layout", help="Print laid-out events as JSON")
    p_layout.add_argument("events", type=str, help="Events JSON file")
    p_layout.add_argument("--out", "-o", type=str, default=None, help="Write JSON to this file instead")

    p_show = sub.add_parser("show", help="Show the day layout in the terminal")
    p_show.add_argument("events", type=str, help="Events JSON file")

    p_export = sub.add_parser("export", help="Export the day layout to .html")
    p_export.add_argument("events", type=str, help="Events JSON file")
    p_export.add_argument("out", type=str, help="Output file path (e.g. day.html)")

    p_demo = sub.add_parser("demo", help="Lay out the sample day")
    p_demo.add_argument("--html", type=str, default=None, help="Also export to this .html file")

    return parser


def _dispatch(args: argparse.Namespace) -> int:
    config = config_from_args(args)

    if args.command == "layout":
        return _cmd_layout(args)
    if args.command == "show":
        return _cmd_show(args, config)
    if args.command == "export":
        return _cmd_export(args, config)
    return _cmd_demo(args, config)


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        code = _dispatch(args)
    except FileNotFoundError as exc:
        console.print(f"File not found: {exc.filename}", markup=False)
        code = 1
    except OSError as exc:
        console.print(f"Cannot access {exc.filename}: {exc.strerror}", markup=False)
        code = 1
    except InvalidEventError as exc:
        logger.debug("Rejected event %r", exc.event)
        console.print(str(exc), markup=False)
        code = 1
    except ValueError as exc:
        console.print(f"Error: {exc}", markup=False)
        code = 1

    raise SystemExit(code)
