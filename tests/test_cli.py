"""
Tests for CLI entry points.

These tests focus on:
- Exit codes for good and bad input
- Files written by `layout --out` and `export`
  (always inside a temporary directory)
"""

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from daylayout.cli import build_parser, main


def _write_events(d: str, events) -> Path:
    p = Path(d) / "events.json"
    p.write_text(json.dumps(events), encoding="utf-8")
    return p


class TestCLI(unittest.TestCase):
    def test_command_is_required(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main([])
        self.assertNotEqual(ctx.exception.code, 0)

    def test_layout_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            src = _write_events(d, [{"start": 560, "end": 620}, {"start": 540, "end": 600}])
            out = Path(d) / "layout.json"
            with self.assertRaises(SystemExit) as ctx:
                main(["layout", str(src), "--out", str(out)])
            self.assertEqual(ctx.exception.code, 0)

            data = json.loads(out.read_text(encoding="utf-8"))
            self.assertEqual(
                data,
                [
                    {"start": 540, "end": 600, "clashes": 1, "column": 0},
                    {"start": 560, "end": 620, "clashes": 1, "column": 1},
                ],
            )

    def test_export_html(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            src = _write_events(d, {"events": [{"start": 30, "end": 150, "name": "Breakfast"}]})
            out = Path(d) / "day.html"
            with self.assertRaises(SystemExit) as ctx:
                main(["--width", "300", "export", str(src), str(out)])
            self.assertEqual(ctx.exception.code, 0)
            text = out.read_text(encoding="utf-8")
            self.assertIn("Breakfast", text)
            self.assertIn("width: 300px", text)

    def test_missing_file_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(SystemExit) as ctx:
                main(["show", str(Path(d) / "missing.json")])
            self.assertEqual(ctx.exception.code, 1)

    def test_directory_as_events_file_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(SystemExit) as ctx:
                main(["layout", d])
            self.assertEqual(ctx.exception.code, 1)

    def test_export_below_a_file_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            src = _write_events(d, [{"start": 0, "end": 10}])
            blocker = Path(d) / "blocker"
            blocker.write_text("", encoding="utf-8")
            with self.assertRaises(SystemExit) as ctx:
                main(["export", str(src), str(blocker / "day.html")])
            self.assertEqual(ctx.exception.code, 1)

    def test_export_is_reported_once(self) -> None:
        buf = io.StringIO()
        with tempfile.TemporaryDirectory() as d:
            out = Path(d) / "demo.html"
            with contextlib.redirect_stdout(buf):
                with self.assertRaises(SystemExit) as ctx:
                    main(["demo", "--html", str(out)])
            self.assertEqual(ctx.exception.code, 0)
        text = buf.getvalue()
        self.assertEqual(text.count("Exported 4 events"), 1)
        self.assertNotIn("Wrote 4 events", text)

    def test_invalid_event_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            src = _write_events(d, [{"start": 100, "end": 50}])
            with self.assertRaises(SystemExit) as ctx:
                main(["layout", str(src)])
            self.assertEqual(ctx.exception.code, 1)

    def test_invalid_config_exits_with_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main(["--start-hour", "22", "demo"])
        self.assertEqual(ctx.exception.code, 1)

    def test_demo_with_html(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            out = Path(d) / "demo.html"
            with self.assertRaises(SystemExit) as ctx:
                main(["demo", "--html", str(out)])
            self.assertEqual(ctx.exception.code, 0)
            self.assertEqual(out.read_text(encoding="utf-8").count('class="event"'), 4)

    def test_parser_global_options(self) -> None:
        args = build_parser().parse_args(["--height", "480", "-v", "demo"])
        self.assertEqual(args.height, 480)
        self.assertTrue(args.verbose)
        self.assertEqual(args.command, "demo")


if __name__ == "__main__":
    unittest.main()
