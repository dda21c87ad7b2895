"""
Load a timeline from a trace log.

The log holds one JSON object per line. Three record types are understood:

    {"type": "event", "name": "Process A", "start": 0, "end": 1, "location": "CPU 0"}
    {"type": "trigger", "from": "CPU 0", "to": "CPU 1", "time": 1}
    {"type": "units", "units": "ms"}

Blank lines are ignored. Lines that cannot be parsed are reported on stderr and
skipped, so a partially corrupt log still renders.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, Union

from timeline_svg.timeline import Timeline


def apply_record(timeline: Timeline, payload: Dict[str, Any]) -> None:
    kind = payload.get("type")
    if kind == "event":
        timeline.add_event(
            str(payload["name"]),
            payload["start"],
            payload["end"],
            str(payload["location"]),
        )
    elif kind == "trigger":
        timeline.add_trigger(str(payload["from"]), str(payload["to"]), payload["time"])
    elif kind == "units":
        timeline.set_units(payload["units"])
    else:
        raise ValueError(f"unknown record type {kind!r}")


def parse_trace(path: Union[str, Path], **layout: int) -> Timeline:
    """Build a timeline from the trace log at ``path``.

    Keyword arguments are passed to :class:`Timeline` (``row_height``,
    ``column_width``, ``row_padding``, ``column_padding``).
    """
    timeline = Timeline(**layout)

    with Path(path).open("r", encoding="utf-8") as handle:
        for line_number, raw_line in enumerate(handle, start=1):
            line = raw_line.strip()
            if not line:
                continue

            try:
                payload = json.loads(line)
                if not isinstance(payload, dict):
                    raise ValueError("expected a JSON object")
                apply_record(timeline, payload)
            except KeyError as exc:
                print(
                    f"[warn] skipping malformed line {line_number}: missing key {exc}",
                    file=sys.stderr,
                )
            except (TypeError, ValueError) as exc:
                print(
                    f"[warn] skipping malformed line {line_number}: {exc}",
                    file=sys.stderr,
                )

    return timeline
