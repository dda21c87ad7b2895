from __future__ import annotations

import json

import pytest

from timeline_svg import TimeUnit, parse_trace


def write_log(path, lines) -> None:
    path.write_text(
        "\n".join(line if isinstance(line, str) else json.dumps(line) for line in lines) + "\n",
        encoding="utf-8",
    )


def test_parse_trace(tmp_path) -> None:
    log = tmp_path / "trace.log"
    write_log(
        log,
        [
            {"type": "units", "units": "us"},
            {"type": "event", "name": "Process A", "start": 0, "end": 1, "location": "CPU 0"},
            "",
            {"type": "event", "name": "Process B", "start": 1, "end": 2, "location": "CPU 1"},
            {"type": "trigger", "from": "CPU 0", "to": "CPU 1", "time": 1},
        ],
    )

    timeline = parse_trace(log)

    assert timeline.units is TimeUnit.MICROSECONDS
    assert [event.name for event in timeline.events] == ["Process A", "Process B"]
    assert len(timeline.triggers) == 1
    assert (timeline.start_time, timeline.end_time) == (0, 2)


def test_malformed_lines_are_skipped(tmp_path, capsys) -> None:
    log = tmp_path / "trace.log"
    write_log(
        log,
        [
            {"type": "event", "name": "ok", "start": 0, "end": 1, "location": "lane"},
            "{not json",
            {"type": "event", "name": "no location", "start": 0, "end": 1},
            {"type": "span", "name": "?"},
            {"type": "trigger", "from": "lane", "to": "lane", "time": -4},
            [1, 2, 3],
        ],
    )

    timeline = parse_trace(log)

    assert [event.name for event in timeline.events] == ["ok"]
    assert timeline.triggers == ()
    err = capsys.readouterr().err
    for line_number in (2, 3, 4, 5, 6):
        assert f"[warn] skipping malformed line {line_number}:" in err
    assert "missing key 'location'" in err


def test_layout_options_are_forwarded(tmp_path) -> None:
    log = tmp_path / "trace.log"
    write_log(log, [{"type": "event", "name": "a", "start": 0, "end": 1, "location": "lane"}])

    timeline = parse_trace(log, row_height=40, column_width=50)

    assert timeline.layout.row_height == 40
    assert timeline.layout.column_width == 50


def test_missing_trace_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        parse_trace(tmp_path / "absent.log")
