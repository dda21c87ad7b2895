"""
Build a timeline of events and triggers and render it as SVG.

Events are drawn as labeled boxes on the swimlane named by their location, one
column wide, starting at their start time. Triggers are vertical connectors
between two swimlanes at a single instant; they do not create swimlanes, so
every trigger location must also be the location of at least one event by the
time the timeline is rendered.

Event colours are picked at random per distinct event name on every render.
Pass a seeded ``numpy.random.Generator`` as ``rng`` to make a render
reproducible.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

import numpy as np

from timeline_svg.geometry import Geometry
from timeline_svg.model import (
    COLUMN_PADDING,
    COLUMN_WIDTH,
    ROW_HEIGHT,
    ROW_PADDING,
    Event,
    Layout,
    TimeUnit,
    Trigger,
)
from timeline_svg.scene import Scene, build_scene
from timeline_svg.svg import to_bytes, write_svg


class Timeline:
    def __init__(
        self,
        row_height: int = ROW_HEIGHT,
        column_width: int = COLUMN_WIDTH,
        row_padding: int = ROW_PADDING,
        column_padding: int = COLUMN_PADDING,
    ) -> None:
        self.layout = Layout(
            row_height=row_height,
            column_width=column_width,
            row_padding=row_padding,
            column_padding=column_padding,
        )
        self.units = TimeUnit.NANOSECONDS
        self._start_time: Optional[int] = None
        self._end_time: Optional[int] = None
        self._events: List[Event] = []
        self._triggers: List[Trigger] = []

    def __repr__(self) -> str:
        return (
            f"Timeline(events={len(self._events)}, triggers={len(self._triggers)}, "
            f"start_time={self._start_time}, end_time={self._end_time})"
        )

    @property
    def start_time(self) -> Optional[int]:
        return self._start_time

    @property
    def end_time(self) -> Optional[int]:
        return self._end_time

    @property
    def events(self) -> Tuple[Event, ...]:
        return tuple(self._events)

    @property
    def triggers(self) -> Tuple[Trigger, ...]:
        return tuple(self._triggers)

    @property
    def categories(self) -> List[str]:
        """Swimlanes: the distinct event locations in lexicographic order."""
        return sorted({event.location for event in self._events})

    def _extend(self, low: int, high: int) -> None:
        if self._start_time is None or low < self._start_time:
            self._start_time = low
        if self._end_time is None or high > self._end_time:
            self._end_time = high

    def add_event(self, name: str, start_time: int, end_time: int, location: str) -> Event:
        """Add an event; events may be added in any order."""
        event = Event(name, start_time, end_time, location)
        self._extend(event.start_time, event.end_time)
        self._events.append(event)
        return event

    def add_trigger(self, start_location: str, end_location: str, time: int) -> Trigger:
        """Add a connector from ``start_location`` to ``end_location`` at ``time``.

        For example, process A on CPU 0 waking process B on CPU 1::

            timeline.add_event("Process A", 0, 1, "CPU 0")
            timeline.add_event("Process B", 1, 2, "CPU 1")
            timeline.add_trigger("CPU 0", "CPU 1", 1)
        """
        trigger = Trigger(start_location, end_location, time)
        self._extend(trigger.time, trigger.time)
        self._triggers.append(trigger)
        return trigger

    def set_units(self, units: Union[TimeUnit, str]) -> None:
        self.units = TimeUnit.parse(units)

    def geometry(self) -> Geometry:
        start_time = self._start_time if self._start_time is not None else 0
        return Geometry(self.layout, start_time)

    def scene(self, rng: Optional[np.random.Generator] = None) -> Scene:
        return build_scene(self, rng)

    def to_svg(self, rng: Optional[np.random.Generator] = None) -> str:
        return to_bytes(self.scene(rng)).decode("utf-8")

    def render_to(self, sink: BinaryIO, rng: Optional[np.random.Generator] = None) -> None:
        write_svg(self.scene(rng), sink)

    def render_to_path(
        self, filename: Union[str, Path], rng: Optional[np.random.Generator] = None
    ) -> Path:
        """Write the SVG to ``filename``, replacing any existing file.

        The document is rendered before the file is opened, so a failed render
        leaves an existing file untouched.
        """
        output_path = Path(filename)
        data = to_bytes(self.scene(rng))
        with output_path.open("wb") as handle:
            handle.write(data)
        return output_path

    def save_png(
        self,
        filename: Union[str, Path],
        dpi: int = 150,
        rng: Optional[np.random.Generator] = None,
    ) -> Path:
        from timeline_svg.preview import render_png

        return render_png(self.scene(rng), Path(filename), dpi=dpi)
