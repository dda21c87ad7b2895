"""
Assemble the drawable primitives of a timeline.

The scene is computed in a single pass over a timeline: the time axis along the
top row, one fixed-width box per event on its location's swimlane, and one
vertical connector per trigger. Swimlanes are the sorted distinct event
locations, so placement does not depend on insertion order. Box colours are
drawn at random per distinct event name; the colour map lives only as long as
one scene, so two scenes of the same timeline may disagree on colours unless
they are given identically seeded generators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

import numpy as np

from timeline_svg.model import COLORS, Layout, TimeUnit

if TYPE_CHECKING:
    from timeline_svg.timeline import Timeline

MINOR_TICKS = 8
LABEL_OFFSET = 10


@dataclass(frozen=True)
class Tick:
    x: int
    top: int
    label: Optional[str] = None

    @property
    def major(self) -> bool:
        return self.label is not None


@dataclass(frozen=True)
class Axis:
    y: int
    width: int
    ticks: Tuple[Tick, ...] = ()

    @property
    def major_ticks(self) -> List[Tick]:
        return [tick for tick in self.ticks if tick.major]

    @property
    def minor_ticks(self) -> List[Tick]:
        return [tick for tick in self.ticks if not tick.major]


@dataclass(frozen=True)
class EventBox:
    name: str
    x: int
    y: int
    width: int
    height: int
    color: str

    @property
    def label_position(self) -> Tuple[int, int]:
        return self.x, self.y + LABEL_OFFSET


@dataclass(frozen=True)
class Connector:
    x: int
    start_y: int
    end_y: int


@dataclass(frozen=True)
class Scene:
    width: int
    height: int
    layout: Layout
    units: TimeUnit
    axis: Axis
    categories: Tuple[str, ...] = ()
    boxes: Tuple[EventBox, ...] = ()
    connectors: Tuple[Connector, ...] = ()
    colors: Dict[str, str] = field(default_factory=dict)


class ColorMap:
    """Lazily pick one palette colour per event name and keep it."""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        palette: Sequence[str] = COLORS,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()
        self._palette = tuple(palette)
        self._assigned: Dict[str, str] = {}

    def color_for(self, name: str) -> str:
        color = self._assigned.get(name)
        if color is None:
            color = self._palette[int(self._rng.integers(len(self._palette)))]
            self._assigned[name] = color
        return color

    def as_dict(self) -> Dict[str, str]:
        return dict(self._assigned)


def time_span(start_time: Optional[int], end_time: Optional[int]) -> int:
    if start_time is None or end_time is None or end_time < start_time:
        return 0
    return end_time - start_time


def build_axis(span: int, layout: Layout) -> Axis:
    baseline = layout.row_height
    major_top = baseline - layout.row_height // 2
    minor_top = baseline - layout.row_height // 4

    majors = np.arange(span, dtype=np.int64) * layout.column_width
    minor_offsets = np.arange(1, MINOR_TICKS + 1, dtype=np.int64) * (layout.column_width // 10)

    ticks: List[Tick] = []
    for index, major_x in enumerate(majors):
        ticks.append(Tick(x=int(major_x), top=major_top, label=str(index)))
        ticks.extend(Tick(x=int(x), top=minor_top) for x in major_x + minor_offsets)
    return Axis(y=baseline, width=span * layout.column_width, ticks=tuple(ticks))


def build_scene(
    timeline: "Timeline", rng: Optional[np.random.Generator] = None
) -> Scene:
    layout = timeline.layout
    categories = timeline.categories
    span = time_span(timeline.start_time, timeline.end_time)
    geometry = timeline.geometry()
    colors = ColorMap(rng)

    boxes: List[EventBox] = []
    for event in timeline.events:
        x = geometry.time_to_x(event.start_time)
        y = geometry.category_to_y(event.location, categories)
        boxes.append(
            EventBox(
                name=event.name,
                x=x,
                y=y,
                width=layout.column_width,
                height=layout.row_height,
                color=colors.color_for(event.name),
            )
        )

    connectors: List[Connector] = []
    for trigger in timeline.triggers:
        connectors.append(
            Connector(
                x=geometry.time_to_x(trigger.time),
                start_y=geometry.category_to_y(trigger.start_location, categories),
                end_y=geometry.category_to_y(trigger.end_location, categories),
            )
        )

    return Scene(
        width=span * layout.column_width,
        height=(len(categories) + 1) * layout.row_height,
        layout=layout,
        units=timeline.units,
        axis=build_axis(span, layout),
        categories=tuple(categories),
        boxes=tuple(boxes),
        connectors=tuple(connectors),
        colors=colors.as_dict(),
    )
