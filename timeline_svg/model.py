"""Record types shared by the layout, scene and serializer modules."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

ROW_HEIGHT = 20
COLUMN_WIDTH = 200
ROW_PADDING = 1
COLUMN_PADDING = 0

COLORS: Tuple[str, ...] = (
    "blue",
    "red",
    "green",
    "purple",
    "orange",
    "yellow",
    "palegreen",
    "pink",
    "cyan",
    "brown",
    "black",
    "gray",
    "magenta",
    "olive",
    "teal",
    "navy",
    "maroon",
    "lime",
    "aqua",
    "silver",
    "fuchsia",
    "white",
)


class TimeUnit(Enum):
    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    @property
    def label(self) -> str:
        return _UNIT_LABELS[self]

    @classmethod
    def parse(cls, value: "TimeUnit | str") -> "TimeUnit":
        """Accept a member, its value (``"seconds"``) or its label (``"s"``)."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for unit in cls:
            if text in (unit.value, unit.label):
                return unit
        raise ValueError(f"unknown time unit: {value!r}")


_UNIT_LABELS = {
    TimeUnit.NANOSECONDS: "ns",
    TimeUnit.MICROSECONDS: "us",
    TimeUnit.MILLISECONDS: "ms",
    TimeUnit.SECONDS: "s",
    TimeUnit.MINUTES: "min",
    TimeUnit.HOURS: "h",
    TimeUnit.DAYS: "d",
}


def require_unsigned(value: int, field_name: str) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{field_name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{field_name} must be non-negative, got {value}")
    return value


@dataclass(frozen=True)
class Event:
    name: str
    start_time: int
    end_time: int
    location: str

    def __post_init__(self) -> None:
        require_unsigned(self.start_time, "start_time")
        require_unsigned(self.end_time, "end_time")


@dataclass(frozen=True)
class Trigger:
    start_location: str
    end_location: str
    time: int

    def __post_init__(self) -> None:
        require_unsigned(self.time, "time")


@dataclass(frozen=True)
class Layout:
    """Pixel sizing of rows (swimlanes) and columns (one unit of time)."""

    row_height: int = ROW_HEIGHT
    column_width: int = COLUMN_WIDTH
    row_padding: int = ROW_PADDING
    column_padding: int = COLUMN_PADDING

    def __post_init__(self) -> None:
        for name in ("row_height", "column_width", "row_padding", "column_padding"):
            require_unsigned(getattr(self, name), name)
