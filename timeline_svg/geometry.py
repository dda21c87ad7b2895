"""Map (time, swimlane) pairs onto pixel coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from timeline_svg.model import Layout


class UnknownLocationError(LookupError):
    """A trigger names a location that no event occupies."""

    def __init__(self, location: str) -> None:
        super().__init__(f"no swimlane for location {location!r}")
        self.location = location


@dataclass(frozen=True)
class Geometry:
    layout: Layout
    start_time: int = 0

    def time_to_x(self, time: int) -> int:
        # callers guarantee time >= start_time
        padding = 0 if time == self.start_time else self.layout.column_padding
        return (time - self.start_time) * self.layout.column_width + padding

    def category_to_y(self, category: str, categories: Sequence[str]) -> int:
        try:
            index = list(categories).index(category)
        except ValueError:
            raise UnknownLocationError(category) from None
        return (index + 1) * self.layout.row_height + self.layout.row_padding
