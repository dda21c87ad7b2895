from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from timeline_svg import Layout, TimeUnit, Timeline

times = st.integers(min_value=0, max_value=10**12)
operations = st.lists(
    st.one_of(
        st.tuples(st.just("event"), times, times),
        st.tuples(st.just("trigger"), times),
    ),
    min_size=1,
    max_size=40,
)


def test_add_event() -> None:
    timeline = Timeline()
    timeline.add_event("Event 1", 1, 2, "Location 1")
    assert timeline.start_time == 1
    assert timeline.end_time == 2
    assert len(timeline.events) == 1

    timeline.add_event("Event 2", 3, 4, "Location 2")
    assert timeline.start_time == 1
    assert timeline.end_time == 4
    assert len(timeline.events) == 2


def test_add_trigger() -> None:
    timeline = Timeline()
    timeline.add_trigger("Location 1", "Location 2", 1)

    assert timeline.start_time == 1
    assert timeline.end_time == 1
    assert len(timeline.triggers) == 1


def test_bounds_undefined_before_any_addition() -> None:
    timeline = Timeline()

    assert timeline.start_time is None
    assert timeline.end_time is None


@given(operations)
def test_bounds_track_every_addition(ops) -> None:
    timeline = Timeline()
    lows, highs = [], []
    for op in ops:
        if op[0] == "event":
            _, start, end = op
            timeline.add_event("e", start, end, "lane")
            lows.append(start)
            highs.append(end)
        else:
            _, time = op
            timeline.add_trigger("lane", "lane", time)
            lows.append(time)
            highs.append(time)
        assert timeline.start_time == min(lows)
        assert timeline.end_time == max(highs)


def test_categories_are_sorted_and_distinct() -> None:
    timeline = Timeline()
    timeline.add_event("b", 0, 1, "CPU 2")
    timeline.add_event("a", 0, 1, "CPU 0")
    timeline.add_event("c", 2, 3, "CPU 2")
    timeline.add_trigger("CPU 0", "CPU 9", 1)

    assert timeline.categories == ["CPU 0", "CPU 2"]


def test_duplicate_events_are_kept() -> None:
    timeline = Timeline()
    timeline.add_event("same", 0, 1, "lane")
    timeline.add_event("same", 0, 1, "lane")

    assert len(timeline.events) == 2


def test_events_are_not_aliased() -> None:
    timeline = Timeline()
    timeline.add_event("e", 0, 1, "lane")

    assert isinstance(timeline.events, tuple)
    assert isinstance(timeline.triggers, tuple)


def test_units_default_and_set() -> None:
    timeline = Timeline()
    assert timeline.units is TimeUnit.NANOSECONDS

    timeline.set_units(TimeUnit.SECONDS)
    assert timeline.units is TimeUnit.SECONDS

    timeline.set_units("ms")
    assert timeline.units is TimeUnit.MILLISECONDS

    timeline.set_units("days")
    assert timeline.units is TimeUnit.DAYS


def test_unknown_units_rejected() -> None:
    with pytest.raises(ValueError):
        Timeline().set_units("fortnights")


def test_layout_defaults() -> None:
    assert Timeline().layout == Layout(row_height=20, column_width=200, row_padding=1, column_padding=0)


@pytest.mark.parametrize("bad", [-1, 1.5, "3", True])
def test_invalid_times_rejected(bad) -> None:
    timeline = Timeline()
    with pytest.raises((TypeError, ValueError)):
        timeline.add_event("e", bad, 2, "lane")
    with pytest.raises((TypeError, ValueError)):
        timeline.add_trigger("a", "b", bad)

    assert timeline.start_time is None
    assert timeline.events == ()


def test_end_before_start_is_accepted() -> None:
    timeline = Timeline()
    timeline.add_event("backwards", 5, 2, "lane")

    assert timeline.start_time == 5
    assert timeline.end_time == 2
