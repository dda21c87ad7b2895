from __future__ import annotations

import xml.etree.ElementTree as ET

import numpy as np
import pytest

from timeline_svg import Timeline

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse_svg(document: str) -> ET.Element:
    return ET.fromstring(document.split("?>", 1)[-1].strip())


def children(root: ET.Element, tag: str, css_class: str) -> list:
    return [
        element
        for element in root
        if element.tag == SVG_NS + tag and element.get("class") == css_class
    ]


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def two_lane_timeline() -> Timeline:
    timeline = Timeline()
    timeline.add_event("Event 1", 1, 2, "Location 1")
    timeline.add_event("Event 2", 3, 4, "Location 2")
    timeline.add_trigger("Location 1", "Location 2", 1)
    return timeline
