from timeline_svg.geometry import Geometry, UnknownLocationError
from timeline_svg.model import COLORS, Event, Layout, TimeUnit, Trigger
from timeline_svg.scene import ColorMap, Scene, build_scene
from timeline_svg.timeline import Timeline
from timeline_svg.trace import parse_trace

__all__ = [
    "COLORS",
    "ColorMap",
    "Event",
    "Geometry",
    "Layout",
    "Scene",
    "TimeUnit",
    "Timeline",
    "Trigger",
    "UnknownLocationError",
    "build_scene",
    "parse_trace",
]
