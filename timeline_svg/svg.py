"""Serialize a scene into an SVG document."""

from __future__ import annotations

import io
from typing import BinaryIO

import svgwrite

from timeline_svg.scene import Axis, Connector, EventBox, Scene

FONT_SIZE = 10
STROKE = "black"
STROKE_WIDTH = 1


def _axis_group(drawing: svgwrite.Drawing, axis: Axis) -> svgwrite.container.Group:
    group = drawing.g(class_="axis")
    group.add(
        drawing.line(
            start=(0, axis.y),
            end=(axis.width, axis.y),
            stroke=STROKE,
            stroke_width=STROKE_WIDTH,
        )
    )
    for tick in axis.ticks:
        group.add(
            drawing.line(
                start=(tick.x, axis.y),
                end=(tick.x, tick.top),
                stroke=STROKE,
                stroke_width=STROKE_WIDTH,
            )
        )
        if tick.major:
            group.add(
                drawing.text(
                    tick.label,
                    insert=(tick.x, tick.top),
                    font_size=FONT_SIZE,
                    fill=STROKE,
                )
            )
    return group


def _event_group(drawing: svgwrite.Drawing, box: EventBox) -> svgwrite.container.Group:
    group = drawing.g(class_="event")
    group.add(
        drawing.rect(
            insert=(box.x, box.y),
            size=(box.width, box.height),
            fill=box.color,
        )
    )
    group.add(
        drawing.text(
            box.name,
            insert=box.label_position,
            font_size=FONT_SIZE,
            fill=STROKE,
        )
    )
    return group


def _trigger_path(drawing: svgwrite.Drawing, connector: Connector) -> svgwrite.path.Path:
    return drawing.path(
        d=f"M {connector.x} {connector.start_y} L {connector.x} {connector.end_y}",
        class_="trigger",
        stroke=STROKE,
        stroke_width=STROKE_WIDTH,
        fill="none",
    )


def build_document(scene: Scene) -> svgwrite.Drawing:
    drawing = svgwrite.Drawing(size=(scene.width, scene.height))
    drawing.set_desc(desc=f"time unit: {scene.units.label}")
    drawing.add(_axis_group(drawing, scene.axis))
    for box in scene.boxes:
        drawing.add(_event_group(drawing, box))
    for connector in scene.connectors:
        drawing.add(_trigger_path(drawing, connector))
    return drawing


def to_bytes(scene: Scene) -> bytes:
    buffer = io.StringIO()
    build_document(scene).write(buffer)
    return buffer.getvalue().encode("utf-8")


def write_svg(scene: Scene, sink: BinaryIO) -> None:
    """Write the whole document with a single call so a sink never sees half of it."""
    sink.write(to_bytes(scene))
