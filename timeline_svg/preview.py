"""
Render a PNG preview of a timeline scene.

The preview draws the same primitives as the SVG document in pixel
coordinates: the time axis, one filled box per event with its name, and one
connector per trigger. The y axis is inverted so rows stack top to bottom as
they do in the SVG, and swimlane names are used as y tick labels.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import matplotlib

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.collections import LineCollection  # noqa: E402

from timeline_svg.scene import Scene  # noqa: E402

MIN_FIGURE_INCHES = 1.0

Segment = List[Tuple[float, float]]


def pick_figure_size(scene: Scene, dpi: int) -> Tuple[float, float]:
    width = max(MIN_FIGURE_INCHES, scene.width / dpi)
    height = max(MIN_FIGURE_INCHES, scene.height / dpi)
    return width, height


def axis_segments(scene: Scene) -> List[Segment]:
    axis = scene.axis
    segments: List[Segment] = [[(0, axis.y), (axis.width, axis.y)]]
    for tick in axis.ticks:
        segments.append([(tick.x, axis.y), (tick.x, tick.top)])
    return segments


def render_png(scene: Scene, output_path: Path, dpi: int = 150) -> Path:
    figure_width, figure_height = pick_figure_size(scene, dpi)
    fig, ax = plt.subplots(figsize=(figure_width, figure_height), dpi=dpi)

    ax.add_collection(
        LineCollection(axis_segments(scene), colors="black", linewidths=1.0, zorder=2)
    )
    for tick in scene.axis.major_ticks:
        ax.text(tick.x, tick.top, tick.label, fontsize=6, color="black", va="bottom")

    for box in scene.boxes:
        ax.add_patch(
            plt.Rectangle(
                (box.x, box.y),
                box.width,
                box.height,
                facecolor=box.color,
                edgecolor="none",
                zorder=1,
            )
        )
        label_x, label_y = box.label_position
        ax.text(label_x, label_y, box.name, fontsize=6, color="black", va="center", zorder=3)

    if scene.connectors:
        ax.add_collection(
            LineCollection(
                [[(c.x, c.start_y), (c.x, c.end_y)] for c in scene.connectors],
                colors="black",
                linewidths=1.0,
                zorder=4,
            )
        )

    layout = scene.layout
    ax.set_xlim(0, max(scene.width, 1))
    ax.set_ylim(0, max(scene.height, 1) + layout.row_padding)
    ax.invert_yaxis()
    if scene.categories:
        ax.set_yticks(
            [
                (index + 1) * layout.row_height + layout.row_padding + layout.row_height / 2.0
                for index in range(len(scene.categories))
            ]
        )
        ax.set_yticklabels(scene.categories, fontsize=6)
    else:
        ax.set_yticks([])
    ax.set_xticks([])
    ax.set_xlabel(f"Time ({scene.units.label})")

    plt.tight_layout()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path)
    plt.close(fig)
    return output_path
