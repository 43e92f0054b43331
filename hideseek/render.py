"""Turns GUI boxes and entity views into coloured quads in device coordinates.

A quad is four vertices and six indices forming two triangles. Each quad
carries one RGBA colour with components between 0 and 1. Any drawing
backend can consume quads directly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Tuple

from hideseek.components import Color, EntityView, GuiBox, Vector2

Vertex = Tuple[float, float, float, float]
RgbaColor = Tuple[float, float, float, float]

QUAD_INDICES: Tuple[int, ...] = (0, 1, 2, 2, 3, 0)
MARKER_MIX_FACTOR = 0.5
HIGHLIGHT_COLOR: Color = (252, 215, 3)
CLEAR_COLOR: RgbaColor = (0.1, 0.1, 0.1, 1.0)
DEFAULT_WORLD_SCALE = 0.05


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def mix_rgb(c1: Color, c2: Color, mix_factor: float) -> Color:
    """Blend two colours; ``mix_factor`` is the weight of ``c1``, clamped to 0..1."""
    factor = min(max(mix_factor, 0.0), 1.0)

    def channel(a: int, b: int) -> int:
        mixed = a * factor + b * (1.0 - factor)
        return _round_half_away(min(max(mixed, 0.0), 255.0))

    return tuple(channel(a, b) for a, b in zip(c1, c2))  # type: ignore[return-value]


def rect_quad_vertices(x: float, y: float, w: float, h: float) -> Tuple[List[Vertex], Tuple[int, ...]]:
    """Vertices (bottom-left, bottom-right, top-right, top-left) and indices of a rectangle."""
    vertices = [
        (x, y, 1.0, 1.0),
        (x + w, y, 1.0, 1.0),
        (x + w, y + h, 1.0, 1.0),
        (x, y + h, 1.0, 1.0),
    ]
    return vertices, QUAD_INDICES


def entity_color(view: EntityView) -> Color:
    """The colour an entity is drawn with, after marker and highlight tinting."""
    color = view.color
    if view.marker_color is not None:
        color = mix_rgb(color, view.marker_color, MARKER_MIX_FACTOR)
    if view.highlighted:
        color = mix_rgb(color, HIGHLIGHT_COLOR, MARKER_MIX_FACTOR)
    return color


def _to_rgba(color: Color) -> RgbaColor:
    r, g, b = color
    return (r / 255.0, g / 255.0, b / 255.0, 1.0)


@dataclass(frozen=True)
class Quad:
    """A filled rectangle ready to be drawn."""

    vertices: List[Vertex]
    indices: Tuple[int, ...]
    color: RgbaColor

    @classmethod
    def from_rect(cls, x: float, y: float, w: float, h: float, color: Color) -> "Quad":
        vertices, indices = rect_quad_vertices(x, y, w, h)
        return cls(vertices, indices, _to_rgba(color))


@dataclass
class RenderBatch:
    """Everything to be drawn in one frame."""

    gui_elements: List[GuiBox] = field(default_factory=list)
    entity_views: List[EntityView] = field(default_factory=list)
    camera: Vector2 = field(default_factory=Vector2.zero)
    world_scale: float = DEFAULT_WORLD_SCALE

    def clear(self) -> None:
        """Drop all queued GUI elements and entity views; the camera is kept."""
        self.gui_elements.clear()
        self.entity_views.clear()

    def set_camera(self, camera: Vector2, world_scale: float) -> None:
        self.camera = camera
        self.world_scale = world_scale

    def append_gui_element(self, element: GuiBox) -> None:
        self.gui_elements.append(element)

    def append_entity_view(self, view: EntityView) -> None:
        self.entity_views.append(view)

    def entity_quads(self, aspect_ratio: float) -> List[Quad]:
        """Entity quads in device coordinates, seen from the camera."""
        scale_x = self.world_scale / aspect_ratio
        scale_y = self.world_scale
        return [
            Quad.from_rect(
                (view.rect.pos.x - self.camera.x) * scale_x,
                (view.rect.pos.y - self.camera.y) * scale_y,
                view.rect.size.x * scale_x,
                view.rect.size.y * scale_y,
                entity_color(view),
            )
            for view in self.entity_views
        ]

    def gui_quads(self, width: float, height: float) -> List[Quad]:
        """GUI quads in device coordinates; boxes are in pixels from the top-left."""
        quads = []
        for element in self.gui_elements:
            rect = element.rect
            quads.append(
                Quad.from_rect(
                    (rect.pos.x / width) * 2.0 - 1.0,
                    1.0 - ((rect.pos.y + rect.size.y) / height) * 2.0,
                    (rect.size.x / width) * 2.0,
                    (rect.size.y / height) * 2.0,
                    element.color,
                )
            )
        return quads