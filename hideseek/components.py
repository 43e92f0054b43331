"""Geometry primitives and the GUI widgets drawn by the game client."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

Color = Tuple[int, int, int]

BORDER_SIZE = 8.0


@dataclass(frozen=True)
class Vector2:
    """A 2D vector of floats."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its corner and its size."""

    pos: Vector2
    size: Vector2

    def contains(self, point: Vector2) -> bool:
        """Whether ``point`` lies inside the rectangle, edges included."""
        return (
            self.pos.x <= point.x <= self.pos.x + self.size.x
            and self.pos.y <= point.y <= self.pos.y + self.size.y
        )

    def inset(self, border: float) -> "Rect":
        """The rectangle shrunk by ``border`` on every side."""
        return Rect(
            Vector2(self.pos.x + border, self.pos.y + border),
            Vector2(self.size.x - 2.0 * border, self.size.y - 2.0 * border),
        )


@dataclass(frozen=True)
class GuiBox:
    """A filled rectangle in screen pixels."""

    rect: Rect
    color: Color


@dataclass(frozen=True)
class EntityView:
    """How a world entity is to be drawn."""

    rect: Rect
    color: Color
    marker_color: Optional[Color] = None
    highlighted: bool = False


class AppGuiTransition(enum.Enum):
    """The screen the client should switch to next."""

    TO_LOBBY = "lobby"
    TO_DISCONNECTED = "disconnected"
    TO_INGAME = "ingame"
    TO_ENDING = "ending"


class GuiComponentSize(enum.Enum):
    SMALL = "small"
    MEDIUM = "medium"
    BIG = "big"


@dataclass
class GuiPlainButton:
    """A button with an outer frame and a filled middle."""

    rect: Rect
    color_middle: Color
    color_outer: Color

    def drawable_boxes(self) -> Tuple[GuiBox, GuiBox]:
        return (
            GuiBox(self.rect, self.color_outer),
            GuiBox(self.rect.inset(BORDER_SIZE), self.color_middle),
        )

    def is_inside(self, point: Vector2) -> bool:
        return self.rect.contains(point)


@dataclass
class GuiToggleButton:
    """An on/off switch whose knob covers half of the inner area."""

    rect: Rect
    color_middle_on: Color
    color_middle_off: Color
    color_outer: Color
    turned_on: bool = False

    def drawable_boxes(self) -> Tuple[GuiBox, GuiBox, GuiBox]:
        inner = self.rect.inset(BORDER_SIZE)
        half_width = inner.size.x / 2.0
        knob_x = inner.pos.x + (half_width if self.turned_on else 0.0)
        knob = Rect(Vector2(knob_x, inner.pos.y), Vector2(half_width, inner.size.y))
        middle = self.color_middle_on if self.turned_on else self.color_middle_off
        return (
            GuiBox(self.rect, self.color_outer),
            GuiBox(inner, middle),
            GuiBox(knob, self.color_outer),
        )

    def toggle(self) -> None:
        self.turned_on = not self.turned_on

    def is_inside(self, point: Vector2) -> bool:
        return self.rect.contains(point)


@dataclass
class GuiIndicator:
    """A lamp that shows one colour when on and another when off."""

    rect: Rect
    color_middle_on: Color
    color_middle_off: Color
    turned_on: bool = False

    def drawable_box(self) -> GuiBox:
        color = self.color_middle_on if self.turned_on else self.color_middle_off
        return GuiBox(self.rect, color)

    def toggle(self) -> None:
        self.turned_on = not self.turned_on


@dataclass
class GuiProgressBar:
    """A framed bar filled to a percentage between 0 and 100."""

    rect: Rect
    color_middle: Color
    color_bg: Color
    color_frame: Color
    _percentage: float = field(default=0.0, init=False, repr=False)

    @property
    def percentage(self) -> float:
        return self._percentage

    def set_percentage(self, percentage: float) -> None:
        """Set the fill level, clamped to 0..100."""
        self._percentage = min(max(percentage, 0.0), 100.0)

    def drawable_boxes(self) -> Tuple[GuiBox, GuiBox, GuiBox]:
        inner = self.rect.inset(BORDER_SIZE)
        progress = replace(
            inner, size=Vector2(inner.size.x * self._percentage / 100.0, inner.size.y)
        )
        return (
            GuiBox(self.rect, self.color_frame),
            GuiBox(inner, self.color_bg),
            GuiBox(progress, self.color_middle),
        )


_BUTTON_SIZES = {
    GuiComponentSize.SMALL: Vector2(50.0, 25.0),
    GuiComponentSize.MEDIUM: Vector2(110.0, 60.0),
    GuiComponentSize.BIG: Vector2(280.0, 110.0),
}

_INDICATOR_SIZES = {
    GuiComponentSize.SMALL: Vector2(16.0, 16.0),
    GuiComponentSize.MEDIUM: Vector2(32.0, 32.0),
    GuiComponentSize.BIG: Vector2(64.0, 64.0),
}

_PROGRESS_BAR_SIZES = {
    GuiComponentSize.SMALL: Vector2(100.0, 32.0),
    GuiComponentSize.MEDIUM: Vector2(200.0, 48.0),
    GuiComponentSize.BIG: Vector2(400.0, 64.0),
}


def build_plain_button(pos: Vector2, component_size: GuiComponentSize) -> GuiPlainButton:
    return GuiPlainButton(
        Rect(pos, _BUTTON_SIZES[component_size]),
        color_middle=(0, 186, 22),
        color_outer=(1, 77, 30),
    )


def build_toggle_button(pos: Vector2, component_size: GuiComponentSize) -> GuiToggleButton:
    return GuiToggleButton(
        Rect(pos, _BUTTON_SIZES[component_size]),
        color_middle_on=(2, 191, 27),
        color_middle_off=(105, 0, 0),
        color_outer=(10, 10, 10),
    )


def build_indicator(pos: Vector2, component_size: GuiComponentSize) -> GuiIndicator:
    return GuiIndicator(
        Rect(pos, _INDICATOR_SIZES[component_size]),
        color_middle_on=(0, 186, 22),
        color_middle_off=(45, 61, 47),
    )


def build_progress_bar(pos: Vector2, component_size: GuiComponentSize) -> GuiProgressBar:
    return GuiProgressBar(
        Rect(pos, _PROGRESS_BAR_SIZES[component_size]),
        color_middle=(130, 217, 214),
        color_bg=(38, 38, 38),
        color_frame=(92, 92, 92),
    )