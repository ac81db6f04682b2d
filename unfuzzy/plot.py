"""Pixel geometry for plotting variables, sets and input-output curves."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .sets import FuzzySet
from .variable import Variable

__all__ = ["Rect", "Tick", "PlotFrame"]

Point = tuple[int, int]
Range = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """A rectangle of pixels; ``right`` and ``bottom`` are inclusive."""

    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def from_size(cls, x: int, y: int, width: int, height: int) -> Rect:
        """Build a rectangle from its top-left corner and its size."""
        return cls(x, y, x + width - 1, y + height - 1)

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    def contains(self, x: int, y: int) -> bool:
        """Whether the pixel (x, y) lies inside the rectangle."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom


@dataclass(frozen=True)
class Tick:
    """One tick on an axis: its pixel position, its value and its label."""

    position: int
    value: float
    label: str


def _span(value_range: Range) -> float:
    low, high = value_range
    if high == low:
        raise ValueError(f"empty range {value_range!r}")
    return high - low


@dataclass
class PlotFrame:
    """Layout of a plot inside a frame, and the mapping from values to pixels."""

    frame: Rect
    margin_left: int = 60
    margin_right: int = 15
    margin_top: int = 15
    margin_bottom: int = 30
    arrow_margin: int = 10
    arrow_size: int = 5
    x_tick_count: int = 5
    y_tick_count: int = 3
    tick_size: int = 5
    drag_size: int = 4
    axes: Rect = field(init=False)
    canvas: Rect = field(init=False)

    def __post_init__(self) -> None:
        f = self.frame
        self.axes = Rect(
            f.left + self.margin_left,
            f.top + self.margin_top,
            f.right - self.margin_right,
            f.bottom - self.margin_bottom,
        )
        self.canvas = Rect(
            f.left + self.margin_left,
            f.top + self.margin_top + self.arrow_margin,
            f.right - self.margin_right - self.arrow_margin,
            f.bottom - self.margin_bottom,
        )

    def x_ticks(self, minimum: float, maximum: float) -> list[Tick]:
        """Evenly spaced ticks along the horizontal axis."""
        n = self.x_tick_count
        step = (maximum - minimum) / (n - 1)
        width = self.canvas.right - self.canvas.left
        ticks = []
        for i in range(n):
            value = minimum + i * step
            position = self.canvas.left + i * width // (n - 1)
            ticks.append(Tick(position, value, f"{value:.2f}"))
        return ticks

    def y_ticks(self, minimum: float, maximum: float) -> list[Tick]:
        """Evenly spaced ticks up the vertical axis, from the bottom."""
        n = self.y_tick_count
        step = (maximum - minimum) / (n - 1)
        height = self.canvas.bottom - self.canvas.top
        ticks = []
        for i in range(n):
            value = minimum + i * step
            position = self.canvas.bottom - i * height // (n - 1)
            ticks.append(Tick(position, value, f"{value:.2f}"))
        return ticks

    def _x_pixel(self, x: float, x_range: Range) -> int:
        c = self.canvas
        return int(c.left + (x - x_range[0]) * (c.right - c.left) / _span(x_range))

    def _y_pixel(self, y: float, y_range: Range) -> int:
        c = self.canvas
        return int(c.bottom + (y - y_range[0]) * (c.top - c.bottom) / _span(y_range))

    def to_pixel(self, x: float, y: float, x_range: Range, y_range: Range) -> Point:
        """Map the value (x, y) to a pixel of the canvas."""
        return self._x_pixel(x, x_range), self._y_pixel(y, y_range)

    def set_curve(self, variable: Variable, fuzzy_set: FuzzySet) -> list[Point]:
        """Pixels of the polyline that draws ``fuzzy_set`` over ``variable``'s range."""
        c = self.canvas
        x_range = (variable.range_min, variable.range_max)
        scale = (c.right - c.left) / _span(x_range)
        low, high = fuzzy_set.minimum, fuzzy_set.maximum
        start = int(c.left + (low - variable.range_min) * scale)
        end = int(c.right + (high - variable.range_min) * scale)
        steps = end - start
        if steps == 0:
            raise ValueError("set is too narrow to draw")
        points = []
        for j in range(steps + 2):
            x = low + j * (high - low) / steps
            points.append(self.to_pixel(x, fuzzy_set.membership(x), x_range, (0.0, 1.0)))
        return points

    def drag_points(self, variable: Variable, fuzzy_set: FuzzySet) -> list[Point]:
        """Handles for the key points of a set.

        The list starts with the canvas top-left corner and ends with its
        bottom-right corner; the key points lie between them, in order.
        """
        c = self.canvas
        x0, x1 = c.left, c.right
        y0, y1 = c.bottom, c.top
        lo, hi = variable.range_min, variable.range_max
        span = _span((lo, hi))
        points: list[Point] = [(c.left, c.top)]
        for x in fuzzy_set.key_points():
            y = fuzzy_set.membership(x)
            points.append((x0 + int((x - lo) * (x1 - x0) / span), y0 + int(y * (y1 - y0))))
        points.append((c.right, c.bottom))
        return points

    def function_curve(
        self,
        function: Callable[[float], float],
        x_range: Range,
        y_range: Range,
    ) -> list[Point]:
        """Pixels of ``function`` sampled once per pixel column of the canvas."""
        c = self.canvas
        columns = c.right - c.left
        if columns == 0:
            raise ValueError("canvas has no width")
        low, high = x_range
        points = []
        for px in range(c.left, c.right + 1):
            x = low + (px - c.left) * (high - low) / columns
            points.append((px, self._y_pixel(function(x), y_range)))
        return points

    def pixel_to_value(self, pixel_x: int, minimum: float, maximum: float) -> float:
        """The value under a pixel column, for a horizontal range."""
        c = self.canvas
        columns = c.right - c.left
        if columns == 0:
            raise ValueError("canvas has no width")
        return minimum + (pixel_x - c.left) * (maximum - minimum) / columns