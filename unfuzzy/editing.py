"""Editing the sets of a variable: changing shapes, adding sets, moving points."""

from __future__ import annotations

from .sets import (
    BellSet,
    FuzzySet,
    GammaSet,
    LSet,
    PiBellSet,
    PiSet,
    SetKind,
    SingletonSet,
    SSet,
    TriangleSet,
    ZSet,
)
from .variable import Variable

__all__ = ["convert_set", "new_default_set", "move_key_point", "drag_to_value"]


def convert_set(
    fuzzy_set: FuzzySet,
    kind: int,
    range_min: float,
    range_max: float,
) -> FuzzySet:
    """Build a set of another shape over the same support as ``fuzzy_set``.

    The new set keeps the name and spans the old set's minimum and maximum;
    open-ended shapes reach out to the variable's range. A singleton sits
    at the old minimum with a width of one hundredth of the range.
    """
    try:
        shape = SetKind(kind)
    except ValueError:
        raise ValueError(f"unknown set kind {kind!r}") from None

    name = fuzzy_set.name
    mn, mx = range_min, range_max
    a, b = fuzzy_set.minimum, fuzzy_set.maximum
    third = a + (b - a) / 3
    two_thirds = a + (b - a) * 2 / 3
    middle = (a + b) / 2

    if shape is SetKind.L:
        return LSet(name, mn, a, b)
    if shape is SetKind.TRIANGLE:
        return TriangleSet(name, a, middle, b)
    if shape is SetKind.PI:
        return PiSet(name, a, third, two_thirds, b)
    if shape is SetKind.GAMMA:
        return GammaSet(name, a, b, mx)
    if shape is SetKind.Z:
        return ZSet(name, mn, a, b)
    if shape is SetKind.BELL:
        return BellSet(name, a, middle, b)
    if shape is SetKind.PI_BELL:
        return PiBellSet(name, a, third, two_thirds, b)
    if shape is SetKind.S:
        return SSet(name, a, b, mx)
    delta = (mx - mn) / 100
    return SingletonSet(name, a - delta / 2, a + delta / 2)


def new_default_set(name: str, range_min: float, range_max: float) -> TriangleSet:
    """A triangle in the middle quarter of the range, peaking at its centre."""
    width = range_max - range_min
    return TriangleSet(
        name,
        range_min + width * 3 / 8,
        range_min + width * 4 / 8,
        range_min + width * 5 / 8,
    )


def move_key_point(variable: Variable, set_index: int, point_index: int, x: float) -> float:
    """Move a key point of one of the variable's sets and return where it went.

    The value is first held inside the variable's range, then between the
    neighbouring key points of the set.
    """
    fuzzy_set = variable.sets[set_index]
    x = min(max(x, variable.range_min), variable.range_max)
    x = fuzzy_set.check_key_point(point_index, x)
    fuzzy_set.set_key_point(point_index, x)
    return x


def drag_to_value(
    pixel_x: int,
    pixel_min: int,
    pixel_max: int,
    range_min: float,
    range_max: float,
) -> float:
    """The value under a dragged pixel column, held inside the range."""
    if pixel_max == pixel_min:
        raise ValueError("pixel span is empty")
    x = range_min + (pixel_x - pixel_min) * (range_max - range_min) / (pixel_max - pixel_min)
    return min(max(x, range_min), range_max)