"""Fuzzy sets: membership functions, key points and code generation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import ClassVar

__all__ = [
    "SetKind",
    "FuzzySet",
    "LSet",
    "TriangleSet",
    "PiSet",
    "GammaSet",
    "ZSet",
    "BellSet",
    "PiBellSet",
    "SSet",
    "SingletonSet",
    "set_type_name",
]

_THRESHOLD = 0.0001

_I = " " * 24
_J = " " * 28
_K = " " * 32


class SetKind(IntEnum):
    """Shapes of fuzzy set, numbered as the editor lists them."""

    L = 0
    TRIANGLE = 1
    PI = 2
    GAMMA = 3
    Z = 4
    BELL = 5
    PI_BELL = 6
    S = 7
    SINGLETON = 8


_TYPE_NAMES = {
    SetKind.L: "Type L",
    SetKind.TRIANGLE: "Triangle",
    SetKind.PI: "Type PI",
    SetKind.GAMMA: "Type Gamma",
    SetKind.Z: "Type Z",
    SetKind.BELL: "Bell",
    SetKind.PI_BELL: "PI-Bell",
    SetKind.S: "Type S",
    SetKind.SINGLETON: "Singleton",
}


def set_type_name(kind: int) -> str:
    """Return the display name of a set shape, or "" for an unknown one."""
    try:
        return _TYPE_NAMES[SetKind(kind)]
    except ValueError:
        return ""


def _num(value: float) -> str:
    return f"{value:g}"


def _snap(ux: float) -> float:
    return 0.0 if ux < _THRESHOLD else ux


def _line(cond: str, body: str, cond_end: str = "\n", body_end: str = "\n") -> str:
    return f"{_I}if({cond}){cond_end}{_J}{body}{body_end}"


def _block(cond: str, first: str, second: str, cond_end: str = "\n") -> str:
    return (
        f"{_I}if({cond}){cond_end}"
        f"{_J}{{\n"
        f"{_K}{first}\n"
        f"{_K}{second}\n"
        f"{_J}}}\n"
    )


_TAIL = f"{_I}if(ux<0.0001)\n{_J}ux=0;"


class FuzzySet(ABC):
    """A named fuzzy set on the real line."""

    kind: ClassVar[SetKind]
    _key_fields: ClassVar[tuple[str, ...]]
    _cpp_name: ClassVar[str]

    def __init__(self, name: str, minimum: float, maximum: float) -> None:
        self.name = name
        self.minimum = minimum
        self.maximum = maximum

    @abstractmethod
    def membership(self, x: float) -> float:
        """Degree of membership of ``x``, in [0, 1]."""

    @abstractmethod
    def c_code(self) -> str:
        """C statements that compute ``ux`` from ``x`` for this set."""

    def _cpp_args(self) -> list[float]:
        return [self.minimum, self.first_cut, self.maximum]  # type: ignore[attr-defined]

    def cpp_code(self) -> str:
        """C++ statement that builds this set in the generated library."""
        args = ",".join(_num(v) for v in self._cpp_args())
        return f"    cd=new {self._cpp_name}({args});"

    def key_points(self) -> list[float]:
        """The points a user can move, in order."""
        return [getattr(self, field) for field in self._key_fields]

    def set_key_point(self, index: int, x: float) -> None:
        """Move key point ``index`` to ``x``; unknown indices are ignored."""
        if 0 <= index < len(self._key_fields):
            setattr(self, self._key_fields[index], x)

    def check_key_point(self, index: int, x: float) -> float:
        """Clamp ``x`` so key point ``index`` stays between its neighbours."""
        points = self.key_points()
        if not 0 <= index < len(points):
            raise IndexError(f"key point {index} out of range")
        if index > 0 and x < points[index - 1]:
            x = points[index - 1]
        if index < len(points) - 2 and x > points[index + 1]:
            x = points[index + 1]
        return x

    def _state(self) -> tuple:
        return (type(self), self.name, self.minimum, self.maximum, tuple(self.key_points()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FuzzySet):
            return NotImplemented
        return self._state() == other._state()

    def __hash__(self) -> int:
        return hash(self._state())

    def __repr__(self) -> str:
        points = ", ".join(_num(v) for v in self.key_points())
        return f"{type(self).__name__}({self.name!r}, [{points}])"


class _OneCutSet(FuzzySet):
    def __init__(self, name: str, minimum: float, first_cut: float, maximum: float) -> None:
        super().__init__(name, minimum, maximum)
        self.first_cut = first_cut


class _TwoCutSet(FuzzySet):
    def __init__(
        self,
        name: str,
        minimum: float,
        first_cut: float,
        second_cut: float,
        maximum: float,
    ) -> None:
        super().__init__(name, minimum, maximum)
        self.first_cut = first_cut
        self.second_cut = second_cut

    def _cpp_args(self) -> list[float]:
        return [self.minimum, self.first_cut, self.second_cut, self.maximum]


class LSet(_OneCutSet):
    """Full membership up to the first cut, then a straight fall to zero."""

    kind = SetKind.L
    _key_fields = ("first_cut", "maximum")
    _cpp_name = "ConjuntoL"

    def membership(self, x: float) -> float:
        mn, a, mx = self.minimum, self.first_cut, self.maximum
        ux = 0.0
        if x < mn:
            ux = 1.0
        if mn <= x < a:
            ux = 1.0
        if a <= x < mx:
            ux = (mx - x) / (mx - a)
        if x >= mx:
            ux = 0.0
        return _snap(ux)

    def c_code(self) -> str:
        mn, a, mx = _num(self.minimum), _num(self.first_cut), _num(self.maximum)
        return (
            _line(f"x<({mn})", "ux=1;")
            + _line(f"x<({a})&&x>=({mn})", "ux=1;")
            + _line(f"x<({mx})&&x>=({a})", f"ux=(({mx})-x)/(({mx})-({a}));")
            + _line(f"x>=({mx})", "ux=0;")
            + _TAIL
        )


class TriangleSet(_OneCutSet):
    """Straight rise from the minimum to the peak, straight fall to the maximum."""

    kind = SetKind.TRIANGLE
    _key_fields = ("minimum", "first_cut", "maximum")
    _cpp_name = "ConjuntoTriangulo"

    def membership(self, x: float) -> float:
        mn, a, mx = self.minimum, self.first_cut, self.maximum
        ux = 0.0
        if x < mn:
            ux = 0.0
        if mn <= x < a:
            ux = (x - mn) / (a - mn)
        if a <= x < mx:
            ux = (mx - x) / (mx - a)
        if x >= mx:
            ux = 0.0
        return _snap(ux)

    def c_code(self) -> str:
        mn, a, mx = _num(self.minimum), _num(self.first_cut), _num(self.maximum)
        return (
            _line(f"x<({mn})", "ux=0;")
            + _line(f"x<({a})&&x>=({mn})", f"ux=(x-({mn}))/(({a})-({mn}));")
            + _line(f"x<({mx})&&x>=({a})", f"ux=(({mx})-x)/(({mx})-({a}));")
            + _line(f"x>=({mx})", "ux=0;")
            + _TAIL
            + "\n"
        )


class PiSet(_TwoCutSet):
    """Trapezoid: straight rise, plateau between the cuts, straight fall."""

    kind = SetKind.PI
    _key_fields = ("minimum", "first_cut", "second_cut", "maximum")
    _cpp_name = "ConjuntoPi"

    def membership(self, x: float) -> float:
        mn, a, b, mx = self.minimum, self.first_cut, self.second_cut, self.maximum
        ux = 0.0
        if x < mn:
            ux = 0.0
        if mn <= x < a:
            ux = (x - mn) / (a - mn)
        if a <= x < b:
            ux = 1.0
        if b <= x < mx:
            ux = (mx - x) / (mx - b)
        if x >= mx:
            ux = 0.0
        return _snap(ux)

    def c_code(self) -> str:
        mn, a = _num(self.minimum), _num(self.first_cut)
        b, mx = _num(self.second_cut), _num(self.maximum)
        return (
            _line(f"x<({mn})", "ux=0;")
            + _line(f"x<({a})&&x>=({mn})", f"ux=(x-({mn}))/(({a})-({mn}));")
            + _line(f"x<({b})&&x>=({a})", "ux=1;")
            + _line(f"x<({mx})&&x>=({b})", f"ux=(({mx})-x)/(({mx})-({b}));")
            + _line(f"x>=({mx})", "ux=0;")
            + _TAIL
        )


class GammaSet(_OneCutSet):
    """Straight rise from the minimum to the first cut, full membership after."""

    kind = SetKind.GAMMA
    _key_fields = ("minimum", "first_cut")
    _cpp_name = "ConjuntoGamma"

    def membership(self, x: float) -> float:
        mn, a, mx = self.minimum, self.first_cut, self.maximum
        ux = 0.0
        if x < mn:
            ux = 0.0
        if mn <= x < a:
            ux = (x - mn) / (a - mn)
        if a <= x < mx:
            ux = 1.0
        if x >= mx:
            ux = 1.0
        return _snap(ux)

    def c_code(self) -> str:
        mn, a = _num(self.minimum), _num(self.first_cut)
        return (
            _line(f"x<({mn})", "ux=0;")
            + _line(f"x<({a})&&x>=({mn})", f"ux=(x-({mn}))/(({a})-({mn}));")
            + _line(f"x>=({a})", "ux=1;", body_end="\r\n")
            + f"{_I}if(ux<0.0001)\r\n{_J}ux=0;"
        )


class ZSet(_OneCutSet):
    """Full membership up to the first cut, then an S-shaped fall."""

    kind = SetKind.Z
    _key_fields = ("first_cut", "maximum")
    _cpp_name = "ConjuntoZ"

    def membership(self, x: float) -> float:
        mn, a, mx = self.minimum, self.first_cut, self.maximum
        mid = (a + mx) / 2
        ux = 0.0
        if x < mn:
            ux = 1.0
        if x < a:
            ux = 1.0
        if a <= x < mid:
            t = (x - a) / (mx - a)
            ux = 1 - 2 * t * t
        if mid <= x < mx:
            t = (x - mx) / (mx - a)
            ux = 2 * t * t
        if x >= mx:
            ux = 0.0
        return _snap(ux)

    def c_code(self) -> str:
        mn, a, mx = _num(self.minimum), _num(self.first_cut), _num(self.maximum)
        mid = _num((self.first_cut + self.maximum) / 2)
        return (
            _line(f"x<({mn})", "ux=1;")
            + _line(f"x<({a})", "ux=1;")
            + _block(f"x<({mid})&&x>=({a})", f"ux=(x-({a}))/(({mx})-({a}));", "ux=1-2*ux*ux;")
            + _block(f"x<({mx})&&x>=({mid})", f"ux=(x-({mx}))/(({mx})-({a}));", "ux=2*ux*ux;")
            + _line(f"x>=({mx})", "ux=0;")
            + _TAIL
        )


class BellSet(_OneCutSet):
    """S-shaped rise to the peak at the first cut and S-shaped fall after it."""

    kind = SetKind.BELL
    _key_fields = ("minimum", "first_cut", "maximum")
    _cpp_name = "ConjuntoCampana"

    def membership(self, x: float) -> float:
        mn, a, mx = self.minimum, self.first_cut, self.maximum
        low_mid = (a + mn) / 2
        high_mid = (a + mx) / 2
        ux = 0.0
        if x < mn:
            ux = 0.0
        if mn <= x < low_mid:
            t = (x - mn) / (a - mn)
            ux = 2 * t * t
        if low_mid <= x < a:
            t = (x - a) / (a - mn)
            ux = 1 - 2 * t * t
        if a <= x < high_mid:
            t = (x - a) / (mx - a)
            ux = 1 - 2 * t * t
        if high_mid <= x < mx:
            t = (x - mx) / (mx - a)
            ux = 2 * t * t
        if x >= mx:
            ux = 0.0
        return _snap(ux)

    def c_code(self) -> str:
        mn, a, mx = _num(self.minimum), _num(self.first_cut), _num(self.maximum)
        low_mid = _num((self.first_cut + self.minimum) / 2)
        high_mid = _num((self.first_cut + self.maximum) / 2)
        return (
            _line(f"x<({mn})", "ux=0;")
            + _block(f"x<({low_mid})&&x>=({mn})", f"ux=(x-({mn}))/(({a})-({mn}));", "ux=2*ux*ux;")
            + _block(f"x<({a})&&x>=({low_mid})", f"ux=(x-({a}))/(({a})-({mn}));", "ux=1-2*ux*ux;")
            + _block(f"x<({high_mid})&&x>=({a})", f"ux=(x-({a}))/(({mx})-({a}));", "ux=1-2*ux*ux;")
            + _block(f"x<({mx})&&x>=({high_mid})", f"ux=(x-({mx}))/(({mx})-({a}));", "ux=2*ux*ux;")
            + _line(f"x>=({mx})", "ux=0;")
            + _TAIL
        )


class SSet(_OneCutSet):
    """S-shaped rise from the minimum to the first cut, full membership after."""

    kind = SetKind.S
    _key_fields = ("minimum", "first_cut")
    _cpp_name = "ConjuntoS"

    def membership(self, x: float) -> float:
        mn, a = self.minimum, self.first_cut
        low_mid = (a + mn) / 2
        ux = 0.0
        if x < mn:
            ux = 0.0
        if mn <= x < low_mid:
            t = (x - mn) / (a - mn)
            ux = 2 * t * t
        if low_mid <= x < a:
            t = (x - a) / (a - mn)
            ux = 1 - 2 * t * t
        if x >= a:
            ux = 1.0
        return _snap(ux)

    def c_code(self) -> str:
        mn, a = _num(self.minimum), _num(self.first_cut)
        low_mid = _num((self.first_cut + self.minimum) / 2)
        return (
            _line(f"x<({mn})", "ux=0;")
            + _block(
                f"x<({low_mid})&&x>=({mn})",
                f"ux=(x-({mn}))/(({a})-({mn}));",
                "ux=2*ux*ux;",
                cond_end="\r\n",
            )
            + _block(f"x<({a})&&x>=({low_mid})", f"ux=(x-({a}))/(({a})-({mn}));", "ux=1-2*ux*ux;")
            + _line(f"x>=({a})", "ux=1;")
            + _TAIL
        )


class PiBellSet(_TwoCutSet):
    """S-shaped rise, plateau between the cuts, S-shaped fall."""

    kind = SetKind.PI_BELL
    _key_fields = ("minimum", "first_cut", "second_cut", "maximum")
    _cpp_name = "ConjuntoPiCampana"

    def membership(self, x: float) -> float:
        mn, a, b, mx = self.minimum, self.first_cut, self.second_cut, self.maximum
        low_mid = (a + mn) / 2
        high_mid = (b + mx) / 2
        ux = 0.0
        if x < mn:
            ux = 0.0
        if mn <= x < low_mid:
            t = (x - mn) / (a - mn)
            ux = 2 * t * t
        if low_mid <= x < a:
            t = (x - a) / (a - mn)
            ux = 1 - 2 * t * t
        if a <= x < b:
            ux = 1.0
        if b <= x < high_mid:
            t = (x - b) / (mx - b)
            ux = 1 - 2 * t * t
        if high_mid <= x < mx:
            t = (x - mx) / (mx - b)
            ux = 2 * t * t
        if x >= mx:
            ux = 0.0
        return _snap(ux)

    def c_code(self) -> str:
        mn, a = _num(self.minimum), _num(self.first_cut)
        b, mx = _num(self.second_cut), _num(self.maximum)
        low_mid = _num((self.first_cut + self.minimum) / 2)
        high_mid = _num((self.second_cut + self.maximum) / 2)
        return (
            _line(f"x<({mn})", "ux=0;")
            + _block(f"x<({low_mid})&&x>=({mn})", f"ux=(x-({mn}))/(({a})-({mn}));", "ux=2*ux*ux;")
            + _block(f"x<({a})&&x>=({low_mid})", f"ux=(x-({a}))/(({a})-({mn}));", "ux=1-2*ux*ux;")
            + _line(f"x<({b})&&x>=({a})", "ux=1;")
            + _block(f"x<({high_mid})&&x>=({b})", f"ux=(x-({b}))/(({mx})-({b}));", "ux=1-2*ux*ux;")
            + _block(f"x<({mx})&&x>=({high_mid})", f"ux=(x-({mx}))/(({mx})-({b}));", "ux=2*ux*ux;")
            + _line(f"x>=({mx})", "ux=0;")
            + _TAIL
        )


class SingletonSet(FuzzySet):
    """Full membership on the narrow interval [minimum, maximum)."""

    kind = SetKind.SINGLETON
    _key_fields = ("minimum", "maximum")
    _cpp_name = "ConjuntoSinglenton"

    @property
    def peak(self) -> float:
        """Centre of the interval."""
        return (self.minimum + self.maximum) / 2

    @property
    def delta(self) -> float:
        """Width of the interval."""
        return self.maximum - self.minimum

    def _cpp_args(self) -> list[float]:
        return [self.peak, self.delta]

    def membership(self, x: float) -> float:
        mn, mx = self.minimum, self.maximum
        ux = 0.0
        if x < mn:
            ux = 0.0
        if mn <= x < mx:
            ux = 1.0
        if x >= mx:
            ux = 0.0
        return _snap(ux)

    def c_code(self) -> str:
        mn, mx = _num(self.minimum), _num(self.maximum)
        return (
            _line(f"x<({mn})", "ux=0;")
            + _line(f"x<({mx})&&x>=({mn})", "ux=1;")
            + _line(f"x>=({mx})", "ux=0;")
            + _TAIL
        )