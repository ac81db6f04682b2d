"""Choices offered when configuring the inference engine's operators."""

from __future__ import annotations

from .implication import ImplicationKind, implication_name

__all__ = [
    "clamp_parameter",
    "t_norm_selection",
    "s_norm_selection",
    "aggregation_selection",
    "aggregation_choice",
    "implication_choices",
]

# Position in the t-norm list for each t-norm identifier.
_T_NORM_SELECTION = {0: 1, 1: 0, 2: 2, 3: 3, 4: 4, 5: 5, 7: 7, 8: 8, 9: 9}

# Position in the s-norm list for each s-norm identifier.
_S_NORM_SELECTION = {10: 0, 11: 1, 12: 2, 6: 3}

# Position in the aggregation list, where s-norms come first, then a
# separator, then t-norms.
_AGGREGATION_SELECTION = {
    0: 6,
    1: 5,
    2: 7,
    3: 8,
    4: 9,
    5: 10,
    6: 3,
    7: 11,
    8: 12,
    9: 9,
    10: 0,
    11: 1,
    12: 2,
}

_S_NORM_COUNT = 4
_SEPARATOR_INDEX = _S_NORM_COUNT
_T_NORM_OFFSET = _SEPARATOR_INDEX + 1
_AGGREGATION_COUNT = 14


def clamp_parameter(value: float, minimum: float, maximum: float) -> float:
    """Hold a norm-family parameter between ``minimum`` and ``maximum``."""
    if value < minimum:
        value = minimum
    if value > maximum:
        value = maximum
    return value


def _lookup(table: dict[int, int], identifier: int, what: str) -> int:
    try:
        return table[identifier]
    except KeyError:
        raise ValueError(f"no {what} with identifier {identifier!r}") from None


def t_norm_selection(identifier: int) -> int:
    """Position in the t-norm list of the t-norm with ``identifier``."""
    return _lookup(_T_NORM_SELECTION, identifier, "t-norm")


def s_norm_selection(identifier: int) -> int:
    """Position in the s-norm list of the s-norm with ``identifier``."""
    return _lookup(_S_NORM_SELECTION, identifier, "s-norm")


def aggregation_selection(identifier: int) -> int:
    """Position in the rule-aggregation list of the norm with ``identifier``."""
    return _lookup(_AGGREGATION_SELECTION, identifier, "norm")


def aggregation_choice(index: int) -> tuple[str, int] | None:
    """Interpret a position in the rule-aggregation list.

    Returns ``("s", n)`` for the n-th s-norm, ``("t", n)`` for the n-th
    t-norm, or None for the separator between the two groups.
    """
    if not 0 <= index < _AGGREGATION_COUNT:
        raise ValueError(f"aggregation choice {index!r} out of range")
    if index == _SEPARATOR_INDEX:
        return None
    if index < _SEPARATOR_INDEX:
        return ("s", index)
    return ("t", index - _T_NORM_OFFSET)


def implication_choices() -> list[str]:
    """Names of the implications, in the order the engine numbers them."""
    return [implication_name(kind) for kind in ImplicationKind]