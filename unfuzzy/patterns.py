"""Training patterns: reading rows of numbers and keeping them in range."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

__all__ = ["parse_pattern_line", "load_patterns", "default_pattern", "clamp_patterns"]

_OTHER_SEPARATORS = ";%$#/\t"
_NUMBER = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _to_float(text: str) -> float:
    """Read the leading number of ``text``; 0.0 when there is none."""
    match = _NUMBER.match(text)
    return float(match.group()) if match else 0.0


def parse_pattern_line(line: str, columns: int) -> list[float] | None:
    """Read one row of ``columns`` values from a line of text.

    Fields are separated by spaces or by any of ``;%$#/`` and tab. A field
    that is not a number reads as 0, missing fields are filled with 0 and
    extra fields are dropped. An empty line gives None.
    """
    for sep in _OTHER_SEPARATORS:
        line = line.replace(sep, " ")
    if not line:
        return None
    values = [_to_float(field) for field in line.split(" ")]
    values.extend([0.0] * max(0, columns - len(values)))
    return values[:columns]


def load_patterns(lines: Iterable[str], columns: int) -> list[list[float]]:
    """Read every non-empty line as a row of ``columns`` values."""
    rows = (parse_pattern_line(line.rstrip("\r\n"), columns) for line in lines)
    return [row for row in rows if row is not None]


def default_pattern(ranges: Sequence[tuple[float, float]]) -> list[float]:
    """A new row holding the middle of each column's range."""
    return [0.5 * (low + high) for low, high in ranges]


def clamp_patterns(
    patterns: Iterable[Sequence[float]],
    ranges: Sequence[tuple[float, float]],
) -> tuple[list[list[float]], int]:
    """Pull every value into its column's range.

    Returns the adjusted rows and how many values had to be moved.
    """
    adjusted = 0
    rows = []
    for pattern in patterns:
        row = []
        for value, (low, high) in zip(pattern, ranges):
            if value < low:
                value = low
                adjusted += 1
            if value > high:
                value = high
                adjusted += 1
            row.append(value)
        rows.append(row)
    return rows, adjusted