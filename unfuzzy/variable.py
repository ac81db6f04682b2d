"""Linguistic variables: a named range covered by fuzzy sets."""

from __future__ import annotations

from dataclasses import dataclass, field

from .sets import FuzzySet

__all__ = ["Variable", "MIN_INTERVALS", "MAX_INTERVALS"]

MIN_INTERVALS = 5
MAX_INTERVALS = 200


@dataclass
class Variable:
    """A linguistic variable: its name, its range and the sets that cover it."""

    name: str = ""
    range_min: float = 0.0
    range_max: float = 1.0
    intervals: int = field(default=10, compare=False)
    sets: list[FuzzySet] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.set_intervals(self.intervals)

    def __len__(self) -> int:
        return len(self.sets)

    @property
    def interval(self) -> float:
        """Width of one evaluation interval."""
        return (self.range_max - self.range_min) / self.intervals

    def add_set(self, fuzzy_set: FuzzySet) -> None:
        """Append a set after the existing ones."""
        self.sets.append(fuzzy_set)

    def remove_set(self, index: int) -> None:
        """Remove the set at ``index``."""
        del self.sets[index]

    def insert_set(self, fuzzy_set: FuzzySet, index: int) -> None:
        """Insert a set so that it ends up at ``index``."""
        self.sets.insert(index, fuzzy_set)

    def clear_sets(self) -> None:
        """Remove every set."""
        self.sets.clear()

    def set_intervals(self, count: int) -> None:
        """Set the number of evaluation intervals across the range."""
        if count <= 0:
            raise ValueError(f"number of intervals must be positive, got {count}")
        self.intervals = count

    def membership(self, which: int | FuzzySet, x: float) -> float:
        """Membership of ``x`` in a set given by index or by the set itself."""
        fuzzy_set = which if isinstance(which, FuzzySet) else self.sets[which]
        return fuzzy_set.membership(x)

    def apply_edit(self, name: str, minimum: float, maximum: float, intervals: int) -> None:
        """Apply an edit of name, range and intervals.

        A range whose minimum is not below its maximum is ignored and the
        current range is kept; the interval count is held between
        MIN_INTERVALS and MAX_INTERVALS.
        """
        if minimum >= maximum:
            minimum, maximum = self.range_min, self.range_max
        self.name = name
        self.range_min = minimum
        self.range_max = maximum
        self.set_intervals(min(max(intervals, MIN_INTERVALS), MAX_INTERVALS))