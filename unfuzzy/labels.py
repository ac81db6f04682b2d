"""Assigning lists of linguistic labels to the sets of a variable."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .variable import Variable

__all__ = ["split_labels", "label_options", "apply_labels"]

_SEPARATOR = "-"
_OTHER_SEPARATORS = ",;%$#/\t"


def split_labels(line: str) -> list[str]:
    """Split a line of labels on any of the accepted separators."""
    for sep in _OTHER_SEPARATORS:
        line = line.replace(sep, _SEPARATOR)
    if not line:
        return []
    return [part.strip() for part in line.split(_SEPARATOR)]


def label_options(lines: Iterable[str], count: int) -> list[str]:
    """Offer the label lines that fit a variable with ``count`` sets.

    The first line is a header and is skipped. Matching lines are joined
    with " - ", and a generic "Set 1 - Set 2 - ..." option comes last.
    """
    options = []
    iterator = iter(lines)
    next(iterator, None)
    for line in iterator:
        labels = split_labels(line)
        if len(labels) == count:
            options.append(" - ".join(labels))
    options.append(" - ".join(f"Set {i + 1}" for i in range(count)))
    return options


def apply_labels(variable: Variable, labels: Sequence[str], reverse: bool = False) -> None:
    """Rename the sets of ``variable`` in order, optionally in reverse order."""
    names = list(reversed(labels)) if reverse else list(labels)
    if len(names) > len(variable.sets):
        raise IndexError(
            f"{len(names)} labels given for a variable with {len(variable.sets)} sets"
        )
    for fuzzy_set, name in zip(variable.sets, names):
        fuzzy_set.name = name