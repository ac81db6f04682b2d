"""Fuzzy sets, linguistic variables and design helpers for fuzzy logic systems."""

__version__ = "3.0.0"

__all__ = [
    "editing",
    "engine_options",
    "implication",
    "labels",
    "patterns",
    "plot",
    "sets",
    "variable",
]