"""Kinds of fuzzy implication offered by the inference engine."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ImplicationKind", "implication_name"]


class ImplicationKind(IntEnum):
    """Implication operators, numbered as the engine lists them."""

    PRODUCT = 0
    MINIMUM = 1
    KLEENE_DIENES = 2
    LUKASIEWICZ = 3
    ZADEH = 4
    STOCHASTIC = 5
    GOGUEN = 6
    GODEL = 7
    SHARP = 8


_NAMES = {
    ImplicationKind.PRODUCT: "Product",
    ImplicationKind.MINIMUM: "Minimum",
    ImplicationKind.KLEENE_DIENES: "Kleene-Dienes",
    ImplicationKind.LUKASIEWICZ: "Lukasiewicz",
    ImplicationKind.ZADEH: "Zadeh",
    ImplicationKind.STOCHASTIC: "Stochastic",
    ImplicationKind.GOGUEN: "Goguen",
    ImplicationKind.GODEL: "Godel",
    ImplicationKind.SHARP: "Sharp",
}


def implication_name(kind: int) -> str:
    """Return the display name of an implication, or "" for an unknown one."""
    try:
        return _NAMES[ImplicationKind(kind)]
    except ValueError:
        return ""