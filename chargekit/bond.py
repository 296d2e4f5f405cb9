"""Bonds between atoms and geometric distances."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Union

from chargekit.atom import Atom

if TYPE_CHECKING:
    from chargekit.molecule import Molecule


class Bond:
    """A bond of a given order between two atoms."""

    __slots__ = ("first", "second", "order", "type", "molecule")

    def __init__(self, first: Atom, second: Atom, order: int) -> None:
        self.first = first
        self.second = second
        self.order = order
        self.type = 0
        self.molecule: Molecule | None = None

    def has_atom(self, atom: Atom) -> bool:
        """Return True if ``atom`` is one of the bond's ends."""
        return atom == self.first or atom == self.second

    def get_center(self, weighted: bool = False) -> tuple[float, float, float]:
        """Return the bond centre, optionally weighted by covalent radii."""
        p1, p2 = self.first.pos, self.second.pos
        if weighted:
            c1 = self.first.element.covalent_radius
            c2 = self.second.element.covalent_radius
            total = c1 + c2
            return tuple((c1 * a + c2 * b) / total for a, b in zip(p1, p2))
        return tuple((a + b) / 2 for a, b in zip(p1, p2))

    def __str__(self) -> str:
        return f"Bond ({self.first}, {self.second}): {self.order}\n"

    def __repr__(self) -> str:
        return f"Bond(first={self.first.index}, second={self.second.index}, order={self.order})"


def _position(obj: Union[Atom, Bond], weighted: bool) -> tuple[float, float, float]:
    if isinstance(obj, Bond):
        return obj.get_center(weighted)
    return obj.pos


def distance(first: Union[Atom, Bond], second: Union[Atom, Bond], weighted: bool = False) -> float:
    """Euclidean distance between atoms or bond centres."""
    return math.dist(_position(first, weighted), _position(second, weighted))