"""Atoms of a molecule."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chargekit.periodic_table import Element

if TYPE_CHECKING:
    from chargekit.molecule import Molecule


class Atom:
    """An atom with a position, an element and residue information.

    Two atoms are equal when they have the same index and belong to the
    same molecule object.
    """

    __slots__ = (
        "index",
        "element",
        "pos",
        "molecule",
        "type",
        "formal_charge",
        "name",
        "residue_id",
        "residue",
        "chain_id",
        "hetatm",
    )

    def __init__(
        self,
        index: int,
        element: Element,
        x: float,
        y: float,
        z: float,
        name: str,
        residue_id: int,
        residue: str,
        chain_id: str,
        hetatm: bool,
    ) -> None:
        self.index = index
        self.element = element
        self.pos: tuple[float, float, float] = (float(x), float(y), float(z))
        self.molecule: Molecule | None = None
        self.type = 0
        self.formal_charge = 0
        self.name = name
        self.residue_id = residue_id
        self.residue = residue
        self.chain_id = chain_id
        self.hetatm = hetatm

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Atom):
            return NotImplemented
        return self.index == other.index and self.molecule is other.molecule

    def __hash__(self) -> int:
        return hash((self.index, id(self.molecule)))

    def __str__(self) -> str:
        return f"Atom {self.name} Idx: {self.index}"

    def __repr__(self) -> str:
        return f"Atom(index={self.index}, element={self.element.symbol!r}, name={self.name!r}, pos={self.pos})"