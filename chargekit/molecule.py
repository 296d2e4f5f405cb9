"""Molecules: atoms, bonds and derived topology."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

import numpy as np

from chargekit.atom import Atom
from chargekit.bond import Bond


class Molecule:
    """A named collection of atoms connected by bonds."""

    def __init__(self, name: str, atoms: Iterable[Atom], bonds: Iterable[Bond]) -> None:
        self.name = name
        self.atoms: list[Atom] = list(atoms)
        self.bonds: list[Bond] = list(bonds)
        for atom in self.atoms:
            atom.molecule = self
        for bond in self.bonds:
            bond.molecule = self

        n = len(self.atoms)
        self.max_bond_orders: list[int] = [0] * n
        neighbours: list[list[str]] = [[] for _ in range(n)]
        for bond in self.bonds:
            i1, i2 = bond.first.index, bond.second.index
            self.max_bond_orders[i1] = max(self.max_bond_orders[i1], bond.order)
            self.max_bond_orders[i2] = max(self.max_bond_orders[i2], bond.order)
            neighbours[i1].append(bond.second.element.symbol)
            neighbours[i2].append(bond.first.element.symbol)
        self.bonded_elements: list[str] = ["".join(sorted(symbols)) for symbols in neighbours]

        self._bond_info: np.ndarray | None = None
        self._bond_distances: np.ndarray | None = None
        self._positions: np.ndarray | None = None

    def __str__(self) -> str:
        return f"Molecule {self.name} Atoms: {len(self.atoms)} Bonds {len(self.bonds)}\n"

    def __repr__(self) -> str:
        return f"Molecule(name={self.name!r}, atoms={len(self.atoms)}, bonds={len(self.bonds)})"

    # --- initialisation of derived data ---

    def init_bond_info(self) -> None:
        """Build the matrix of bond orders between all atom pairs."""
        n = len(self.atoms)
        info = np.zeros((n, n), dtype=np.int8)
        for bond in self.bonds:
            i, j = bond.first.index, bond.second.index
            info[i, j] = bond.order
            info[j, i] = bond.order
        self._bond_info = info

    def init_bond_distances(self) -> None:
        """Compute topological distances (in bonds) between all atom pairs."""
        if self._bond_info is None:
            self.init_bond_info()
        n = len(self.atoms)
        distances = np.full((n, n), -1, dtype=int)
        for start in range(n):
            row = distances[start]
            row[start] = 0
            queue = deque([start])
            while queue:
                current = queue.popleft()
                for neighbour in self.get_bonded(current):
                    if row[neighbour] == -1:
                        row[neighbour] = row[current] + 1
                        queue.append(neighbour)
        self._bond_distances = distances

    def init_distance_tree(self) -> None:
        """Prepare spatial lookup of atoms by position."""
        self._positions = np.array([atom.pos for atom in self.atoms], dtype=float).reshape(-1, 3)

    def _require_bond_info(self) -> np.ndarray:
        if self._bond_info is None:
            raise RuntimeError("Bond info is not initialised")
        return self._bond_info

    def _require_bond_distances(self) -> np.ndarray:
        if self._bond_distances is None:
            raise RuntimeError("Bond distances are not initialised")
        return self._bond_distances

    # --- queries ---

    def bonded(self, atom1: Atom, atom2: Atom) -> bool:
        """Return True if the two atoms are bonded."""
        return bool(self._require_bond_info()[atom1.index, atom2.index] > 0)

    def get_bond(self, atom1: Atom, atom2: Atom) -> Bond | None:
        """Return the bond joining the two atoms, or None."""
        for bond in self.bonds:
            if (atom1 == bond.first and atom2 == bond.second) or (
                atom1 == bond.second and atom2 == bond.first
            ):
                return bond
        return None

    def bond_order(self, atom1: Atom, atom2: Atom) -> int:
        """Return the order of the bond between two atoms, 0 if none."""
        return int(self._require_bond_info()[atom1.index, atom2.index])

    def degree(self, atom: Atom) -> int:
        """Return the sum of bond orders of ``atom``."""
        return int(self._require_bond_info()[atom.index].sum())

    def get_bonded(self, atom_idx: int) -> list[int]:
        """Return indices of atoms bonded to the atom at ``atom_idx``."""
        return [int(j) for j in np.flatnonzero(self._require_bond_info()[atom_idx])]

    def get_close_atoms(self, atom: Atom, cutoff: float) -> list[Atom]:
        """Return atoms closer than ``cutoff``, ``atom`` first, then by distance."""
        if self._positions is None:
            raise RuntimeError("Distance tree is not initialised")
        squared = ((self._positions - np.asarray(atom.pos)) ** 2).sum(axis=1)
        matches = np.flatnonzero(squared < cutoff * cutoff)
        ordered = sorted(matches, key=lambda i: (squared[i], i))
        close = [self.atoms[int(i)] for i in ordered if int(i) != atom.index]
        if any(int(i) == atom.index for i in ordered):
            close.insert(0, atom)
        return close

    def bond_distance(self, atom1: Atom, atom2: Atom) -> int:
        """Return the number of bonds between two atoms, -1 if disconnected."""
        return int(self._require_bond_distances()[atom1.index, atom2.index])

    def k_bond_distance(self, atom: Atom, k: int) -> list[Atom]:
        """Return atoms exactly ``k`` bonds away from ``atom``."""
        row = self._require_bond_distances()[atom.index]
        return [self.atoms[int(i)] for i in np.flatnonzero(row == k)]

    def total_charge(self) -> int:
        """Return the sum of formal charges of all atoms."""
        return sum(atom.formal_charge for atom in self.atoms)

    def is_protein(self) -> bool:
        """Return True if the first atom carries a chain identifier."""
        return bool(self.atoms[0].chain_id)