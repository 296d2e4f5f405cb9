"""Electronegativity equalization methods."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import combinations

import numpy as np

from chargekit.atom import Atom
from chargekit.bond import distance
from chargekit.methods.base import (
    EEMethod,
    MethodOption,
    _pairwise_distances,
    _solve_equalization,
    _with_diagonal,
)
from chargekit.molecule import Molecule

_EQEQ_LAMBDA = 1.2
_EQEQ_K = 14.4
_EQEQ_H_ELECTRON_AFFINITY = -2.0  # exception for hydrogen from the original article

QEQ_OVERLAP_TERMS = (
    "Nishimoto-Mataga",
    "Nishimoto-Mataga-Weiss",
    "Ohno",
    "Ohno-Klopman",
    "DasGupta-Huzinaga",
    "Louwen-Vogt",
)


class EEM(EEMethod):
    """Electronegativity equalization method."""

    def __init__(self) -> None:
        super().__init__("EEM", ["kappa"], ["A", "B"], [], [])

    def ee_system(self, atoms: Sequence[Atom], total_charge: float) -> np.ndarray:
        kappa = self._common("kappa")
        a = self._atom_values("A", atoms)
        b = self._atom_values("B", atoms)
        with np.errstate(divide="ignore"):
            off = kappa / _pairwise_distances(atoms)
        matrix = _with_diagonal(off, b)
        return _solve_equalization(matrix, -a, total_charge)[: len(atoms)]

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        return self.solve_ee(molecule).tolist()


def _eqeq_system(atoms: Sequence[Atom], total_charge: float) -> np.ndarray:
    ip = np.array([atom.element.ionization_potential for atom in atoms], dtype=float)
    ea = np.array(
        [
            _EQEQ_H_ELECTRON_AFFINITY if atom.element.symbol == "H" else atom.element.electron_affinity
            for atom in atoms
        ],
        dtype=float,
    )
    x = (ip + ea) / 2
    j = ip - ea
    r = _pairwise_distances(atoms)
    a = np.sqrt(np.outer(j, j)) / _EQEQ_K
    with np.errstate(divide="ignore", invalid="ignore"):
        overlap = np.exp(-a * a * r * r) * (2 * a - a * a * r - 1 / r)
        off = _EQEQ_LAMBDA * _EQEQ_K / 2 * (1 / r + overlap)
    matrix = _with_diagonal(off, j)
    return _solve_equalization(matrix, -x, total_charge)[: len(atoms)]


class EQeq(EEMethod):
    """Extended charge equilibration using ionization potentials and affinities."""

    def __init__(self) -> None:
        super().__init__("EQeq", [], [], [], [])

    def ee_system(self, atoms: Sequence[Atom], total_charge: float) -> np.ndarray:
        return _eqeq_system(atoms, total_charge)

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        return self.solve_ee(molecule).tolist()


class EQeqC(EEMethod):
    """EQeq with a distance-dependent correction between atom types."""

    def __init__(self) -> None:
        super().__init__("EQeq+C", ["alpha"], ["Dz"], [], [])

    def ee_system(self, atoms: Sequence[Atom], total_charge: float) -> np.ndarray:
        return _eqeq_system(atoms, total_charge)

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        q = self.solve_ee(molecule)
        atoms = molecule.atoms
        alpha = self._common("alpha")
        dz = self._atom_values("Dz", atoms)
        radii = np.array([atom.element.covalent_radius for atom in atoms], dtype=float)
        r = _pairwise_distances(atoms)
        tkk = dz[:, None] - dz[None, :]
        bkk = np.exp(-alpha * (r - radii[:, None] - radii[None, :]))
        np.fill_diagonal(bkk, 0.0)
        return (q + (tkk * bkk).sum(axis=1)).tolist()


class QEq(EEMethod):
    """Charge equilibration with a selectable Coulomb overlap term."""

    def __init__(self) -> None:
        super().__init__(
            "QEq",
            [],
            ["electronegativity", "hardness"],
            [],
            [MethodOption("overlap_term", "Overlap term", "str", "Louwen-Vogt", QEQ_OVERLAP_TERMS)],
        )

    def overlap_term(self, atom_i: Atom, atom_j: Atom, kind: str) -> float:
        """Return the screened interaction of two atoms; unknown kinds use Louwen-Vogt."""
        hardness = self._atom("hardness")
        ji, jj = hardness(atom_i), hardness(atom_j)
        rij = distance(atom_i, atom_j)
        if kind == "Nishimoto-Mataga":
            return 1 / (rij + 2 / (ji + jj))
        if kind == "Nishimoto-Mataga-Weiss":
            f = 1.2
            return f / (rij + (2 * f) / (ji + jj))
        if kind == "Ohno":
            return 1 / math.sqrt(rij * rij + (2 / (ji + jj)) ** 2)
        if kind == "Ohno-Klopman":
            return 1 / math.sqrt(rij * rij + (1 / (2 * ji) + 1 / (2 * jj)) ** 2)
        if kind == "DasGupta-Huzinaga":
            k = 0.4
            return 1 / (rij + 1 / (ji / 2 * math.exp(k * rij) + jj / 2 * math.exp(k * rij)))
        gamma = (ji + jj) / 2
        return 1 / np.cbrt(1 / gamma**3 + rij**3)

    def ee_system(self, atoms: Sequence[Atom], total_charge: float) -> np.ndarray:
        kind = self.get_option_value("overlap_term")
        matrix = np.diag(self._atom_values("hardness", atoms))
        for (i, atom_i), (j, atom_j) in combinations(enumerate(atoms), 2):
            matrix[i, j] = matrix[j, i] = self.overlap_term(atom_i, atom_j, kind)
        rhs = -self._atom_values("electronegativity", atoms)
        return _solve_equalization(matrix, rhs, total_charge)[: len(atoms)]

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        return self.solve_ee(molecule).tolist()


class SFKEEM(EEMethod):
    """Electronegativity equalization with a hyperbolic-secant interaction."""

    def __init__(self) -> None:
        super().__init__("SFKEEM", ["sigma"], ["A", "B"], [], [])

    def ee_system(self, atoms: Sequence[Atom], total_charge: float) -> np.ndarray:
        sigma = self._common("sigma")
        a = self._atom_values("A", atoms)
        b = self._atom_values("B", atoms)
        off = 2 * np.sqrt(np.outer(b, b)) / np.cosh(sigma * _pairwise_distances(atoms))
        matrix = _with_diagonal(off, 2 * b)
        return _solve_equalization(matrix, -a, total_charge)[: len(atoms)]

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        return self.solve_ee(molecule).tolist()


class SMPQEq(EEMethod):
    """Charge equilibration with charge-dependent hardness, solved iteratively."""

    iterations = 5

    def __init__(self) -> None:
        super().__init__("SMP/QEq", [], ["first", "second", "third", "fourth"], [], [])

    def ee_system(self, atoms: Sequence[Atom], total_charge: float) -> np.ndarray:
        n = len(atoms)
        first = self._atom_values("first", atoms)
        second = self._atom_values("second", atoms)
        third = self._atom_values("third", atoms)
        fourth = self._atom_values("fourth", atoms)
        gamma = 2 * np.sqrt(np.outer(second, second))
        off = 1 / np.cbrt(1 / gamma**3 + _pairwise_distances(atoms) ** 3)
        q = np.zeros(n)
        for _ in range(self.iterations):
            diagonal = 2 * (second + third * q + fourth * q * q)
            q = _solve_equalization(_with_diagonal(off, diagonal), -first, total_charge)[:n]
        return q

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        return self.solve_ee(molecule).tolist()