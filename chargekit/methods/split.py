"""Split-charge equilibration methods."""

from __future__ import annotations

import math

import numpy as np

from chargekit.methods.base import Method, _pairwise_distances, _with_diagonal
from chargekit.molecule import Molecule

_erf = np.vectorize(math.erf, otypes=[float])


class _SplitChargeMethod(Method):
    """Shared solver for split-charge equilibration around reference charges."""

    def _solve_split(self, molecule: Molecule, q0: np.ndarray) -> np.ndarray:
        atoms = molecule.atoms
        bonds = molecule.bonds
        n, m = len(atoms), len(bonds)

        hardness = self._atom_values("hardness", atoms)
        chi = self._atom_values("electronegativity", atoms)
        width = self._atom_values("width", atoms)

        r = _pairwise_distances(atoms)
        d0 = np.sqrt(2 * width[:, None] ** 2 + 2 * width[None, :] ** 2)
        with np.errstate(divide="ignore", invalid="ignore"):
            off = _erf(r / d0) / r
        a = _with_diagonal(off, hardness)
        b = -chi - a @ q0 + hardness * q0

        t = np.zeros((m, n))
        for k, bond in enumerate(bonds):
            t[k, bond.first.index] = 1.0
            t[k, bond.second.index] = -1.0

        if m == 0:
            return q0.copy()

        kappa = self._bond("kappa")
        split_a = t @ a @ t.T + np.diag([kappa(bond) for bond in bonds])
        split_b = t @ b
        split_q = np.linalg.solve(split_a, split_b)
        return t.T @ split_q + q0

    def is_suitable_for_large_molecule(self) -> bool:
        return False


class SQE(_SplitChargeMethod):
    """Split-charge equilibration."""

    def __init__(self) -> None:
        super().__init__("SQE", [], ["electronegativity", "hardness", "width"], ["kappa"], [])

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        q0 = np.zeros(len(molecule.atoms))
        return self._solve_split(molecule, q0).tolist()


class SQEq0(_SplitChargeMethod):
    """Split-charge equilibration around formal charges."""

    def __init__(self) -> None:
        super().__init__("SQEq0", [], ["electronegativity", "hardness", "width"], ["kappa"], [])

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        q0 = np.array([atom.formal_charge for atom in molecule.atoms], dtype=float)
        return self._solve_split(molecule, q0).tolist()


class SQEqp(_SplitChargeMethod):
    """Split-charge equilibration around parametrized reference charges."""

    def __init__(self) -> None:
        super().__init__(
            "SQE+qp", [], ["electronegativity", "hardness", "width", "q0"], ["kappa"], []
        )

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        atoms = molecule.atoms
        q0 = self._atom_values("q0", atoms)
        if len(atoms):
            q0 = q0 - (q0.sum() - molecule.total_charge()) / len(atoms)
        return self._solve_split(molecule, q0).tolist()