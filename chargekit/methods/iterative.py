"""Iterative charge transfer methods working along bonds."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from chargekit.atom import Atom
from chargekit.bond import Bond, distance
from chargekit.methods.base import Method, MethodOption
from chargekit.molecule import Molecule
from chargekit.molecule_set import RequiredFeatures

# Electronegativity of hydrogen used as the reference in Charge2.
_CHARGE2_HYDROGEN_CHI = 7.17
_CHARGE2_ITERATIONS = 10


def _iters_option() -> MethodOption:
    return MethodOption("iters", "Number of iterations", "int", "7")


def _transfer_charges(
    molecule: Molecule,
    iterations: int,
    electronegativities: Callable[[np.ndarray], np.ndarray],
    damping: Callable[[Atom], float],
    factor: Callable[[Bond, Atom, Atom, int], float],
) -> list[float]:
    """Move charge along bonds from the less to the more electronegative atom.

    ``electronegativities`` maps the current charges to per-atom
    electronegativities, ``damping`` gives the divisor for the less
    electronegative atom and ``factor`` the attenuation in step ``alpha``.
    """
    q = np.zeros(len(molecule.atoms))
    for alpha in range(1, iterations):
        chi = electronegativities(q)
        for bond in molecule.bonds:
            atom1, atom2 = bond.first, bond.second
            if chi[atom1.index] > chi[atom2.index]:
                atom1, atom2 = atom2, atom1
            diff = (
                factor(bond, atom1, atom2, alpha)
                * (chi[atom2.index] - chi[atom1.index])
                / damping(atom1)
            )
            q[atom1.index] += diff
            q[atom2.index] -= diff
    return q.tolist()


class PEOE(Method):
    """Partial equalization of orbital electronegativity."""

    def __init__(self) -> None:
        super().__init__("PEOE", ["dampH"], ["A", "B", "C"], [], [_iters_option()])

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        atoms = molecule.atoms
        a_values = self._atom_values("A", atoms)
        b_values = self._atom_values("B", atoms)
        c_values = self._atom_values("C", atoms)
        get_a, get_b, get_c = self._atom("A"), self._atom("B"), self._atom("C")
        damp_h = self._common("dampH")

        def damping(atom: Atom) -> float:
            if atom.element.symbol == "H":
                return damp_h
            return get_a(atom) + get_b(atom) + get_c(atom)

        return _transfer_charges(
            molecule,
            self.get_option_value("iters"),
            lambda q: c_values * q * q + b_values * q + a_values,
            damping,
            lambda bond, atom1, atom2, alpha: 0.5**alpha,
        )


class MPEOE(Method):
    """Modified PEOE with a bond-specific attenuation factor."""

    def __init__(self) -> None:
        super().__init__("MPEOE", ["Hplus"], ["A", "B"], ["f"], [_iters_option()])

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        atoms = molecule.atoms
        a_values = self._atom_values("A", atoms)
        b_values = self._atom_values("B", atoms)
        get_a, get_b = self._atom("A"), self._atom("B")
        get_f = self._bond("f") if molecule.bonds else None
        h_plus = self._common("Hplus")

        def damping(atom: Atom) -> float:
            if atom.element.symbol == "H":
                return h_plus
            return get_a(atom) + get_b(atom)

        return _transfer_charges(
            molecule,
            self.get_option_value("iters"),
            lambda q: b_values * q + a_values,
            damping,
            lambda bond, atom1, atom2, alpha: get_f(bond) ** alpha,
        )


class GDAC(Method):
    """Geometry-dependent atomic charges with van der Waals attenuation."""

    def __init__(self) -> None:
        super().__init__("GDAC", [], ["A", "B"], [], [_iters_option()])

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        atoms = molecule.atoms
        a_values = self._atom_values("A", atoms)
        b_values = self._atom_values("B", atoms)
        get_a, get_b = self._atom("A"), self._atom("B")

        def factor(bond: Bond, atom1: Atom, atom2: Atom, alpha: int) -> float:
            radii = atom1.element.vdw_radius + atom2.element.vdw_radius
            return (1 - distance(atom1, atom2) / radii) ** alpha

        return _transfer_charges(
            molecule,
            self.get_option_value("iters"),
            lambda q: b_values * q + a_values,
            lambda atom: get_a(atom) + get_b(atom),
            factor,
        )


class Charge2(Method):
    """Charge2 method based on topological neighbourhoods up to three bonds."""

    def __init__(self) -> None:
        super().__init__("Charge2", ["a1", "a2", "a3", "b", "c", "alpha"], ["chi", "P0", "q0"], [], [])

    def get_requirements(self) -> list[RequiredFeatures]:
        return [RequiredFeatures.BOND_DISTANCES]

    def _pair_factor(self, atom: Atom, bonded: Atom) -> float:
        if atom.element.period == 2 and bonded.element.period == 2:
            return self._common("a1")
        if atom.element.symbol == "H" or bonded.element.symbol == "H":
            return self._common("a2")
        return self._common("a3")

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        chi = self._atom("chi")
        p0 = self._atom("P0")
        q0 = self._atom("q0")
        b = self._common("b")
        c = self._common("c")
        alpha = self._common("alpha")

        q = [0.0] * len(molecule.atoms)
        for _ in range(_CHARGE2_ITERATIONS):
            for atom in molecule.atoms:
                ei = chi(atom)
                alpha_charge = sum(
                    (chi(bonded) - ei) / self._pair_factor(atom, bonded)
                    for bonded in molecule.k_bond_distance(atom, 1)
                )
                p = p0(atom) * (1 + alpha * (q0(atom) - q[atom.index]))
                beta_charge = sum(
                    (chi(bonded) - _CHARGE2_HYDROGEN_CHI) * p / b
                    for bonded in molecule.k_bond_distance(atom, 2)
                )
                beta_charge += sum(
                    (chi(bonded) - _CHARGE2_HYDROGEN_CHI) * p / b / c
                    for bonded in molecule.k_bond_distance(atom, 3)
                )
                q[atom.index] = alpha_charge + beta_charge
        return q