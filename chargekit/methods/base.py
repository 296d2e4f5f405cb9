"""Base classes for charge calculation methods and the simplest methods."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from chargekit.atom import Atom
from chargekit.bond import Bond
from chargekit.molecule import Molecule
from chargekit.molecule_set import RequiredFeatures
from chargekit.parameters import Parameters
from chargekit.periodic_table import Element

_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "int": int,
    "double": float,
    "float": float,
    "str": str,
}


@dataclass(frozen=True)
class MethodOption:
    """A tunable option of a method, with its default given as text."""

    name: str
    description: str
    type: str
    default: str
    choices: tuple[str, ...] = ()


class Method(ABC):
    """A method that assigns partial charges to the atoms of a molecule."""

    def __init__(
        self,
        name: str,
        common: Sequence[str] = (),
        atom: Sequence[str] = (),
        bond: Sequence[str] = (),
        options: Iterable[MethodOption] = (),
    ) -> None:
        self.name = name
        self.common_names = list(common)
        self.atom_names = list(atom)
        self.bond_names = list(bond)
        self.options = {option.name: option for option in options}
        self.parameters: Parameters | None = None
        self._option_values: dict[str, Any] = {}
        for option in self.options.values():
            self.set_option_value(option.name, option.default)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def has_parameters(self) -> bool:
        """Return True if the method needs a parameter set."""
        return bool(self.common_names or self.atom_names or self.bond_names)

    def set_parameters(self, parameters: Parameters | None) -> None:
        """Use ``parameters`` for subsequent calculations."""
        self.parameters = parameters

    def set_option_value(self, name: str, value: Any) -> None:
        """Set option ``name``, converting ``value`` to the option's type."""
        try:
            option = self.options[name]
        except KeyError:
            raise KeyError(f"Unknown option: {name}") from None
        if option.choices and str(value) not in option.choices:
            raise ValueError(f"Invalid value {value!r} for option {name}")
        converter = _CONVERTERS.get(option.type, str)
        self._option_values[name] = converter(value)

    def get_option_value(self, name: str) -> Any:
        """Return the current value of option ``name``."""
        try:
            return self._option_values[name]
        except KeyError:
            raise KeyError(f"Unknown option: {name}") from None

    def get_requirements(self) -> list[RequiredFeatures]:
        """Return the derived molecular data the method needs."""
        return []

    def is_suitable_for_large_molecule(self) -> bool:
        """Return True if the method scales to large molecules."""
        return True

    def is_suitable_for_molecule(self, molecule: Molecule) -> bool:
        """Return True if the method can handle ``molecule``."""
        return True

    @abstractmethod
    def calculate_charges(self, molecule: Molecule) -> list[float]:
        """Return one partial charge per atom of ``molecule``."""

    # --- parameter access ---

    def _require_parameters(self) -> Parameters:
        if self.parameters is None:
            raise RuntimeError(f"Method {self.name} requires parameters")
        return self.parameters

    def _common(self, name: str) -> float:
        common = self._require_parameters().common
        if common is None:
            raise RuntimeError(f"Method {self.name} requires common parameters")
        return common.parameter(self.common_names.index(name))

    def _atom(self, name: str) -> Callable[[Atom], float]:
        atom = self._require_parameters().atom
        if atom is None:
            raise RuntimeError(f"Method {self.name} requires atom parameters")
        return atom.parameter(self.atom_names.index(name))

    def _bond(self, name: str) -> Callable[[Bond], float]:
        bond = self._require_parameters().bond
        if bond is None:
            raise RuntimeError(f"Method {self.name} requires bond parameters")
        return bond.parameter(self.bond_names.index(name))

    def _atom_values(self, name: str, atoms: Sequence[Atom]) -> np.ndarray:
        getter = self._atom(name)
        return np.array([getter(atom) for atom in atoms], dtype=float)


class EEMethod(Method):
    """A method solving an electronegativity equalization system."""

    @abstractmethod
    def ee_system(self, atoms: Sequence[Atom], total_charge: float) -> np.ndarray:
        """Return charges of ``atoms`` that sum to ``total_charge``."""

    def solve_ee(self, molecule: Molecule) -> np.ndarray:
        """Solve the equalization system for the whole molecule."""
        return self.ee_system(molecule.atoms, molecule.total_charge())


def _pairwise_distances(atoms: Sequence[Atom]) -> np.ndarray:
    positions = np.array([atom.pos for atom in atoms], dtype=float).reshape(-1, 3)
    diff = positions[:, None, :] - positions[None, :, :]
    return np.sqrt((diff**2).sum(axis=-1))


def _with_diagonal(matrix: np.ndarray, diagonal: np.ndarray) -> np.ndarray:
    result = np.array(matrix, dtype=float)
    np.fill_diagonal(result, diagonal)
    return result


def _solve_equalization(matrix: np.ndarray, rhs: np.ndarray, total_charge: float) -> np.ndarray:
    """Solve the system bordered by the total-charge constraint.

    Returns the charges followed by the Lagrange multiplier.
    """
    n = len(rhs)
    system = np.ones((n + 1, n + 1))
    system[:n, :n] = matrix
    system[n, n] = 0.0
    return np.linalg.solve(system, np.append(rhs, float(total_charge)))


def _valence_electron_count(element: Element) -> int:
    if element.group in (1, 2):
        return element.group
    if 13 <= element.group <= 18:
        return element.group - 10
    raise ValueError(f"Valence electron count is not defined for {element.symbol}")


class Dummy(Method):
    """Assigns zero charge to every atom."""

    def __init__(self) -> None:
        super().__init__("Dummy", [], [], [], [])

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        return [0.0] * len(molecule.atoms)


class Formal(Method):
    """Uses the formal charges of the atoms."""

    def __init__(self) -> None:
        super().__init__("Formal", [], [], [], [])

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        return [float(atom.formal_charge) for atom in molecule.atoms]


class VEEM(Method):
    """Valence electrons weighted electronegativity equalization."""

    def __init__(self) -> None:
        super().__init__("VEEM", [], [], [], [])

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        valence = np.array([_valence_electron_count(a.element) for a in molecule.atoms], dtype=float)
        chi = np.array([a.element.electronegativity for a in molecule.atoms], dtype=float)
        eq_en = float((chi * valence).sum() / valence.sum())
        return (valence * (eq_en - chi) / eq_en).tolist()

    def is_suitable_for_molecule(self, molecule: Molecule) -> bool:
        try:
            for atom in molecule.atoms:
                _valence_electron_count(atom.element)
        except ValueError:
            return False
        return True


class MGC(Method):
    """Modified group contribution charges from electronegativity and bond orders."""

    def __init__(self) -> None:
        super().__init__("MGC", [], [], [], [])

    def calculate_charges(self, molecule: Molecule) -> list[float]:
        n = len(molecule.atoms)
        s = np.identity(n)
        x0 = np.array([atom.element.electronegativity for atom in molecule.atoms], dtype=float)
        for bond in molecule.bonds:
            i1, i2 = bond.first.index, bond.second.index
            s[i1, i1] += bond.order
            s[i2, i2] += bond.order
            s[i1, i2] -= bond.order
            s[i2, i1] -= bond.order
        chi = np.linalg.solve(s, x0) - x0
        geometric_mean = math.exp(float(np.log(x0).sum()) / n)
        return (chi / geometric_mean).tolist()

    def is_suitable_for_large_molecule(self) -> bool:
        return False