"""Collections of molecules and classification of their atoms and bonds."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import Any

from chargekit.atom import Atom
from chargekit.bond import Bond
from chargekit.molecule import Molecule
from chargekit.parameters import AtomKey, BondKey, Parameters


class AtomClassifier(Enum):
    """How atoms are grouped into types."""

    PLAIN = "plain"
    HBO = "hbo"
    BONDED = "bonded"


class BondClassifier(Enum):
    """How bonds are grouped into types."""

    PLAIN = "plain"
    BO = "bo"


class RequiredFeatures(Enum):
    """Derived molecular data a method may need before it runs."""

    DISTANCE_TREE = "distance_tree"
    BOND_DISTANCES = "bond_distances"
    BOND_INFO = "bond_info"


class ClassifierError(ValueError):
    """Raised when a parameter key names an unknown classifier."""


def check_atom_type(
    molecule: Molecule,
    atom: Atom,
    symbol: str,
    cls: str,
    type_: str,
    permissive: bool = False,
) -> bool:
    """Return True if ``atom`` matches the (symbol, cls, type) key."""
    if symbol != "*" and symbol != atom.element.symbol:
        return False

    if cls == "plain":
        current = "*"
    elif cls == "hbo":
        order = molecule.max_bond_orders[atom.index]
        if permissive:
            current = "1" if order == 0 else str(order - 1)
        else:
            current = str(order)
    elif cls == "bonded":
        current = molecule.bonded_elements[atom.index]
    else:
        raise ClassifierError(f"AtomClassifier {cls} not found")

    return current == type_


def check_bond_type(bond: Bond, cls: str, type_: str, permissive: bool = False) -> bool:
    """Return True if ``bond`` matches the (cls, type) part of a bond key."""
    if cls == "plain":
        current = "*"
    elif cls == "bo":
        # Permissive matching tries a smaller bond order.
        current = str(bond.order - 1) if permissive else str(bond.order)
    else:
        raise ClassifierError(f"BondClassifier {cls} not found")
    return current == type_


def check_bond_atoms(molecule: Molecule, bond: Bond, bond_type: Sequence[str]) -> bool:
    """Return True if the bond's atoms match the key's atom parts in either order."""
    symbol1, cls1, type1, symbol2, cls2, type2 = bond_type[:6]

    def in_order(atom1: Atom, atom2: Atom) -> bool:
        return check_atom_type(molecule, atom1, symbol1, cls1, type1) and check_atom_type(
            molecule, atom2, symbol2, cls2, type2
        )

    return in_order(bond.first, bond.second) or in_order(bond.second, bond.first)


def _type_index(types: list, key: tuple) -> int:
    try:
        return types.index(key)
    except ValueError:
        types.append(key)
        return len(types) - 1


def _atom_matches(molecule: Molecule, atom: Atom, key: AtomKey, permissive: bool) -> bool:
    symbol, cls, type_ = key
    return check_atom_type(molecule, atom, symbol, cls, type_, permissive)


def _bond_matches(molecule: Molecule, bond: Bond, key: BondKey, permissive: bool) -> bool:
    if not check_bond_atoms(molecule, bond, key):
        return False
    return check_bond_type(bond, key[6], key[7], permissive)


class MoleculeSet:
    """A list of molecules sharing atom and bond type tables."""

    def __init__(self, molecules: Iterable[Molecule] = ()) -> None:
        self.molecules: list[Molecule] = list(molecules)
        self.atom_types: list[AtomKey] = []
        self.bond_types: list[BondKey] = []
        for molecule in self.molecules:
            for atom in molecule.atoms:
                atom.molecule = molecule
            for bond in molecule.bonds:
                bond.molecule = molecule

    def __len__(self) -> int:
        return len(self.molecules)

    def _type_counts(self) -> tuple[int, Counter]:
        counts: Counter = Counter()
        for molecule in self.molecules:
            counts.update(atom.type for atom in molecule.atoms)
        return sum(counts.values()), counts

    def info(self) -> tuple[int, int, list[tuple[str, int]]]:
        """Return (molecule count, atom count, [(symbol, count) per atom type])."""
        n_atoms, counts = self._type_counts()
        per_type = [(self.atom_types[key][0], counts[key]) for key in sorted(counts)]
        return len(self.molecules), n_atoms, per_type

    def describe(self) -> str:
        """Return a text summary of molecules, atoms and atom types."""
        n_atoms, counts = self._type_counts()
        lines = [f"Number of molecules: {len(self.molecules)}\n", f"Number of atoms: {n_atoms}\n"]
        for key in sorted(counts):
            symbol, cls, type_ = self.atom_types[key]
            lines.append(f"{symbol:2s} {cls:6s} {type_:4s}: {counts[key]}\n")
        return "".join(lines)

    def classify_atoms(self, classifier: AtomClassifier) -> None:
        """Assign atom types using a built-in classifier."""
        for molecule in self.molecules:
            for atom in molecule.atoms:
                if classifier is AtomClassifier.PLAIN:
                    type_ = "*"
                elif classifier is AtomClassifier.HBO:
                    type_ = str(molecule.max_bond_orders[atom.index])
                else:
                    type_ = molecule.bonded_elements[atom.index]
                key = (atom.element.symbol, classifier.value, type_)
                atom.type = _type_index(self.atom_types, key)

    def classify_bonds(self, classifier: BondClassifier) -> None:
        """Assign bond types using a built-in classifier."""
        for molecule in self.molecules:
            for bond in molecule.bonds:
                if classifier is BondClassifier.PLAIN:
                    bond_cls, bond_type = "plain", "*"
                else:
                    bond_cls, bond_type = "bo", str(bond.order)
                key = (
                    bond.first.element.symbol, "plain", "*",
                    bond.second.element.symbol, "plain", "*",
                    bond_cls, bond_type,
                )
                bond.type = _type_index(self.bond_types, key)

    def _classify_objects(
        self,
        types: Sequence[tuple],
        objects_of: Callable[[Molecule], list],
        matches: Callable[[Molecule, Any, Any, bool], bool],
        remove_unclassified: bool,
        permissive_types: bool,
    ) -> int:
        def find(molecule: Molecule, obj: Any, permissive: bool) -> int | None:
            for i, key in enumerate(types):
                if matches(molecule, obj, key, permissive):
                    return i
            return None

        unclassified: list[int] = []
        for m, molecule in enumerate(self.molecules):
            for obj in objects_of(molecule):
                idx = find(molecule, obj, False)
                if idx is None and permissive_types:
                    idx = find(molecule, obj, True)
                if idx is None:
                    unclassified.append(m)
                    break
                obj.type = idx

        if remove_unclassified:
            for m in reversed(unclassified):
                del self.molecules[m]
        return len(unclassified)

    def classify_set_from_parameters(
        self,
        parameters: Parameters,
        remove_unclassified: bool = True,
        permissive_types: bool = False,
    ) -> int:
        """Assign types from a parameter set; return how many molecules failed."""
        unclassified = 0
        if parameters.atom is not None:
            self.atom_types = list(parameters.atom.keys)
            unclassified += self._classify_objects(
                self.atom_types,
                lambda molecule: molecule.atoms,
                _atom_matches,
                remove_unclassified,
                permissive_types,
            )
        if parameters.bond is not None:
            self.bond_types = list(parameters.bond.keys)
            unclassified += self._classify_objects(
                self.bond_types,
                lambda molecule: molecule.bonds,
                _bond_matches,
                remove_unclassified,
                permissive_types,
            )
        return unclassified

    def fulfill_requirements(self, features: Iterable[RequiredFeatures]) -> None:
        """Compute the derived data that the given features require."""
        for feature in features:
            for molecule in self.molecules:
                if feature is RequiredFeatures.BOND_DISTANCES:
                    molecule.init_bond_info()
                    molecule.init_bond_distances()
                elif feature is RequiredFeatures.BOND_INFO:
                    molecule.init_bond_info()
                else:
                    molecule.init_distance_tree()

    def has_proteins(self) -> bool:
        """Return True if any molecule is a protein."""
        return any(molecule.is_protein() for molecule in self.molecules)