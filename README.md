# chargekit

Partial atomic charges for molecules, computed with empirical methods.

Available methods:

- reference methods in `chargekit.methods.base`: `Dummy` (all zeros),
  `Formal` (formal charges), `VEEM` (valence-electron weighted equalization)
  and `MGC` (electronegativity and bond orders);
- electronegativity equalization in `chargekit.methods.equalization`: `EEM`,
  `EQeq`, `EQeqC`, `QEq`, `SFKEEM` and `SMPQEq`;
- iterative bond charge transfer in `chargekit.methods.iterative`: `PEOE`,
  `MPEOE`, `GDAC` and `Charge2`;
- split-charge equilibration in `chargekit.methods.split`: `SQE`, `SQEq0` and
  `SQEqp`.

## Installation

```
pip install .
```

The only runtime dependency is numpy. To run the tests:

```
pip install ".[test]"
pytest
```

## Building blocks

- `chargekit.periodic_table`: `Element` and `PeriodicTable`. Load a table
  with `PeriodicTable.from_csv(path)` (radii in the file are in pm and are
  converted to Å) or build one from `Element` objects, and look elements up
  with `get_element_by_z` (zero-based), `get_element_by_symbol` (`"D"` is
  treated as hydrogen) or `get_element_by_name`. Unknown symbols and names
  raise `KeyError`.
- `chargekit.atom`, `chargekit.bond`, `chargekit.molecule`: `Atom`, `Bond`
  and `Molecule`. A molecule offers bond graph queries (`bonded`,
  `bond_order`, `degree`, `get_bonded`, `get_bond`, `bond_distance`,
  `k_bond_distance`), neighbour search (`get_close_atoms`), `total_charge`
  and `is_protein`. `chargekit.bond.distance` measures between atoms or bond
  centres.
- `chargekit.molecule_set`: `MoleculeSet` with atom and bond typing
  (`classify_atoms`, `classify_bonds`, `classify_set_from_parameters`),
  precomputation of derived data (`fulfill_requirements` with
  `RequiredFeatures`), `info()` returning the molecule count, atom count and
  atoms per type, and `describe()` returning the same as text.
- `chargekit.parameters`: `Parameters.from_file(path)` reads a JSON parameter
  set with a `metadata` section and optional `common`, `atom` and `bond`
  sections; `Parameters.from_dict` takes the decoded structure. Malformed
  input raises `ParametersError`. `describe()` lists every value.
- `chargekit.statistics`: `rmsd`, `pearson2`, `d_max` and `d_avg` compare two
  mappings of molecule name to charges; they raise `ValueError` when the
  names differ.
- `chargekit.strings`: small text helpers, including `format_values`, which
  prints numbers with five decimals.

## Calculating charges

```python
from chargekit.atom import Atom
from chargekit.bond import Bond
from chargekit.methods.equalization import EEM
from chargekit.molecule import Molecule
from chargekit.molecule_set import MoleculeSet
from chargekit.parameters import Parameters
from chargekit.periodic_table import Element

hydrogen = Element(1, "H", "Hydrogen", 2.20, 0.31, 1.20, 1, 1, 0.754, 13.598)
oxygen = Element(8, "O", "Oxygen", 3.44, 0.66, 1.52, 2, 16, 1.461, 13.618)

atoms = [
    Atom(0, oxygen, 0.0, 0.0, 0.0, "O", 1, "HOH", "", True),
    Atom(1, hydrogen, 0.96, 0.0, 0.0, "H1", 1, "HOH", "", True),
    Atom(2, hydrogen, -0.24, 0.93, 0.0, "H2", 1, "HOH", "", True),
]
water = Molecule("water", atoms, [Bond(atoms[0], atoms[1], 1), Bond(atoms[0], atoms[2], 1)])
molecules = MoleculeSet([water])

parameters = Parameters.from_dict({
    "metadata": {"name": "example", "method": "EEM"},
    "common": {"names": ["kappa"], "values": [0.5]},
    "atom": {
        "names": ["A", "B"],
        "data": [
            {"key": ["H", "plain", "*"], "value": [2.4, 0.9]},
            {"key": ["O", "plain", "*"], "value": [2.6, 1.1]},
        ],
    },
})

unclassified = molecules.classify_set_from_parameters(parameters)
method = EEM()
method.set_parameters(parameters)
molecules.fulfill_requirements(method.get_requirements())

for molecule in molecules.molecules:
    print(molecule.name, method.calculate_charges(molecule))
```

`classify_set_from_parameters` assigns each atom and bond the index of the
first matching parameter key and returns how many molecules could not be
typed; by default those molecules are removed from the set. Pass
`permissive_types=True` to fall back to a smaller bond order when no exact
match exists.

Methods with options take them through `set_option_value`: `PEOE`, `MPEOE`
and `GDAC` have `iters` (default 7), and `QEq` has `overlap_term`, one of
`Nishimoto-Mataga`, `Nishimoto-Mataga-Weiss`, `Ohno`, `Ohno-Klopman`,
`DasGupta-Huzinaga` or `Louwen-Vogt` (the default). `Charge2` needs bond
distances, so call `fulfill_requirements(method.get_requirements())` before
running it.

## What the package does not do

- It does not read molecular structure files; molecules are built from
  `Atom`, `Bond` and `Molecule` objects.
- It ships no periodic table data and no parameter files; supply your own CSV
  and JSON files.
- It has no command-line program and no lookup of methods by name: create the
  method class you want, set its parameters and call `calculate_charges` on
  each molecule yourself.