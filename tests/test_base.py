import numpy as np
import pytest

from chargekit.atom import Atom
from chargekit.bond import Bond
from chargekit.methods.base import MGC, VEEM, Dummy, EEMethod, Formal, Method, MethodOption
from chargekit.molecule import Molecule
from chargekit.parameters import AtomParameters, Parameters
from chargekit.periodic_table import Element

H = Element(z=1, symbol="H", name="Hydrogen", electronegativity=2.2, covalent_radius=0.31,
            vdw_radius=1.2, period=1, group=1, electron_affinity=0.754, ionization_potential=13.598)
O = Element(z=8, symbol="O", name="Oxygen", electronegativity=3.44, covalent_radius=0.66,
            vdw_radius=1.52, period=2, group=16, electron_affinity=1.461, ionization_potential=13.618)
FE = Element(z=26, symbol="Fe", name="Iron", electronegativity=1.83, covalent_radius=1.32,
             vdw_radius=2.0, period=4, group=8, electron_affinity=0.151, ionization_potential=7.902)


def make_molecule(spec, bonds):
    atoms = [
        Atom(i, element, *pos, f"{element.symbol}{i}", 1, "MOL", "", False)
        for i, (element, pos) in enumerate(spec)
    ]
    return Molecule("mol", atoms, [Bond(atoms[i], atoms[j], order) for i, j, order in bonds])


def water():
    return make_molecule(
        [(O, (0.0, 0.0, 0.0)), (H, (0.757, 0.586, 0.0)), (H, (-0.757, 0.586, 0.0))],
        [(0, 1, 1), (0, 2, 1)],
    )


def hydrogen():
    return make_molecule([(H, (0.0, 0.0, 0.0)), (H, (0.74, 0.0, 0.0))], [(0, 1, 1)])


class _Iterating(Method):
    def __init__(self):
        super().__init__(
            "Iterating",
            [],
            ["A"],
            [],
            [
                MethodOption("iters", "Number of iterations", "int", "7"),
                MethodOption("mode", "Mode", "str", "fast", ("fast", "slow")),
            ],
        )

    def calculate_charges(self, molecule):
        getter = self._atom("A")
        return [getter(atom) * self.get_option_value("iters") for atom in molecule.atoms]


class _Uniform(EEMethod):
    def __init__(self):
        super().__init__("Uniform", [], [], [], [])

    def ee_system(self, atoms, total_charge):
        return np.full(len(atoms), total_charge / len(atoms))

    def calculate_charges(self, molecule):
        return self.solve_ee(molecule).tolist()


def test_dummy_returns_zeros():
    assert Dummy().calculate_charges(water()) == [0.0, 0.0, 0.0]


def test_formal_returns_formal_charges():
    molecule = water()
    molecule.atoms[0].formal_charge = -1
    assert Formal().calculate_charges(molecule) == [-1.0, 0.0, 0.0]


def test_veem_conserves_zero_total():
    charges = VEEM().calculate_charges(water())
    assert sum(charges) == pytest.approx(0.0, abs=1e-12)
    assert charges[0] < 0 < charges[1]
    assert charges[1] == pytest.approx(charges[2])


def test_veem_homonuclear_is_neutral():
    assert VEEM().calculate_charges(hydrogen()) == pytest.approx([0.0, 0.0])


def test_veem_rejects_transition_metal():
    molecule = make_molecule([(FE, (0.0, 0.0, 0.0)), (O, (1.6, 0.0, 0.0))], [(0, 1, 2)])
    method = VEEM()
    assert method.is_suitable_for_molecule(molecule) is False
    assert method.is_suitable_for_molecule(water()) is True
    with pytest.raises(ValueError):
        method.calculate_charges(molecule)


def test_mgc_sums_to_zero_and_polarises():
    method = MGC()
    charges = method.calculate_charges(water())
    assert sum(charges) == pytest.approx(0.0, abs=1e-12)
    assert charges[0] < 0 < charges[1]
    assert method.is_suitable_for_large_molecule() is False


def test_mgc_homonuclear_is_neutral():
    assert MGC().calculate_charges(hydrogen()) == pytest.approx([0.0, 0.0])


def test_option_defaults_and_conversion():
    method = _Iterating()
    assert Method.get_option_value(method, "iters") == 7
    Method.set_option_value(method, "iters", "3")
    assert Method.get_option_value(method, "iters") == 3
    assert Method.get_option_value(method, "mode") == "fast"


def test_option_errors():
    method = _Iterating()
    with pytest.raises(KeyError):
        Method.set_option_value(method, "missing", "1")
    with pytest.raises(KeyError):
        Method.get_option_value(method, "missing")
    with pytest.raises(ValueError):
        Method.set_option_value(method, "mode", "medium")


def test_has_parameters():
    assert Dummy().has_parameters() is False
    assert _Iterating().has_parameters() is True


def test_defaults_of_base_method():
    method = Dummy()
    assert method.get_requirements() == []
    assert method.is_suitable_for_large_molecule() is True
    assert method.is_suitable_for_molecule(water()) is True


def test_method_is_abstract():
    with pytest.raises(TypeError):
        Method("x", [], [], [], [])


def test_missing_parameters_raise():
    with pytest.raises(RuntimeError):
        _Iterating().calculate_charges(water())


def test_parameters_are_used():
    molecule = water()
    method = _Iterating()
    params = Parameters(
        "test", "Iterating", atom=AtomParameters(["A"], [[0.5], [2.0]], [("H", "plain", "*"), ("O", "plain", "*")])
    )
    molecule.atoms[0].type = 1
    method.set_parameters(params)
    method.set_option_value("iters", "2")
    assert method.calculate_charges(molecule) == [4.0, 1.0, 1.0]


def test_solve_ee_passes_total_charge():
    molecule = water()
    molecule.atoms[0].formal_charge = 2
    charges = _Uniform().calculate_charges(molecule)
    assert sum(charges) == pytest.approx(2.0)
    assert charges[0] == pytest.approx(charges[2])