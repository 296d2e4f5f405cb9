import pytest

from chargekit.atom import Atom
from chargekit.bond import Bond, distance
from chargekit.periodic_table import Element

CARBON = Element(6, "C", "Carbon", 2.55, 0.75, 1.7, 2, 14, 1.26, 11.26)
HYDROGEN = Element(1, "H", "Hydrogen", 2.2, 0.32, 1.1, 1, 1, 0.75, 13.6)


def atom(index, element, x, y, z):
    return Atom(index, element, x, y, z, element.symbol, 1, "RES", "", False)


def test_has_atom():
    a, b, c = atom(0, CARBON, 0, 0, 0), atom(1, CARBON, 1, 0, 0), atom(2, CARBON, 2, 0, 0)
    bond = Bond(a, b, 1)
    assert bond.has_atom(a)
    assert bond.has_atom(b)
    assert not bond.has_atom(c)


def test_unweighted_center_is_equidistant():
    a, b = atom(0, CARBON, 0, 1, 2), atom(1, HYDROGEN, 4, -3, 6)
    center = Bond(a, b, 1).get_center()
    assert distance(a, Bond(a, b, 1)) == pytest.approx(distance(b, Bond(a, b, 1)))
    assert len(center) == 3


def test_weighted_center_with_equal_radii_matches_unweighted():
    a, b = atom(0, CARBON, 1, 2, 3), atom(1, CARBON, 5, 6, 7)
    bond = Bond(a, b, 2)
    assert bond.get_center(True) == pytest.approx(bond.get_center(False))


def test_weighted_center_ratio_follows_radii():
    a, b = atom(0, CARBON, 0, 0, 0), atom(1, HYDROGEN, 3, 4, 0)
    bond = Bond(a, b, 1)
    center = bond.get_center(True)
    d_a = distance(a, bond, True)
    d_b = distance(b, bond, True)
    assert d_a + d_b == pytest.approx(distance(a, b))
    assert d_a / d_b == pytest.approx(HYDROGEN.covalent_radius / CARBON.covalent_radius)
    assert center[2] == pytest.approx(0.0)


def test_distance_between_atoms():
    a, b = atom(0, CARBON, 0, 0, 0), atom(1, CARBON, 3, 4, 0)
    assert distance(a, b) == pytest.approx(5.0)
    assert distance(a, b) == pytest.approx(distance(b, a))


def test_distance_between_bonds_is_symmetric():
    a, b = atom(0, CARBON, 0, 0, 0), atom(1, CARBON, 2, 0, 0)
    c, d = atom(2, CARBON, 0, 3, 0), atom(3, CARBON, 2, 3, 0)
    bond1, bond2 = Bond(a, b, 1), Bond(c, d, 1)
    assert distance(bond1, bond2, True) == pytest.approx(distance(bond2, bond1, True))
    assert distance(bond1, bond2) == pytest.approx(distance(a, c))


def test_defaults_and_str():
    a, b = atom(0, CARBON, 0, 0, 0), atom(1, CARBON, 1, 0, 0)
    bond = Bond(a, b, 2)
    assert bond.type == 0
    assert bond.order == 2
    assert str(bond) == f"Bond ({a}, {b}): 2\n"