from chargekit.atom import Atom
from chargekit.periodic_table import Element

CARBON = Element(6, "C", "Carbon", 2.55, 0.75, 1.7, 2, 14, 1.26, 11.26)


def make_atom(index=0, chain_id=""):
    return Atom(index, CARBON, 1.0, 2.0, 3.0, "CA", 5, "ALA", chain_id, False)


def test_fields_are_stored():
    atom = make_atom(3, "A")
    assert atom.index == 3
    assert atom.element is CARBON
    assert atom.pos == (1.0, 2.0, 3.0)
    assert atom.name == "CA"
    assert atom.residue_id == 5
    assert atom.residue == "ALA"
    assert atom.chain_id == "A"
    assert atom.hetatm is False


def test_defaults():
    atom = make_atom()
    assert atom.formal_charge == 0
    assert atom.type == 0
    assert atom.molecule is None


def test_formal_charge_can_be_set():
    atom = make_atom()
    atom.formal_charge = -1
    assert atom.formal_charge == -1


def test_equality_by_index_and_molecule():
    assert make_atom(1) == make_atom(1)
    assert not (make_atom(1) == make_atom(2))


def test_equality_depends_on_molecule_identity():
    a, b = make_atom(1), make_atom(1)
    a.molecule = object()
    b.molecule = object()
    assert not (a == b)
    b.molecule = a.molecule
    assert a == b
    assert hash(a) == hash(b)


def test_str_format():
    assert str(make_atom(4)) == "Atom CA Idx: 4"