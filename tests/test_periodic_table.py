import pytest

from chargekit.periodic_table import Element, PeriodicTable

HEADER = "z,name,symbol,mass,period,group,a,b,c,d,cov,vdw,en,ip,ea\n"
ROWS = [
    "1,Hydrogen,H,1.008,1,1,0,0,0,0,31,120,2.20,13.598,0.754\n",
    "2,Helium,He,4.003,1,18,0,0,0,0,28,140,0.0,24.587,0.0\n",
    "3,Lithium,Li,6.94,2,1,0,0,0,0,128,182,0.98,5.392,0.618\n",
    "6,Carbon,C,12.011,2,14,0,0,0,0,76,170,2.55,11.260,1.262\n",
]


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "pte.csv"
    path.write_text(HEADER + "".join(ROWS[:3]))
    return path


@pytest.fixture
def table(csv_path):
    return PeriodicTable.from_csv(csv_path)


def test_loads_all_rows(table):
    assert len(table) == 3


def test_lookup_by_symbol(table):
    element = table.get_element_by_symbol("Li")
    assert element.z == 3
    assert element.name == "Lithium"
    assert element.period == 2
    assert element.group == 1


def test_lookup_by_name_matches_symbol(table):
    assert table.get_element_by_name("Helium") == table.get_element_by_symbol("He")


def test_deuterium_is_hydrogen(table):
    assert table.get_element_by_symbol("D") == table.get_element_by_symbol("H")


def test_radii_converted_to_angstrom(table):
    hydrogen = table.get_element_by_symbol("H")
    assert hydrogen.covalent_radius == pytest.approx(0.31)
    assert hydrogen.vdw_radius == pytest.approx(1.20)


def test_columns_mapped(table):
    hydrogen = table.get_element_by_z(0)
    assert hydrogen.electronegativity == pytest.approx(2.20)
    assert hydrogen.ionization_potential == pytest.approx(13.598)
    assert hydrogen.electron_affinity == pytest.approx(0.754)


def test_unknown_symbol_raises(table):
    with pytest.raises(KeyError, match="No such element: Xx"):
        table.get_element_by_symbol("Xx")


def test_unknown_name_raises(table):
    with pytest.raises(KeyError, match="No such element"):
        table.get_element_by_name("Unobtainium")


def test_bad_number_raises(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text(HEADER + "1,Hydrogen,H,1.008,one,1,0,0,0,0,31,120,2.20,13.598,0.754\n")
    with pytest.raises(ValueError, match="Unable to read"):
        PeriodicTable.from_csv(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        PeriodicTable.from_csv(tmp_path / "missing.csv")


def test_constructed_directly():
    carbon = Element(6, "C", "Carbon", 2.55, 0.76, 1.7, 2, 14, 1.262, 11.26)
    hydrogen = Element(1, "H", "Hydrogen", 2.2, 0.31, 1.2, 1, 1, 0.754, 13.598)
    table = PeriodicTable([hydrogen, carbon])
    assert table.get_element_by_symbol("H") is hydrogen
    assert table.get_element_by_z(1) is carbon