"""Chemical elements and a lookup table loaded from CSV data."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike


@dataclass(frozen=True)
class Element:
    """A chemical element with the properties used by charge methods."""

    z: int
    symbol: str
    name: str
    electronegativity: float
    covalent_radius: float
    vdw_radius: float
    period: int
    group: int
    electron_affinity: float
    ionization_potential: float


class PeriodicTable:
    """Elements ordered by atomic number, searchable by symbol and name."""

    def __init__(self, elements: Iterable[Element]) -> None:
        self._elements = list(elements)
        self._symbol_z = {element.symbol: element.z for element in self._elements}
        self._name_z = {element.name: element.z for element in self._elements}

    @classmethod
    def from_csv(cls, path: str | PathLike) -> "PeriodicTable":
        """Load a table from a CSV file; radii are converted from pm to Å."""
        elements = []
        with open(path, newline="") as handle:
            reader = csv.reader(handle)
            next(reader, None)  # header
            try:
                for cols in reader:
                    elements.append(
                        Element(
                            z=int(cols[0]),
                            name=cols[1],
                            symbol=cols[2],
                            period=int(cols[4]),
                            group=int(cols[5]),
                            covalent_radius=float(cols[10]) / 100.0,
                            vdw_radius=float(cols[11]) / 100.0,
                            electronegativity=float(cols[12]),
                            ionization_potential=float(cols[13]),
                            electron_affinity=float(cols[14]),
                        )
                    )
            except (ValueError, IndexError) as exc:
                raise ValueError(f"Unable to read periodic table data file: {path}") from exc
        return cls(elements)

    def __len__(self) -> int:
        return len(self._elements)

    def get_element_by_z(self, z: int) -> Element:
        """Return the element at zero-based position ``z`` in the table."""
        return self._elements[z]

    def get_element_by_symbol(self, symbol: str) -> Element:
        """Return the element with ``symbol``; deuterium counts as hydrogen."""
        if symbol == "D":
            return self.get_element_by_z(0)
        try:
            z = self._symbol_z[symbol]
        except KeyError:
            raise KeyError(f"No such element: {symbol}") from None
        return self.get_element_by_z(z - 1)

    def get_element_by_name(self, name: str) -> Element:
        """Return the element called ``name``."""
        try:
            z = self._name_z[name]
        except KeyError:
            raise KeyError(f"No such element: {name}") from None
        return self.get_element_by_z(z - 1)