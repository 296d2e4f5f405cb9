"""Parameter sets for charge calculation methods."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from os import PathLike
from typing import Any

AtomKey = tuple[str, str, str]
BondKey = tuple[str, str, str, str, str, str, str, str]


class ParametersError(Exception):
    """Raised when a parameter file cannot be read or is malformed."""


class CommonParameters:
    """Named scalar parameters shared by the whole method."""

    def __init__(self, names: Sequence[str], values: Sequence[float]) -> None:
        self.names = list(names)
        self.values = list(values)

    def parameter(self, idx: int) -> float:
        """Return the value at position ``idx``."""
        return self.values[idx]


class AtomParameters:
    """Per-atom-type parameter vectors."""

    def __init__(
        self,
        names: Sequence[str],
        parameters: Sequence[Sequence[float]],
        keys: Sequence[AtomKey],
    ) -> None:
        self.names = list(names)
        self.parameters = [list(row) for row in parameters]
        self.keys = [tuple(key) for key in keys]

    def parameter(self, idx: int) -> Callable[[Any], float]:
        """Return a function giving parameter ``idx`` for an atom's type."""
        return lambda atom: self.parameters[atom.type][idx]


class BondParameters:
    """Per-bond-type parameter vectors."""

    def __init__(
        self,
        names: Sequence[str],
        parameters: Sequence[Sequence[float]],
        keys: Sequence[BondKey],
    ) -> None:
        self.names = list(names)
        self.parameters = [list(row) for row in parameters]
        self.keys = [tuple(key) for key in keys]

    def parameter(self, idx: int) -> Callable[[Any], float]:
        """Return a function giving parameter ``idx`` for a bond's type."""
        return lambda bond: self.parameters[bond.type][idx]


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


def _strings(values: Any) -> list[str]:
    if not isinstance(values, list):
        raise TypeError(f"expected a list, got {values!r}")
    return [_string(value) for value in values]


def _numbers(values: Any) -> list[float]:
    if not isinstance(values, list):
        raise TypeError(f"expected a list, got {values!r}")
    result = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"expected a number, got {value!r}")
        result.append(float(value))
    return result


def _key(values: Any, size: int) -> tuple[str, ...]:
    if not isinstance(values, list):
        raise TypeError(f"expected a list, got {values!r}")
    return tuple(_string(values[i]) for i in range(size))


def _typed_section(section: Mapping[str, Any], size: int) -> tuple[list[str], list[list[float]], list[tuple]]:
    names = _strings(section["names"])
    keys = []
    parameters = []
    for entry in section["data"]:
        keys.append(_key(entry["key"], size))
        parameters.append(_numbers(entry["value"]))
    return names, parameters, keys


@dataclass
class Parameters:
    """A complete parameter set for one method."""

    name: str
    method_name: str
    source: str = "small"
    common: CommonParameters | None = None
    atom: AtomParameters | None = None
    bond: BondParameters | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Parameters":
        """Build parameters from the decoded JSON structure."""
        try:
            metadata = data["metadata"]
            name = _string(metadata["name"])
            method_name = _string(metadata["method"])
            source = _string(metadata["source"]) if "source" in metadata else "small"

            common = None
            if "common" in data:
                section = data["common"]
                common = CommonParameters(_strings(section["names"]), _numbers(section["values"]))

            atom = None
            if "atom" in data:
                atom = AtomParameters(*_typed_section(data["atom"], 3))

            bond = None
            if "bond" in data:
                bond = BondParameters(*_typed_section(data["bond"], 8))
        except (KeyError, TypeError, IndexError, ValueError) as exc:
            raise ParametersError(f"Incorrect parameters: {exc}") from exc
        return cls(name, method_name, source, common, atom, bond)

    @classmethod
    def from_file(cls, filename: str | PathLike) -> "Parameters":
        """Read parameters from a JSON file."""
        try:
            with open(filename) as handle:
                data = json.load(handle)
        except OSError as exc:
            raise ParametersError(f"Cannot open file: {filename}") from exc
        except json.JSONDecodeError as exc:
            raise ParametersError(f"Incorrect file with parameters: {filename}") from exc
        try:
            return cls.from_dict(data)
        except ParametersError as exc:
            raise ParametersError(f"Incorrect file with parameters: {filename}") from exc

    def describe(self) -> str:
        """Return a human-readable listing of all parameters."""
        lines = [f"Parameters: {self.name}\n"]
        if self.common is not None:
            lines.append("Common parameters\n")
            for name, value in zip(self.common.names, self.common.values):
                lines.append(f"{name}: {value:.3f}\n")
        if self.atom is not None:
            lines.append("Atom parameters\n")
            for (symbol, cls_, type_), values in zip(self.atom.keys, self.atom.parameters):
                row = "".join(f"{value:>-6.3f} " for value in values)
                lines.append(f"{symbol:2s} {cls_:6s} {type_:4s}: {row}\n")
        if self.bond is not None:
            lines.append("Bond parameters\n")
            for key, values in zip(self.bond.keys, self.bond.parameters):
                s1, c1, t1, s2, c2, t2, cb, tb = key
                row = "".join(f"{value:>-6.3f} " for value in values)
                lines.append(
                    f"{s1:2s} {c1:6s} {t1:4s} {s2:2s} {c2:6s} {t2:4s} {cb:2s} {tb:2s}: {row}\n"
                )
        return "".join(lines)