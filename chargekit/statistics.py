"""Statistics comparing two sets of per-molecule charges."""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping, Sequence

Charges = Mapping[str, Sequence[float]]


def _pairs(charges1: Charges, charges2: Charges) -> Iterator[tuple[float, float]]:
    for name, values in charges1.items():
        yield from zip(values, charges2[name])


def _check(charges1: Charges, charges2: Charges) -> None:
    if charges1.keys() != charges2.keys():
        raise ValueError("Trying to compare two different sets of charges")


def rmsd(charges1: Charges, charges2: Charges) -> float:
    """Root-mean-square deviation over all atoms of all molecules."""
    _check(charges1, charges2)
    diffs = [(a - b) ** 2 for a, b in _pairs(charges1, charges2)]
    if not diffs:
        return math.nan
    return math.sqrt(sum(diffs) / len(diffs))


def pearson2(charges1: Charges, charges2: Charges) -> float:
    """Squared Pearson correlation coefficient over all atoms."""
    _check(charges1, charges2)
    pairs = list(_pairs(charges1, charges2))
    if not pairs:
        return math.nan
    mx = sum(a for a, _ in pairs) / len(pairs)
    my = sum(b for _, b in pairs) / len(pairs)
    num = sum((a - mx) * (b - my) for a, b in pairs)
    den1 = sum((a - mx) ** 2 for a, _ in pairs)
    den2 = sum((b - my) ** 2 for _, b in pairs)
    den = den1 * den2
    if den == 0:
        return math.nan
    return num * num / den


def d_max(charges1: Charges, charges2: Charges) -> float:
    """Largest absolute difference; -1 when there are no atoms."""
    _check(charges1, charges2)
    return max((abs(a - b) for a, b in _pairs(charges1, charges2)), default=-1.0)


def d_avg(charges1: Charges, charges2: Charges) -> float:
    """Mean absolute difference over all atoms."""
    _check(charges1, charges2)
    diffs = [abs(a - b) for a, b in _pairs(charges1, charges2)]
    if not diffs:
        return math.nan
    return sum(diffs) / len(diffs)