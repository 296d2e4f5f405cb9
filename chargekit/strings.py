"""Small string helpers used across the package."""

from __future__ import annotations

import string
from collections.abc import Iterable

_WHITESPACE = " \t\n\v\f\r"
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_lowercase(text: str) -> str:
    """Return ``text`` with ASCII letters converted to lower case."""
    return text.translate(_TO_LOWER)


def to_uppercase(text: str) -> str:
    """Return ``text`` with ASCII letters converted to upper case."""
    return text.translate(_TO_UPPER)


def starts_with(text: str, prefix: str) -> bool:
    """Return True if ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    """Return True if ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def trim(text: str) -> str:
    """Strip leading and trailing ASCII whitespace."""
    return text.strip(_WHITESPACE)


def format_values(values: Iterable[float]) -> str:
    """Format numbers with five decimals, each followed by a space."""
    return "".join(f"{value:.5f} " for value in values)