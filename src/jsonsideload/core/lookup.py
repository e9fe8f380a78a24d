"""Identifier lookup across the sibling top-level arrays of a document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

Identifier = int | float


def is_identifier(value: object) -> bool:
    """Return True for JSON numbers (booleans excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_double(value: int | float) -> float:
    try:
        return float(value)
    except OverflowError:
        return float("inf") if value > 0 else float("-inf")


def ids_equal(left: object, right: object) -> bool:
    """Compare identifiers as decoded JSON numbers (double precision).

    ``2 == 2.0``, and integers past 2**53 compare after rounding to a double.
    Anything that is not a number never matches.
    """
    if not (is_identifier(left) and is_identifier(right)):
        return False
    return _as_double(left) == _as_double(right)  # type: ignore[arg-type]


def find_sideloaded(document: Mapping[str, Any], relation_key: str, id_value: Identifier) -> dict[str, Any] | None:
    """Return the first object in ``document[relation_key]`` whose ``id`` equals ``id_value``."""
    candidates = document.get(relation_key)
    if not isinstance(candidates, list):
        return None
    for candidate in candidates:
        if isinstance(candidate, dict) and ids_equal(candidate.get("id"), id_value):
            return candidate
    return None
