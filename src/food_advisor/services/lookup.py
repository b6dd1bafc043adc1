"""Name lookups against the bundled datasets."""

from collections.abc import Mapping
from typing import TypeVar

T = TypeVar("T")


def normalize_name(name: str) -> str:
    """Lowercase, trim and collapse inner whitespace."""
    return " ".join(name.lower().split())


def find_entry(dataset: Mapping[str, T], name: str) -> tuple[str, T] | None:
    """Find a dataset entry by exact key, else by substring either way.

    Keys are scanned in insertion order and the first containment match wins.
    """
    key = normalize_name(name)
    if not key:
        return None
    if key in dataset:
        return key, dataset[key]
    for candidate, value in dataset.items():
        if candidate in key or key in candidate:
            return candidate, value
    return None
