"""Sequence helpers: argsort and run-length encoding."""

from __future__ import annotations

import itertools
from typing import Any, Iterable, Sequence


def argsort(v: Sequence[Any]) -> list[int]:
    """Indices that sort ``v`` ascending; ties keep their original order."""
    return sorted(range(len(v)), key=v.__getitem__)


def run_length_encoding(s: Iterable[Any]) -> list[tuple[Any, int]]:
    """Collapse runs of equal items into ``(item, run length)`` pairs."""
    encoded = [(key, sum(1 for _ in group)) for key, group in itertools.groupby(s)]
    if not encoded:
        raise ValueError("cannot encode an empty sequence")
    return encoded