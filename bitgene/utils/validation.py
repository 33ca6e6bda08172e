"""Validation helpers for gene values."""

from __future__ import annotations

import operator
from collections.abc import Iterable

from bitgene.core.gene import Bit


def ensure_bit(value: Bit | int) -> Bit:
    """Normalize ``value`` to a canonical :class:`Bit` symbol.

    Any integer type works (``int``, ``bool``, numpy integers) as long as its
    value is 0 or 1.
    """
    if isinstance(value, Bit):
        return value
    try:
        number = operator.index(value)
    except TypeError:
        number = None
    if number in (0, 1):
        return Bit.from_int(number)
    msg = f"Gene value must be Bit.ZERO, Bit.ONE, 0 or 1, got {value!r}"
    raise ValueError(msg)


def ensure_genes(genes: Iterable[Bit | int]) -> list[Bit]:
    """Validate a whole run of gene values before any of them is applied."""
    result: list[Bit] = []
    for idx, entry in enumerate(genes):
        try:
            result.append(ensure_bit(entry))
        except ValueError as exc:
            msg = f"Invalid gene at position {idx}: {exc}"
            raise ValueError(msg) from exc
    return result
