"""Bit symbols held by chromosome gene slots."""

from __future__ import annotations

from enum import IntEnum


class Bit(IntEnum):
    """The two canonical gene values.

    Members are shared process-wide and never mutated; a chromosome only
    changes which member occupies a slot. Comparison is by value, so
    ``Bit.ONE == 1`` holds.
    """

    ZERO = 0
    ONE = 1

    def flipped(self) -> Bit:
        """Return the opposite symbol."""
        return Bit.ONE if self is Bit.ZERO else Bit.ZERO

    @classmethod
    def from_int(cls, value: int) -> Bit:
        if value == 0:
            return cls.ZERO
        if value == 1:
            return cls.ONE
        msg = f"Bit value must be 0 or 1, got {value!r}"
        raise ValueError(msg)

    def __str__(self) -> str:
        return str(self.value)


ZERO: Bit = Bit.ZERO
ONE: Bit = Bit.ONE

__all__ = ["Bit", "ZERO", "ONE"]
