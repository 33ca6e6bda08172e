"""Core primitives.

Low-level value types: the bit symbols and the integer chromosome built from
them.
"""

from .gene import ONE, ZERO, Bit
from .chromosome import IntegerChromosome

__all__ = ["Bit", "ZERO", "ONE", "IntegerChromosome"]
