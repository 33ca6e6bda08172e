"""bitgene public interface.

A fixed-width binary integer chromosome for evolutionary search. Random
sources live under ``bitgene.randomization``; config and logging helpers under
``bitgene.utils``.
"""

from __future__ import annotations

from .core import ONE, ZERO, Bit, IntegerChromosome
from .interfaces import BinaryChromosome, RandomSource

__all__ = [
    "Bit",
    "ZERO",
    "ONE",
    "IntegerChromosome",
    "BinaryChromosome",
    "RandomSource",
]

__version__ = "0.1.0"
