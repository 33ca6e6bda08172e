"""Protocol surfaces (no implementations).

These Protocols mark the boundaries between a chromosome and its
collaborators:

- ``RandomSource`` is the capability a chromosome consumes to draw its seed
  value. Any object with a compatible ``get_int`` works; see
  :mod:`bitgene.randomization` for the bundled ones.
- ``BinaryChromosome`` is what an operator layer (crossover, mutation,
  selection) programs against. Genetic material moves between chromosomes
  only through ``get_genes`` / ``replace_genes``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from bitgene.core.gene import Bit


@runtime_checkable
class RandomSource(Protocol):
    """Produces uniformly distributed integers."""

    def get_int(self, min_value: int, max_value: int) -> int:
        """Return an integer in the inclusive range ``[min_value, max_value]``."""


@runtime_checkable
class BinaryChromosome(Protocol):
    """A fixed-length chromosome whose genes are single bits.

    ``fitness`` is written by an external evaluator and reset to ``None`` by
    any gene mutation.
    """

    fitness: float | None

    @property
    def length(self) -> int:
        """Number of gene slots."""

    def generate_gene(self, index: int) -> Bit:
        """Return the freshly generated value for ``index``."""

    def get_gene(self, index: int) -> Bit:
        """Return the current value at ``index``."""

    def get_genes(self) -> list[Bit]:
        """Return the current genes, index 0 first."""

    def replace_gene(self, index: int, gene: Bit | int) -> None:
        """Overwrite one slot."""

    def replace_genes(self, start_index: int, genes: Sequence[Bit | int]) -> None:
        """Overwrite a run of slots starting at ``start_index``."""

    def flip_gene(self, index: int) -> None:
        """Invert one bit."""

    def create_new(self) -> BinaryChromosome:
        """Return an unrelated individual of the same kind."""

    def clone(self) -> BinaryChromosome:
        """Return an independent copy with the same genes and fitness."""

    def compare_to(self, other: BinaryChromosome | None) -> int:
        """Order by fitness: -1, 0 or 1."""

    def resize(self, new_length: int) -> None:
        """Change the gene count, where supported."""
