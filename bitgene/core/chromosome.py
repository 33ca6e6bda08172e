"""Fixed-width integer chromosome encoded as 32 single-bit genes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import total_ordering
from typing import Any, ClassVar

from bitgene import randomization
from bitgene.core.gene import Bit
from bitgene.interfaces import BinaryChromosome, RandomSource
from bitgene.utils.config import INT32_MAX, INT32_MIN
from bitgene.utils.validation import ensure_bit, ensure_genes

_LOGGER = logging.getLogger(__name__)


@total_ordering
class IntegerChromosome:
    """A bounded integer stored as 32 bit genes, least significant bit first.

    On construction one value is drawn from ``random_source`` in the inclusive
    range ``[min_value, max_value]`` and split into genes: slot ``i`` holds bit
    ``i`` of that value. ``min_value <= max_value`` is the caller's
    responsibility and is not checked here, but a drawn value outside the
    signed 32-bit range raises ``ValueError`` rather than being truncated.

    ``fitness`` is assigned by an external evaluator. Every change to the genes
    resets it to ``None``. Ordering, equality and hashing look at ``fitness``
    only, so two chromosomes with the same bits but different fitness are
    unequal, and vice versa.

    Parameters
    ----------
    min_value : int
        Lower bound of the drawn value (inclusive).
    max_value : int
        Upper bound of the drawn value (inclusive).
    random_source : RandomSource | None
        Source of the drawn value. Defaults to
        :func:`bitgene.randomization.get_current`.
    """

    GENE_COUNT: ClassVar[int] = 32

    __slots__ = ("_min_value", "_max_value", "_original_value", "_genes", "_random_source", "fitness")

    def __init__(self, min_value: int, max_value: int, *, random_source: RandomSource | None = None) -> None:
        self._min_value = min_value
        self._max_value = max_value
        self._random_source = random_source if random_source is not None else randomization.get_current()
        value = self._random_source.get_int(min_value, max_value)
        if value < INT32_MIN or value > INT32_MAX:
            msg = f"Drawn value {value} does not fit in a signed 32-bit field [{INT32_MIN}, {INT32_MAX}]"
            raise ValueError(msg)
        self._original_value = value
        self._genes: list[Bit] = [Bit.ZERO] * self.GENE_COUNT
        self.fitness: float | None = None
        self.create_genes()

    @property
    def min_value(self) -> int:
        return self._min_value

    @property
    def max_value(self) -> int:
        return self._max_value

    @property
    def original_value(self) -> int:
        """Value drawn at construction; later mutations do not change it."""
        return self._original_value

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    @property
    def length(self) -> int:
        return self.GENE_COUNT

    def __len__(self) -> int:
        return self.GENE_COUNT

    # Gene generation ------------------------------------------------------

    def generate_gene(self, index: int) -> Bit:
        """Return bit ``index`` of :attr:`original_value`.

        This is the value the slot would get if freshly created. It does not
        reflect any mutation applied since construction.
        """
        return Bit.from_int((self._original_value >> index) & 1)

    def create_gene(self, index: int) -> None:
        """Shortcut for ``replace_gene(index, generate_gene(index))``."""
        self.replace_gene(index, self.generate_gene(index))

    def create_genes(self) -> None:
        """Regenerate every slot from :attr:`original_value`."""
        for index in range(self.GENE_COUNT):
            self.create_gene(index)

    # Gene access ----------------------------------------------------------

    def get_gene(self, index: int) -> Bit:
        return self._genes[index]

    def get_genes(self) -> list[Bit]:
        """Return a snapshot of the genes, index 0 (least significant) first."""
        return list(self._genes)

    def replace_gene(self, index: int, gene: Bit | int) -> None:
        """Overwrite the slot at ``index`` and reset fitness.

        Raises
        ------
        IndexError
            If ``index`` is outside ``[0, 32)``.
        ValueError
            If ``gene`` is not a bit value.
        """
        if index < 0 or index >= self.GENE_COUNT:
            raise IndexError(f"There is no gene on index {index} to be replaced")
        bit = ensure_bit(gene)
        self._genes[index] = bit
        self._invalidate_fitness()

    def replace_genes(self, start_index: int, genes: Sequence[Bit | int]) -> None:
        """Copy ``genes`` into the chromosome starting at ``start_index``.

        Input running past the last slot is truncated, which is what crossover
        operators rely on. An empty input changes nothing, fitness included.

        Raises
        ------
        TypeError
            If ``genes`` is ``None``.
        IndexError
            If ``genes`` is non-empty and ``start_index`` is outside ``[0, 32)``.
        ValueError
            If any entry is not a bit value. Nothing is applied in that case.
        """
        if genes is None:
            raise TypeError("genes must not be None")
        if len(genes) == 0:
            return
        if start_index < 0 or start_index >= self.GENE_COUNT:
            raise IndexError(f"There is no gene on index {start_index} to be replaced")

        count = min(len(genes), self.GENE_COUNT - start_index)
        bits = ensure_genes(genes[:count])
        self._genes[start_index : start_index + count] = bits
        self._invalidate_fitness()

    def flip_gene(self, index: int) -> None:
        """Invert one bit, counting ``index`` from the most significant end.

        The slot changed is ``abs(31 - index)``: ``flip_gene(0)`` flips the
        sign bit and ``flip_gene(31)`` flips the least significant bit.
        """
        real_index = abs(self.GENE_COUNT - 1 - index)
        self.replace_gene(real_index, self.get_gene(real_index).flipped())

    def resize(self, new_length: int) -> None:
        """Accept only the fixed length; anything else is unsupported."""
        if new_length != self.GENE_COUNT:
            _LOGGER.debug("Rejected resize of %s to %d genes", type(self).__name__, new_length)
            raise ValueError(f"{type(self).__name__} has a fixed length of {self.GENE_COUNT} genes, cannot resize to {new_length}")

    def _invalidate_fitness(self) -> None:
        self.fitness = None

    # Conversion -----------------------------------------------------------

    def to_integer(self) -> int:
        """Reassemble the genes into a signed 32-bit integer."""
        if len(self._genes) != self.GENE_COUNT:
            raise RuntimeError(f"Chromosome must hold exactly {self.GENE_COUNT} genes, found {len(self._genes)}")
        value = 0
        for index, gene in enumerate(self._genes):
            value |= int(gene) << index
        if value & (1 << (self.GENE_COUNT - 1)):
            value -= 1 << self.GENE_COUNT
        return value

    def to_display_string(self) -> str:
        """Return the bits most significant first, e.g. ``"000...0101"``."""
        return "".join(str(int(gene)) for gene in reversed(self._genes))

    def to_dict(self) -> dict[str, object]:
        return {
            "min_value": self._min_value,
            "max_value": self._max_value,
            "original_value": self._original_value,
            "value": self.to_integer(),
            "bits": self.to_display_string(),
            "fitness": self.fitness,
        }

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(min_value={self._min_value}, max_value={self._max_value}, "
            f"bits={self.to_display_string()!r}, fitness={self.fitness!r})"
        )

    # Creation -------------------------------------------------------------

    def create_new(self) -> IntegerChromosome:
        """Return an unrelated chromosome with the same bounds and source."""
        return type(self)(self._min_value, self._max_value, random_source=self._random_source)

    def clone(self) -> IntegerChromosome:
        """Return an independent copy carrying these genes and this fitness."""
        clone = self.create_new()
        clone.replace_genes(0, self._genes)
        clone.fitness = self.fitness
        return clone

    # Ordering -------------------------------------------------------------

    def compare_to(self, other: BinaryChromosome | None) -> int:
        """Compare by fitness, returning -1, 0 or 1.

        A missing ``other`` yields -1. Two absent fitness values are equal;
        an absent fitness is lower than any present one.
        """
        if other is None:
            return -1

        other_fitness = other.fitness
        if self.fitness == other_fitness:
            return 0
        if self.fitness is None:
            return -1
        if other_fitness is None:
            return 1
        return 1 if self.fitness > other_fitness else -1

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, IntegerChromosome):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, IntegerChromosome):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash(self.fitness)


__all__ = ["IntegerChromosome"]
