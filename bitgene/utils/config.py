"""Configuration utilities."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from bitgene.interfaces import RandomSource
from bitgene.randomization import available, randomization_from_name

if TYPE_CHECKING:
    from bitgene.core.chromosome import IntegerChromosome

_LOGGER = logging.getLogger(__name__)

INT32_MIN: Final = -(2**31)
INT32_MAX: Final = 2**31 - 1


@dataclass(slots=True)
class ChromosomeConfig:
    """Settings for building integer chromosomes of one kind.

    Unlike the chromosome itself, which trusts its caller, the config checks
    that the bounds are ordered and fit in a signed 32-bit field.
    """

    min_value: int = 0
    max_value: int = INT32_MAX
    seed: int | None = None
    randomization: str = "basic"

    def __post_init__(self) -> None:
        if self.min_value > self.max_value:
            msg = f"min_value ({self.min_value}) must be <= max_value ({self.max_value})"
            raise ValueError(msg)
        if self.min_value < INT32_MIN or self.max_value > INT32_MAX:
            msg = f"Bounds must lie within [{INT32_MIN}, {INT32_MAX}]"
            raise ValueError(msg)
        if self.randomization.lower() not in available():
            msg = f"Unknown randomization: {self.randomization}. Available: {available()}"
            raise ValueError(msg)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> ChromosomeConfig:
        """Build a config from a plain dict (e.g. parsed JSON/YAML).

        Unknown keys raise ``ValueError`` rather than being ignored.
        """
        unknown = set(config) - {"min_value", "max_value", "seed", "randomization"}
        if unknown:
            msg = f"Unknown chromosome config keys: {sorted(unknown)}"
            raise ValueError(msg)
        return cls(**config)

    def as_dict(self) -> dict[str, int | str | None]:
        return {
            "min_value": self.min_value,
            "max_value": self.max_value,
            "seed": self.seed,
            "randomization": self.randomization,
        }

    def build_random_source(self) -> RandomSource:
        return randomization_from_name(self.randomization, seed=self.seed)

    def create_chromosome(self, random_source: RandomSource | None = None) -> IntegerChromosome:
        """Create a chromosome with these bounds.

        A new random source is built from the config when none is given; pass
        one in to share it across several chromosomes.
        """
        from bitgene.core.chromosome import IntegerChromosome

        source = random_source if random_source is not None else self.build_random_source()
        _LOGGER.debug("Creating chromosome in [%d, %d] with %r", self.min_value, self.max_value, source)
        return IntegerChromosome(self.min_value, self.max_value, random_source=source)
