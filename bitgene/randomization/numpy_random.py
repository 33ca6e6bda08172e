"""Random source backed by a numpy ``Generator``."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass
class NumpyRandomization:
    """Draw integers with :func:`numpy.random.default_rng`.

    Parameters
    ----------
    seed : int | None
        Seed for the underlying PCG64 generator.
    """

    seed: int | None = None
    _rng: np.random.Generator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = np.random.default_rng(self.seed)

    def get_int(self, min_value: int, max_value: int) -> int:
        """Return an integer in ``[min_value, max_value]`` (both inclusive)."""
        # int64 covers the full signed 32-bit chromosome range
        return int(self._rng.integers(min_value, max_value, endpoint=True, dtype=np.int64))
