"""Random source backed by the standard library generator."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


@dataclass
class BasicRandomization:
    """Draw integers with :class:`random.Random`.

    A fixed ``seed`` makes every draw reproducible. Instances are not safe to
    share between threads; give each thread its own.
    """

    seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def get_int(self, min_value: int, max_value: int) -> int:
        """Return an integer in ``[min_value, max_value]`` (both inclusive)."""
        return self._rng.randint(min_value, max_value)
