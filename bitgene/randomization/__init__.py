"""Random sources and the process-wide current source.

Chromosomes built without an explicit ``random_source`` draw from
:func:`get_current`. Replace it with :func:`set_current`, for example to make a
whole run reproducible::

    from bitgene import randomization

    randomization.set_current(randomization.BasicRandomization(seed=42))
"""

from __future__ import annotations

import logging
from typing import Final

from bitgene.interfaces import RandomSource
from bitgene.randomization.basic import BasicRandomization
from bitgene.randomization.numpy_random import NumpyRandomization

_LOGGER = logging.getLogger(__name__)

_REGISTRY: Final[dict[str, type]] = {
    "basic": BasicRandomization,
    "numpy": NumpyRandomization,
}

_current: RandomSource = BasicRandomization()


def get_current() -> RandomSource:
    """Return the source used when none is passed explicitly."""
    return _current


def set_current(source: RandomSource) -> None:
    """Install ``source`` as the process-wide default."""
    global _current
    if source is None:
        raise TypeError("random source must not be None")
    _LOGGER.debug("Current random source set to %r", source)
    _current = source


def randomization_from_name(name: str, **params: object) -> RandomSource:
    """Return a random source from the registry.

    Raises KeyError for unknown names.

    Parameters
    ----------
    name : str
        Source name: "basic" or "numpy" (case-insensitive).
    **params : object
        Constructor parameters (e.g., seed).
    """
    key = name.lower()
    if key not in _REGISTRY:
        raise KeyError(f"Unknown randomization: {name}. Available: {list(_REGISTRY.keys())}")
    return _REGISTRY[key](**params)


def available() -> list[str]:
    """Return the registered random source names, sorted."""
    return sorted(_REGISTRY)


__all__ = [
    "RandomSource",
    "BasicRandomization",
    "NumpyRandomization",
    "get_current",
    "set_current",
    "randomization_from_name",
    "available",
]
