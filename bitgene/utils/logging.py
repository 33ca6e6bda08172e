"""Centralized logging helpers.

Library modules log through ``logging.getLogger(__name__)`` and never attach
handlers. Entry points (examples, benchmarks, an embedding application's
driver) call :func:`get_logger` once to get readable output.
"""

from __future__ import annotations

import logging
from typing import Final

_LOGGER_NAME: Final = "bitgene"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S"


def get_logger(component: str | None = None, level: int | str = logging.INFO) -> logging.Logger:
    """Return the ``bitgene`` logger (or a child) with a stream handler.

    ``level`` applies to the package root logger so chromosome and
    randomization debug records follow it too.
    """
    root = logging.getLogger(_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
    return root.getChild(component) if component else root
