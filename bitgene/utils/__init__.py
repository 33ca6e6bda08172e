"""Utility exports."""

from .config import ChromosomeConfig
from .logging import get_logger
from .validation import ensure_bit, ensure_genes

__all__ = [
    "ChromosomeConfig",
    "get_logger",
    "ensure_bit",
    "ensure_genes",
]
