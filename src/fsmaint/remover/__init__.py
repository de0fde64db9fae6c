"""Remover module for empty-directory removal."""

from .emptiness import is_empty
from .remover import DirectoryRemover, RemoveResult, batch_exit_code

__all__ = [
    "DirectoryRemover",
    "RemoveResult",
    "batch_exit_code",
    "is_empty",
]
