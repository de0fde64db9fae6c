"""Mover module for safe file renames."""

from .mover import FileMover, MoveOptions, MoveResult, MoveState
from .prompt import ConfirmationPrompt

__all__ = [
    "FileMover",
    "MoveOptions",
    "MoveResult",
    "MoveState",
    "ConfirmationPrompt",
]
