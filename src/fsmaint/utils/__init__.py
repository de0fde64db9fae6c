"""Utility modules for fsmaint."""

from .logging import FSMAINT_THEME, get_logger, setup_logging

__all__ = [
    "FSMAINT_THEME",
    "get_logger",
    "setup_logging",
]
