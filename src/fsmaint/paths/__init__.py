"""Path resolution helpers."""

from .resolver import MAX_PATH, PathString, basename, bounded, join

__all__ = [
    "MAX_PATH",
    "PathString",
    "basename",
    "bounded",
    "join",
]
