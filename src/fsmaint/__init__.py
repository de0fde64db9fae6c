"""
fsmaint - file-system maintenance commands.

A move/rename command that replaces with a hard link followed by an unlink,
and a directory-removal command that only removes empty directories.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .config import ConfigManager, FsMaintConfig
from .utils.logging import get_logger, setup_logging

from .classifier import FileClassifier
from .errors import FsMaintError
from .fs import FileIdentity, FileKind, FileSystem
from .mover import FileMover, MoveOptions, MoveResult
from .paths import PathString, basename, join
from .remover import DirectoryRemover, RemoveResult

__all__ = [
    "ConfigManager",
    "FsMaintConfig",
    "get_logger",
    "setup_logging",
    # File-system boundary
    "FileSystem",
    "FileKind",
    "FileIdentity",
    # Paths
    "PathString",
    "basename",
    "join",
    # Classifier
    "FileClassifier",
    # Mover
    "FileMover",
    "MoveOptions",
    "MoveResult",
    # Remover
    "DirectoryRemover",
    "RemoveResult",
    "FsMaintError",
]
