"""File-system boundary used by the commands."""

from .filesystem import DirectoryListing, FileSystem
from .types import DirectoryRecord, FileIdentity, FileKind, StatResult

__all__ = [
    "FileSystem",
    "DirectoryListing",
    "DirectoryRecord",
    "FileIdentity",
    "FileKind",
    "StatResult",
]
