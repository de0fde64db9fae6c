"""Value types returned by the file-system boundary."""

from dataclasses import dataclass
from enum import Enum


class FileKind(str, Enum):
    """Kind of a file, derived from its metadata at query time."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    OTHER = "other"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class FileIdentity:
    """Device/inode pair naming one storage object on one file system."""

    device: int
    inode: int


@dataclass(frozen=True)
class StatResult:
    """Subset of file metadata used by the commands."""

    kind: FileKind
    device: int
    inode: int
    nlink: int = 1
    size: int = 0

    @property
    def identity(self) -> FileIdentity:
        return FileIdentity(self.device, self.inode)


@dataclass(frozen=True)
class DirectoryRecord:
    """One raw directory slot. A zero reference marks an unused slot."""

    name: str
    reference: int

    @property
    def in_use(self) -> bool:
        return self.reference != 0

    @property
    def is_dot(self) -> bool:
        """True for the "." and ".." entries."""
        return self.name in (".", "..")
