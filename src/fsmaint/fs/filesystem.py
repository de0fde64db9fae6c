"""Thin file-system boundary: stat, link, unlink, mkdir, rmdir and directory reads."""

import os
import stat as stat_module
from collections.abc import Iterator

from ..utils.logging import get_logger
from .types import DirectoryRecord, FileKind, StatResult

logger = get_logger(__name__)


def _kind_from_mode(mode: int) -> FileKind:
    if stat_module.S_ISDIR(mode):
        return FileKind.DIRECTORY
    if stat_module.S_ISREG(mode):
        return FileKind.REGULAR
    return FileKind.OTHER


class DirectoryListing:
    """
    Lazy, restartable sequence of raw directory records.

    Every iteration re-opens the directory, so a listing can be walked more
    than once. The "." and ".." records come first, followed by the real
    entries in the order the operating system returns them. Opening failures
    surface as OSError on the first ``next()``.
    """

    def __init__(self, path: str):
        self.path = path

    def __iter__(self) -> Iterator[DirectoryRecord]:
        with os.scandir(self.path) as entries:
            yield DirectoryRecord(".", os.stat(self.path).st_ino)
            yield DirectoryRecord("..", os.stat(os.path.join(self.path, "..")).st_ino)
            for entry in entries:
                yield DirectoryRecord(entry.name, entry.inode())

    def __repr__(self) -> str:
        return f"DirectoryListing({self.path!r})"


class FileSystem:
    """
    System-call surface used by the commands.

    Every method maps onto a single operating-system call and raises OSError
    on failure; callers decide how a failure is reported.
    """

    def stat(self, path: str) -> StatResult:
        st = os.stat(path)
        return StatResult(
            kind=_kind_from_mode(st.st_mode),
            device=st.st_dev,
            inode=st.st_ino,
            nlink=st.st_nlink,
            size=st.st_size,
        )

    def link(self, existing: str, new: str) -> None:
        logger.debug(f"link {existing} -> {new}")
        os.link(existing, new)

    def unlink(self, path: str) -> None:
        logger.debug(f"unlink {path}")
        os.unlink(path)

    def mkdir(self, path: str) -> None:
        logger.debug(f"mkdir {path}")
        os.mkdir(path)

    def rmdir(self, path: str) -> None:
        logger.debug(f"rmdir {path}")
        os.rmdir(path)

    def read_directory(self, path: str) -> DirectoryListing:
        return DirectoryListing(path)
