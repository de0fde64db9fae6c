"""Directory emptiness check by scanning raw directory records."""

from ..errors import IOFailure
from ..fs import FileSystem


def is_empty(fs: FileSystem, path: str) -> bool:
    """
    Check whether a directory holds anything besides "." and "..".

    Unused slots are skipped. The scan stops at the first real entry.

    Args:
        fs: File-system boundary to read through
        path: Directory to scan

    Returns:
        True if no real entry was found

    Raises:
        IOFailure: If the directory cannot be opened or read
    """
    try:
        for record in fs.read_directory(path):
            if not record.in_use or record.is_dot:
                continue
            return False
    except OSError as e:
        raise IOFailure(path, "cannot open") from e
    return True
