"""Error taxonomy shared by the mv and rmdir commands."""

import click


class FsMaintError(Exception):
    """Base error for the project."""

    exit_code = 1


class UsageError(click.UsageError):
    """Bad flags or argument count. Exits 1 like the other failures."""

    exit_code = 1


class PathTooLong(FsMaintError):
    """A constructed path would exceed the maximum path length."""

    def __init__(self, path: str, max_path: int):
        self.path = path
        self.max_path = max_path
        super().__init__("destination path too long")


class UnsupportedOperation(FsMaintError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path}: is a directory (unsupported)")


class SameFile(FsMaintError):
    def __init__(self, source: str, destination: str):
        self.source = source
        self.destination = destination
        super().__init__(f"'{source}' and '{destination}' are the same file")


class AlreadyExists(FsMaintError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path} exists (use -f to overwrite)")


class NotADirectory(FsMaintError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path}: not a directory")


class DirectoryNotEmpty(FsMaintError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path}: directory not empty")


class IOFailure(FsMaintError):
    """
    An underlying file-system call failed.

    Args:
        path: Offending path, used verbatim in the message
        action: Short description such as "cannot remove"
        warning: Set when the failure left no data at risk (both names
            still refer to the file after a link without the final unlink)
    """

    def __init__(self, path: str, action: str, warning: bool = False):
        self.path = path
        self.action = action
        self.warning = warning
        prefix = "warning: " if warning else ""
        super().__init__(f"{prefix}{action} {path}")
