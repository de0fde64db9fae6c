"""Classifier component: thin metadata queries over the file-system boundary."""

from ..fs import FileIdentity, FileKind, FileSystem
from ..utils.logging import get_logger

logger = get_logger(__name__)


class FileClassifier:
    """
    Answers "what is at this path" questions.

    Nothing is cached: a path's kind can change under any mutation, so every
    call re-queries the file system. A failed query is a negative answer,
    never an error.
    """

    def __init__(self, fs: FileSystem | None = None):
        """
        Initialize the classifier.

        Args:
            fs: File-system boundary to query (defaults to the real one)
        """
        self.fs = fs or FileSystem()

    def classify(self, path: str) -> FileKind:
        """
        Get the kind of file at a path.

        Args:
            path: Path to query

        Returns:
            The file kind, or FileKind.UNKNOWN if metadata cannot be read
        """
        try:
            return self.fs.stat(path).kind
        except OSError as e:
            logger.debug(f"stat failed for {path}: {e}")
            return FileKind.UNKNOWN

    def is_directory(self, path: str) -> bool:
        return self.classify(path) == FileKind.DIRECTORY

    def exists(self, path: str) -> bool:
        return self.classify(path) != FileKind.UNKNOWN

    def identity(self, path: str) -> FileIdentity | None:
        """
        Get the device/inode identity of a path.

        Args:
            path: Path to query

        Returns:
            FileIdentity if the path resolves, None otherwise
        """
        try:
            return self.fs.stat(path).identity
        except OSError as e:
            logger.debug(f"stat failed for {path}: {e}")
            return None

    def same_file(self, first: str, second: str) -> bool:
        """True when both paths resolve to the same storage object."""
        first_id = self.identity(first)
        second_id = self.identity(second)
        return first_id is not None and first_id == second_id
