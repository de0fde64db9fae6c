"""Remover component: delete empty directories one argument at a time."""

from collections.abc import Iterable
from dataclasses import dataclass

from ..classifier import FileClassifier
from ..errors import DirectoryNotEmpty, FsMaintError, IOFailure, NotADirectory
from ..fs import FileSystem
from ..utils.logging import get_logger
from .emptiness import is_empty

logger = get_logger(__name__)


@dataclass
class RemoveResult:
    """Result of removing one directory."""

    path: str
    success: bool
    error: FsMaintError | None = None


def batch_exit_code(results: Iterable[RemoveResult]) -> int:
    """Exit status for a batch: failure if any single removal failed."""
    return 0 if all(r.success for r in results) else 1


class DirectoryRemover:
    """Removes empty directories. Each path is handled independently."""

    def __init__(self, fs: FileSystem | None = None, classifier: FileClassifier | None = None):
        self.fs = fs or FileSystem()
        self.classifier = classifier or FileClassifier(self.fs)

    def remove(self, path: str) -> RemoveResult:
        """
        Remove one empty directory.

        Args:
            path: Directory to remove

        Returns:
            RemoveResult with operation status
        """
        try:
            if not self.classifier.is_directory(path):
                raise NotADirectory(path)

            if not is_empty(self.fs, path):
                raise DirectoryNotEmpty(path)

            try:
                self.fs.rmdir(path)
            except OSError as e:
                raise IOFailure(path, "failed to remove") from e

        except FsMaintError as e:
            logger.debug(f"Not removed: {path}: {e}")
            return RemoveResult(path=path, success=False, error=e)

        logger.info(f"Removed directory: {path}")
        return RemoveResult(path=path, success=True)

    def remove_all(self, paths: Iterable[str]) -> list[RemoveResult]:
        """Remove every path in order; one failure never stops the batch."""
        return [self.remove(path) for path in paths]
