"""Mover component: rename a file with a link-then-unlink replace."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..classifier import FileClassifier
from ..errors import (
    AlreadyExists,
    FsMaintError,
    IOFailure,
    SameFile,
    UnsupportedOperation,
)
from ..fs import FileSystem
from ..paths import MAX_PATH, basename, bounded, join
from ..utils.logging import get_logger
from .prompt import ConfirmationPrompt

logger = get_logger(__name__)


class MoveState(str, Enum):
    """Progress of a single move invocation."""

    START = "start"
    PARSED = "parsed"
    DESTINATION_RESOLVED = "destination_resolved"
    SAFETY_CHECKED = "safety_checked"
    REPLACED = "replaced"
    DONE = "done"


@dataclass(frozen=True)
class MoveOptions:
    """Flags for one move invocation. Force suppresses the interactive prompt."""

    force: bool = False
    interactive: bool = False
    verbose: bool = False


@dataclass
class MoveResult:
    """Result of a move operation."""

    # Arguments as given
    source: str
    destination: str

    # Resolved destination, None if resolution failed
    final_destination: str | None = None

    # Status
    state: MoveState = MoveState.PARSED
    success: bool = False
    overwritten: bool = False
    declined: bool = False
    error: FsMaintError | None = None

    @property
    def exit_code(self) -> int:
        """Process exit status for this result."""
        if self.success:
            return 0
        return self.error.exit_code if self.error else 1


class _Declined(Exception):
    """Raised internally when the user refuses an overwrite."""


class FileMover:
    """
    Moves one non-directory file to a new name.

    The replace is a hard link at the destination followed by removal of
    the source entry. If the link fails the source is untouched; if the
    final unlink fails both names refer to the file and the move is
    reported as failed.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        classifier: FileClassifier | None = None,
        max_path: int = MAX_PATH,
        confirm: Callable[[str], bool] | None = None,
    ):
        """
        Initialize the file mover.

        Args:
            fs: File-system boundary (defaults to the real one)
            classifier: Metadata queries (defaults to one over ``fs``)
            max_path: Maximum destination length in bytes, terminator included
            confirm: Called with the destination before an interactive
                overwrite; returns True to proceed
        """
        self.fs = fs or FileSystem()
        self.classifier = classifier or FileClassifier(self.fs)
        self.max_path = max_path
        self.confirm = confirm or ConfirmationPrompt()

    def resolve_destination(self, source: str, destination: str) -> str:
        """
        Work out the path the source will be linked to.

        A directory destination receives the source's basename; anything
        else is used literally.

        Raises:
            PathTooLong: If the resulting path does not fit
        """
        if self.classifier.is_directory(destination):
            return join(destination, basename(source), self.max_path)
        return bounded(destination, self.max_path)

    def _check_safety(self, source: str, final_destination: str, options: MoveOptions) -> bool:
        """
        Run the self-move and collision checks.

        Returns:
            True if an existing destination has to be replaced

        Raises:
            SameFile: If both paths name the same storage object
            AlreadyExists: If the destination exists and no flag allows replacing it
            _Declined: If the user refused the overwrite
        """
        if self.classifier.same_file(source, final_destination):
            raise SameFile(source, final_destination)

        if not self.classifier.exists(final_destination):
            return False
        if self.classifier.is_directory(final_destination):
            return False

        if options.interactive and not options.force:
            if not self.confirm(final_destination):
                raise _Declined()
            logger.debug(f"Overwrite of {final_destination} confirmed")
        elif not options.force:
            raise AlreadyExists(final_destination)
        return True

    def _replace(self, source: str, final_destination: str, overwrite: bool) -> None:
        if overwrite:
            try:
                self.fs.unlink(final_destination)
            except OSError as e:
                raise IOFailure(final_destination, "cannot remove") from e

        try:
            self.fs.link(source, final_destination)
        except OSError as e:
            raise IOFailure(f"{source} -> {final_destination}", "cannot link") from e

    def move(self, source: str, destination: str, options: MoveOptions | None = None) -> MoveResult:
        """
        Move a file.

        Args:
            source: Source path, must not be a directory
            destination: Target name, or an existing directory to move into
            options: Force, interactive and verbose flags

        Returns:
            MoveResult with operation status
        """
        options = options or MoveOptions()
        result = MoveResult(source=source, destination=destination)

        try:
            if self.classifier.is_directory(source):
                raise UnsupportedOperation(source)

            result.final_destination = self.resolve_destination(source, destination)
            result.state = MoveState.DESTINATION_RESOLVED

            overwrite = self._check_safety(source, result.final_destination, options)
            result.state = MoveState.SAFETY_CHECKED

            self._replace(source, result.final_destination, overwrite)
            result.overwritten = overwrite
            result.state = MoveState.REPLACED

            try:
                self.fs.unlink(source)
            except OSError as e:
                raise IOFailure(source, "linked but failed to remove", warning=True) from e

        except _Declined:
            logger.info(f"Not overwritten: {result.final_destination}")
            result.declined = True
            result.success = True
            result.state = MoveState.DONE
            return result

        except FsMaintError as e:
            logger.debug(f"Move {source} -> {destination} stopped at {result.state.value}: {e}")
            result.error = e
            return result

        logger.info(f"Moved: {source} -> {result.final_destination}")
        result.success = True
        result.state = MoveState.DONE
        return result
