"""Pure path helpers: bounded path strings, basename and join."""

from ..errors import PathTooLong

# Maximum path length in bytes, including the terminator.
MAX_PATH = 256

SEPARATOR = "/"


def _encoded_length(value: str) -> int:
    return len(value.encode("utf-8", errors="surrogateescape"))


class PathString(str):
    """
    A path whose encoded length plus terminator fits in ``max_path`` bytes.

    Construction raises PathTooLong instead of truncating.
    """

    max_path: int

    def __new__(cls, value: str, max_path: int = MAX_PATH):
        if _encoded_length(value) + 1 > max_path:
            raise PathTooLong(value, max_path)
        instance = super().__new__(cls, value)
        instance.max_path = max_path
        return instance


def bounded(path: str, max_path: int = MAX_PATH) -> PathString:
    """Check a literal path against the maximum length."""
    return PathString(path, max_path)


def basename(path: str) -> str:
    """
    Return the final component of a path.

    Trailing separators are ignored, so ``"a/b/"`` gives ``"b"``. A path made
    only of separators (or an empty path) is returned unchanged.

    Args:
        path: Path to take the last component of

    Returns:
        The last component, without any separator
    """
    end = len(path)
    while end > 0 and path[end - 1] == SEPARATOR:
        end -= 1
    if end == 0:
        return path

    start = end
    while start > 0 and path[start - 1] != SEPARATOR:
        start -= 1
    return path[start:end]


def join(directory: str, name: str, max_path: int = MAX_PATH) -> PathString:
    """
    Join a directory and a name with a single separator.

    The separator is only inserted when ``directory`` is empty or does not
    already end with one. The length is checked before the result is built.

    Args:
        directory: Leading path
        name: Component to append
        max_path: Maximum length in bytes including the terminator

    Returns:
        The joined path

    Raises:
        PathTooLong: If the joined path would not fit
    """
    need_separator = not directory or not directory.endswith(SEPARATOR)
    total = _encoded_length(directory) + _encoded_length(name) + 1
    if need_separator:
        total += 1
    if total > max_path:
        raise PathTooLong(directory + (SEPARATOR if need_separator else "") + name, max_path)

    return PathString(directory + (SEPARATOR if need_separator else "") + name, max_path)
