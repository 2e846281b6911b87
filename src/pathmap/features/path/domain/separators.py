"""Separator-level primitives shared by the path decomposer and joiner.

Where: features/path/domain/separators.py
What: Split a path string into head and tail, and join components back.
Why: Both operations follow POSIX ``dirname``/``basename`` rules for a
    single configurable separator, without touching the filesystem.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

DEFAULT_SEPARATOR: Final[str] = "/"
CURRENT_DIRECTORY: Final[str] = "."


class InvalidSeparatorError(ValueError):
    """Raised when a separator cannot delimit path components."""

    def __init__(self, separator: str) -> None:
        super().__init__(f"Invalid path separator: {separator!r}")
        self.separator: str = separator


def validate_separator(separator: str) -> str:
    """Return ``separator`` if it is a single character other than ``.``.

    Raises:
        InvalidSeparatorError: If the separator is empty, longer than one
            character, or the current-directory marker.
    """
    if len(separator) != 1 or separator == CURRENT_DIRECTORY:
        raise InvalidSeparatorError(separator)
    return separator


def split(path: str, sep: str = DEFAULT_SEPARATOR) -> tuple[str, str]:
    """Split ``path`` into ``(head, tail)`` around its last separator.

    Args:
        path: Path string to split.
        sep: Separator character.

    Returns:
        tuple[str, str]: The directory part and the final component:
            - ``("a/b", "c")`` for ``"a/b/c"``
            - ``(".", "c")`` for a separator-free ``"c"``
            - ``(sep, "a")`` for ``sep + "a"``
            - ``(sep, sep)`` for a path made only of separators
    """
    stripped = path.rstrip(sep)
    if not stripped:
        if path:
            return sep, sep
        return CURRENT_DIRECTORY, ""

    index = stripped.rfind(sep)
    if index < 0:
        return CURRENT_DIRECTORY, stripped

    head = stripped[:index].rstrip(sep)
    return head or sep, stripped[index + 1 :]


def dirname(path: str, sep: str = DEFAULT_SEPARATOR) -> str:
    """Return everything before the last component of ``path``."""
    return split(path, sep)[0]


def basename(path: str, sep: str = DEFAULT_SEPARATOR) -> str:
    """Return the last component of ``path``."""
    return split(path, sep)[1]


def join(components: Sequence[str], sep: str = DEFAULT_SEPARATOR) -> str:
    """Join ``components`` with exactly one separator at every boundary.

    A component that already ends (or starts) with the separator does not
    produce a doubled separator, so ``["/", "a"]`` joins to ``"/a"``.
    """
    result = ""
    for index, component in enumerate(components):
        if index == 0:
            result = component
        elif result.endswith(sep) or component.startswith(sep):
            result = result.rstrip(sep) + sep + component.lstrip(sep)
        else:
            result = result + sep + component
    return result


__all__ = [
    "CURRENT_DIRECTORY",
    "DEFAULT_SEPARATOR",
    "InvalidSeparatorError",
    "basename",
    "dirname",
    "join",
    "split",
    "validate_separator",
]
