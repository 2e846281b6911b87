"""
Summary: Decompose paths into root-first components and extract partial paths.
Why: Build rules derive target directories from a prefix or suffix of a
    source file's directory chain.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, final

from pathmap.features.path.domain.separators import (
    CURRENT_DIRECTORY,
    DEFAULT_SEPARATOR,
    dirname,
    join,
    split,
    validate_separator,
)
from pathmap.platform.logging import logger


@final
class PathDecomposer:
    """Split paths into components using a single separator."""

    _separator: str

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        """Initialize the decomposer.

        Args:
            separator: Character delimiting path components.

        Raises:
            InvalidSeparatorError: If ``separator`` is not a single character.
        """
        self._separator = validate_separator(separator)

    @property
    def separator(self) -> str:
        """Separator used to split and join paths."""
        return self._separator

    def explode(self, path: str) -> list[str]:
        """Decompose ``path`` into its components, outermost first.

        The root of an absolute path is kept as one component and a
        leading current-directory segment is dropped:

            ``"a/b/c"``  -> ``["a", "b", "c"]``
            ``"/a/b"``   -> ``["/", "a", "b"]``
            ``"./a"``    -> ``["a"]``

        Args:
            path: Path string to decompose.

        Returns:
            list[str]: Components from the outermost directory to the leaf.
        """
        sep = self._separator
        components: list[str] = []
        remaining = path
        while True:
            head, tail = split(remaining, sep)
            is_bare_name = head == remaining
            is_last_segment = head == CURRENT_DIRECTORY or tail == sep
            is_below_root = head == sep

            if is_bare_name:
                components.append(remaining)
                break
            if is_last_segment:
                components.append(tail)
                break
            components.append(tail)
            if is_below_root:
                components.append(head)
                break
            remaining = head

        components.reverse()
        return components

    def partial(self, path: str, n: int) -> str:
        """Extract a partial path from the directory portion of ``path``.

        The final component of ``path`` is always excluded.

        Args:
            path: Path whose directory chain is sliced.
            n: Number of directories to keep. Positive values count from
                the front, negative values from the back and zero yields
                the current directory.

        Returns:
            str: The joined directories, or the whole directory portion
            when ``-n`` exceeds the number of directories.
        """
        if n == 0:
            return CURRENT_DIRECTORY

        target = dirname(path, self._separator)
        dirs = self.explode(target)

        if n > 0:
            return self.join(dirs[:n])

        if -n > len(dirs):
            logger.debug(
                "Partial path %d exceeds %d directories; using full directory",
                n,
                len(dirs),
                extra={
                    "path_event": "path.partial.fallback",
                    "path": target,
                    "separator": self._separator,
                },
            )
            return target
        return self.join(dirs[n:])

    def join(self, components: Sequence[str]) -> str:
        """Join ``components`` back into a path with this separator."""
        return join(components, self._separator)

    def __repr__(self) -> str:
        return f"PathDecomposer(separator={self._separator!r})"


DEFAULT_DECOMPOSER: Final[PathDecomposer] = PathDecomposer()


def explode(path: str) -> list[str]:
    """Decompose ``path`` with the default ``/`` separator."""
    return DEFAULT_DECOMPOSER.explode(path)


def partial(path: str, n: int) -> str:
    """Extract a partial directory path with the default ``/`` separator."""
    return DEFAULT_DECOMPOSER.partial(path, n)


__all__ = ["DEFAULT_DECOMPOSER", "PathDecomposer", "explode", "partial"]
