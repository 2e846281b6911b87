"""Filename extension replacement."""

import re
from typing import ClassVar, Final, final

from pathmap.features.path.domain.separators import DEFAULT_SEPARATOR, validate_separator

DEFAULT_ALT_SEPARATOR: Final[str] = "\\"


@final
class ExtensionEditor:
    """Replace or strip the trailing extension of a path."""

    # Names that look like extensions but are directory markers
    NOT_EXTENSIBLE: ClassVar[frozenset[str]] = frozenset({".", ".."})

    _pattern: re.Pattern[str]

    def __init__(
        self,
        separator: str = DEFAULT_SEPARATOR,
        alt_separator: str | None = DEFAULT_ALT_SEPARATOR,
    ) -> None:
        """Initialize the editor.

        Args:
            separator: Primary path separator.
            alt_separator: Optional second separator, or None to disable it.

        Raises:
            InvalidSeparatorError: If either separator is not a single character.
        """
        separators = validate_separator(separator)
        if alt_separator:
            separators += validate_separator(alt_separator)
        excluded = re.escape(separators)
        # One name character, the dot, then the extension up to the end
        self._pattern = re.compile(rf"([^{excluded}])\.[^.{excluded}]*\Z")

    def replace_extension(self, path: str, new_ext: str = "") -> str:
        """Replace the extension of ``path`` with ``new_ext``.

        Args:
            path: Path whose last component may carry an extension.
            new_ext: New extension, with or without the leading dot. An empty
                string removes the existing extension.

        Returns:
            str: Path with the extension replaced, or ``new_ext`` appended
                when ``path`` has no extension. ``"."`` and ``".."`` are
                returned unchanged.
        """
        if path in self.NOT_EXTENSIBLE:
            return path

        if new_ext and not new_ext.startswith("."):
            new_ext = "." + new_ext

        replaced, count = self._pattern.subn(lambda m: m.group(1) + new_ext, path, count=1)
        if count:
            return replaced
        return path + new_ext


DEFAULT_EDITOR: Final[ExtensionEditor] = ExtensionEditor()


def replace_extension(path: str, new_ext: str = "") -> str:
    """Replace the extension of ``path`` using the default separators."""
    return DEFAULT_EDITOR.replace_extension(path, new_ext)


__all__ = ["DEFAULT_ALT_SEPARATOR", "DEFAULT_EDITOR", "ExtensionEditor", "replace_extension"]
