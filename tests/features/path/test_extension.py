"""Tests for extension replacement."""

import pytest

from pathmap.features.path import ExtensionEditor, InvalidSeparatorError, replace_extension


class TestReplaceExtension:
    """Test cases for replace_extension."""

    @pytest.mark.parametrize("new_ext", ["", "o", ".o", "tar.gz"])
    def test_directory_markers_unchanged(self, new_ext: str) -> None:
        """'.' and '..' are never extended.

        Args:
            new_ext: Extension that must be ignored.
        """
        assert replace_extension(".", new_ext) == "."
        assert replace_extension("..", new_ext) == ".."

    @pytest.mark.parametrize(
        "path,new_ext,expected",
        [
            ("a.b", "", "a"),
            ("a", "", "a"),
            ("a.b", "c", "a.c"),
            ("a.b", ".c", "a.c"),
            ("a", "txt", "a.txt"),
            ("src/main.c", "o", "src/main.o"),
            ("archive.tar.gz", "", "archive.tar"),  # only the last extension
            ("file.", "txt", "file.txt"),
            ("dir.d/file", "o", "dir.d/file.o"),  # dots in directories ignored
            ("dir/.profile", "bak", "dir/.profile.bak"),  # dot files have no extension
            (".profile", "", ".profile"),
            ("dir\\.profile", "", "dir\\.profile"),
            ("a/b.c/", "x", "a/b.c/.x"),
        ],
    )
    def test_replace(self, path: str, new_ext: str, expected: str) -> None:
        """Replace, strip or append the trailing extension.

        Args:
            path: Input path.
            new_ext: New extension.
            expected: Expected output.
        """
        assert replace_extension(path, new_ext) == expected

    @pytest.mark.parametrize(
        "new_ext,expected",
        [("x\\1", "a.x\\1"), (r"\g<0>", r"a.\g<0>"), ("\\", "a.\\")],
    )
    def test_new_extension_is_literal(self, new_ext: str, expected: str) -> None:
        """Backslashes and group references in the new extension are not expanded.

        Args:
            new_ext: Extension containing substitution syntax.
            expected: Expected output.
        """
        assert replace_extension("a.b", new_ext) == expected

    def test_default_strips(self) -> None:
        """Omitting the extension strips the current one."""
        assert replace_extension("x.c") == "x"

    def test_without_alt_separator(self) -> None:
        """Disabling the alternative separator makes '\\' a name character."""
        editor = ExtensionEditor("/", None)
        assert editor.replace_extension("dir\\.profile", "") == "dir\\"

    def test_custom_separator(self) -> None:
        """The configured separator bounds the last component."""
        editor = ExtensionEditor(":", None)
        assert editor.replace_extension("a.d:b", "o") == "a.d:b.o"
        assert editor.replace_extension("a:b.c", "o") == "a:b.o"
        assert editor.replace_extension("a:.b", "") == "a:.b"

    def test_invalid_separator(self) -> None:
        """Editors reject multi-character separators."""
        with pytest.raises(InvalidSeparatorError):
            _ = ExtensionEditor("//")
        with pytest.raises(InvalidSeparatorError):
            _ = ExtensionEditor("/", "ab")
