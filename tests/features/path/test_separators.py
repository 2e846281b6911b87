"""Tests for the split and join primitives."""

import pytest

from pathmap.features.path import InvalidSeparatorError, basename, dirname, join, split
from pathmap.features.path.domain.separators import validate_separator


@pytest.mark.parametrize(
    "path,expected",
    [
        ("a/b/c", ("a/b", "c")),
        ("/a/b", ("/a", "b")),
        ("/a", ("/", "a")),
        ("leaf", (".", "leaf")),
        ("", (".", "")),
        ("/", ("/", "/")),
        ("///", ("/", "/")),
        ("a/b/", ("a", "b")),  # trailing separator ignored
        ("a//b", ("a", "b")),  # redundant separators dropped from head
        (".", (".", ".")),
        ("./a", (".", "a")),
    ],
)
def test_split(path: str, expected: tuple[str, str]) -> None:
    """Split follows dirname/basename conventions."""
    assert split(path) == expected


def test_split_custom_separator() -> None:
    """A configured separator replaces '/' entirely."""
    assert split("a:b:c", ":") == ("a:b", "c")
    assert split(":a", ":") == (":", "a")
    assert split("a/b", ":") == (".", "a/b")


def test_dirname_and_basename() -> None:
    """dirname and basename are the two halves of split."""
    assert dirname("a/b/c/file.txt") == "a/b/c"
    assert basename("a/b/c/file.txt") == "file.txt"
    assert dirname("file.txt") == "."


@pytest.mark.parametrize(
    "components,expected",
    [
        (["a", "b", "c"], "a/b/c"),
        (["/", "a", "b"], "/a/b"),
        (["/"], "/"),
        (["a"], "a"),
        ([], ""),
        (["a/", "b"], "a/b"),
    ],
)
def test_join(components: list[str], expected: str) -> None:
    """Join never doubles a separator at a boundary."""
    assert join(components) == expected


@pytest.mark.parametrize("separator", ["", "::", "."])
def test_validate_separator_rejects(separator: str) -> None:
    """Separators must be one character other than the dot."""
    with pytest.raises(InvalidSeparatorError) as exc_info:
        _ = validate_separator(separator)
    assert exc_info.value.separator == separator
    assert isinstance(exc_info.value, ValueError)


def test_validate_separator_accepts() -> None:
    """Ordinary single characters are accepted unchanged."""
    assert validate_separator("\\") == "\\"
    assert validate_separator("|") == "|"
