# Path: `src/pathmap/features/path/__init__.py`
# Summary: Export path decomposition and extension editing symbols.
# Why: Provide a stable import surface for the CLI and tests.

from .domain.decomposer import DEFAULT_DECOMPOSER, PathDecomposer, explode, partial
from .domain.extension import DEFAULT_EDITOR, ExtensionEditor, replace_extension
from .domain.separators import (
    DEFAULT_SEPARATOR,
    InvalidSeparatorError,
    basename,
    dirname,
    join,
    split,
)

__all__ = [
    "DEFAULT_DECOMPOSER",
    "DEFAULT_EDITOR",
    "DEFAULT_SEPARATOR",
    "ExtensionEditor",
    "InvalidSeparatorError",
    "PathDecomposer",
    "basename",
    "dirname",
    "explode",
    "join",
    "partial",
    "replace_extension",
    "split",
]
