"""pathmap - derive build paths from source paths.

Re-exports the pure path operations so callers can ``from pathmap import
partial`` without reaching into the feature package.
"""

from pathmap.features.path import (
    ExtensionEditor,
    InvalidSeparatorError,
    PathDecomposer,
    explode,
    partial,
    replace_extension,
)

__version__ = "0.1.0"

__all__ = [
    "ExtensionEditor",
    "InvalidSeparatorError",
    "PathDecomposer",
    "__version__",
    "explode",
    "partial",
    "replace_extension",
]
