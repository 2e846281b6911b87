"""Display helpers for CLI output."""

from pathmap.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
