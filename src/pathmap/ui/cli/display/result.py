"""src/pathmap/ui/cli/display/result.py
What: Write command results to stdout.
Why: Keep result output apart from log output, which goes to stderr.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import final

from rich.console import Console


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console(soft_wrap=True)

    def show_lines(self, lines: Iterable[str]) -> None:
        """Write each line unchanged to the console's file, bypassing Rich rendering."""
        out = self.console.file
        for line in lines:
            _ = out.write(line + "\n")
        out.flush()
