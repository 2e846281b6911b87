"""Rich console handler that renders path events compactly.

Where: platform/logging/handlers.py
What: Style path strings attached to log records (separators highlighted,
    long paths abbreviated).
Why: Keep console formatting out of the logger bootstrap.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that displays attached paths in white."""

    _PATH_EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "config.loaded": ("⚙️", "cyan"),
        "config.error": ("❌", "red"),
        "path.partial.fallback": ("↩️", "yellow"),
        "cli.result": ("✅", "green"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, separator: str = "/") -> Text:
        """Format a path with colored separators and ellipsis truncation.

        Args:
            path: Path string to format.
            separator: Separator used by ``path``.

        Returns:
            Text: Styled path keeping the root and the last segments.
        """
        is_absolute = path.startswith(separator)
        body_parts = [part for part in path.split(separator) if part]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT :]

        display = separator if is_absolute else ""
        if truncated:
            display += "…" + separator
        display += separator.join(body_parts)
        if not display:
            display = "."

        text = Text()
        for char in display:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_path_event(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records that carry a ``path_event`` extra."""

        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._PATH_EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        path = getattr(record, "path", None)
        if path:
            separator = getattr(record, "separator", None) or "/"
            _ = text.append(" @ ")
            _ = text.append_text(self._format_path(str(path), separator))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for path events."""

        path_text = self._render_path_event(record, message)
        if path_text is not None:
            return path_text
        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
