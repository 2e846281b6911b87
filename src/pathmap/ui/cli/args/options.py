"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from pathmap.config.config import Config


@final
@dataclass(slots=True)
class ExtArgs:
    """Command line arguments for the ``ext`` subcommand."""

    command: Literal["ext"]
    path: str
    new_ext: str
    config: Config


@final
@dataclass(slots=True)
class ExplodeArgs:
    """Command line arguments for the ``explode`` subcommand."""

    command: Literal["explode"]
    path: str
    config: Config


@final
@dataclass(slots=True)
class PartialArgs:
    """Command line arguments for the ``partial`` subcommand."""

    command: Literal["partial"]
    path: str
    count: int
    config: Config


CLIArgs = ExtArgs | ExplodeArgs | PartialArgs

__all__ = ["CLIArgs", "ExplodeArgs", "ExtArgs", "PartialArgs"]
