"""Command line argument handling package."""

from pathmap.ui.cli.args.parser import ArgumentParser
from pathmap.ui.cli.args.options import CLIArgs, ExplodeArgs, ExtArgs, PartialArgs

__all__ = ["ArgumentParser", "CLIArgs", "ExplodeArgs", "ExtArgs", "PartialArgs"]
