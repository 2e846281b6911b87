"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from typing import final

from pathmap import __version__
from pathmap.config.config import Config
from pathmap.platform.logging import logger, setup_logger
from pathmap.ui.cli.args.options import CLIArgs, ExplodeArgs, ExtArgs, PartialArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="pathmap",
            description="pathmap - derive build paths from source paths.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        ext_parser = subparsers.add_parser(
            "ext",
            help="Replace or strip the extension of a path",
        )
        _ = ext_parser.add_argument("path", type=str, help="Path to edit", metavar="PATH")
        _ = ext_parser.add_argument(
            "new_ext",
            type=str,
            nargs="?",
            default="",
            help="New extension; omit to strip the current one",
            metavar="NEW_EXT",
        )
        ArgumentParser._configure_common(ext_parser)

        explode_parser = subparsers.add_parser(
            "explode",
            help="Print the components of a path, one per line",
        )
        _ = explode_parser.add_argument("path", type=str, help="Path to decompose", metavar="PATH")
        ArgumentParser._configure_common(explode_parser)

        partial_parser = subparsers.add_parser(
            "partial",
            help="Print N leading (or -N trailing) directories of a path",
        )
        _ = partial_parser.add_argument(
            "path",
            type=str,
            help="Path whose directory portion is sliced",
            metavar="PATH",
        )
        _ = partial_parser.add_argument(
            "count",
            type=int,
            help="Directories to keep; negative counts from the end",
            metavar="N",
        )
        ArgumentParser._configure_common(partial_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            ConfigError: If the configuration file cannot be used.
            InvalidSeparatorError: If ``--separator`` is not a single character.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        if parsed_args.separator is not None:
            configuration = replace(configuration, separator=parsed_args.separator)

        command: str = parsed_args.command

        if command == "ext":
            return ExtArgs(
                command="ext",
                path=parsed_args.path,
                new_ext=parsed_args.new_ext,
                config=configuration,
            )

        if command == "explode":
            return ExplodeArgs(
                command="explode",
                path=parsed_args.path,
                config=configuration,
            )

        if command == "partial":
            return PartialArgs(
                command="partial",
                path=parsed_args.path,
                count=parsed_args.count,
                config=configuration,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _configure_common(parser: argparse.ArgumentParser) -> None:
        """Apply options shared by every subcommand."""

        _ = parser.add_argument(
            "--separator",
            type=str,
            default=None,
            help="Path separator (defaults to the configured one, '/')",
            metavar="SEP",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
