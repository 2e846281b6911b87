"""Command line interface for pathmap."""

import sys
from typing import final

from pathmap.config.config import ConfigError
from pathmap.features.path import InvalidSeparatorError
from pathmap.platform.logging import logger
from pathmap.ui.cli.args import ArgumentParser
from pathmap.ui.cli.args.options import CLIArgs, ExplodeArgs, ExtArgs, PartialArgs
from pathmap.ui.cli.display import ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: list[str] | None = None,
        display: ResultDisplay | None = None,
    ) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            display: Output target for results (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            lines = CommandProcessor.run(args)
            (display or ResultDisplay()).show_lines(lines)
        except (ConfigError, InvalidSeparatorError) as e:
            logger.error("%s", e, extra={"path_event": "config.error"})
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)

    @staticmethod
    def run(args: CLIArgs) -> list[str]:
        """Execute a parsed command and return its output lines."""

        if isinstance(args, ExtArgs):
            editor = args.config.extension_editor()
            return [editor.replace_extension(args.path, args.new_ext)]

        decomposer = args.config.decomposer()
        if isinstance(args, ExplodeArgs):
            return decomposer.explode(args.path)

        assert isinstance(args, PartialArgs)
        result = decomposer.partial(args.path, args.count)
        logger.debug(
            "partial(%d) resolved",
            args.count,
            extra={"path_event": "cli.result", "path": result, "separator": decomposer.separator},
        )
        return [result]


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` before this return is reached.
    """
    CommandProcessor.process_command()
    return 0
