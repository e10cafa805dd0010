"""
Command-line interface for describe-action.

Prints the inputs and outputs of an action manifest as Markdown tables,
ready to paste into a README.

Usage:
    describe-action                       # reads ./action.yml
    describe-action -yaml path/action.yml -input
    describe-action -type > table.md      # prompts go to stderr
"""

import argparse
import sys
from typing import List, Optional

from describe_action import __version__
from describe_action.core.exceptions import DescribeActionException
from describe_action.core.logger import configure_root_logger, get_logger
from describe_action.describe import describe
from describe_action.models.run_config import DEFAULT_MANIFEST_PATH, RunConfig

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="describe-action",
        description="Render the inputs and outputs of an action manifest as Markdown tables",
    )
    parser.add_argument(
        "-yaml", "--yaml",
        default=DEFAULT_MANIFEST_PATH,
        metavar="PATH",
        help="The filepath to action.yml",
    )
    parser.add_argument(
        "-input", "--input",
        action="store_true",
        help="Whether only print inputs",
    )
    parser.add_argument(
        "-output", "--output",
        action="store_true",
        help="Whether only print outputs",
    )
    parser.add_argument(
        "-type", "--type",
        action="store_true",
        help="Whether table has types (prompts for missing ones)",
    )
    parser.add_argument(
        "-verbose", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-version", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run describe-action and return the process exit status.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]

    Returns:
        0 on success, 1 if the manifest could not be loaded

    Example:
        >>> from describe_action.cli import main
        >>> main(["-yaml", "action.yml", "-output"])
        0
    """
    args = build_parser().parse_args(argv)
    config = RunConfig.from_args(args)
    configure_root_logger(config.log_level)

    try:
        describe(config, stream=sys.stdout)
    except DescribeActionException as e:
        logger.error(f"Failed to describe action: {e}")
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
