"""Main CLI entry point for scarb-eject.

Reads the metadata of a Scarb workspace and writes the equivalent
``cairo_project.toml``.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from scarb_eject import __version__
from scarb_eject.cli.eject import eject_command
from scarb_eject.metadata.packages_filter import PACKAGES_FILTER_ENV

logger = logging.getLogger("scarb_eject.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    # Logs go to stderr so that `-o -` output stays clean.
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="scarb-eject",
        description="Scarb Eject - generate cairo_project.toml from Scarb metadata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        help=(
            "Path to `cairo_project.toml` file to overwrite. Defaults to next "
            "to `Scarb.toml` for this workspace. Use `-` to write to standard output."
        ),
    )

    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "-p",
        "--package",
        metavar="SPEC",
        help=(
            "Package to eject: a name or glob pattern, comma separated. "
            f"Defaults to ${PACKAGES_FILTER_ENV}."
        ),
    )
    selection.add_argument(
        "-w",
        "--workspace",
        action="store_true",
        help="Select among all workspace members (fails if there are several)",
    )

    parser.add_argument(
        "--no-deps",
        action="store_true",
        help="Leave the global crate dependency list empty",
    )
    parser.add_argument(
        "--manifest-path",
        metavar="PATH",
        help="Path to Scarb.toml, forwarded to `scarb metadata`",
    )
    parser.add_argument(
        "--metadata-file",
        metavar="PATH",
        help=(
            "Read the workspace metadata from this JSON file (as printed by "
            "`scarb --json metadata --format-version 1`) instead of running Scarb"
        ),
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional tool configuration. Can be a path to a TOML/JSON file or "
            "an inline TOML/JSON string. Command-line flags take precedence."
        ),
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    return eject_command(args)


if __name__ == "__main__":
    sys.exit(main())
