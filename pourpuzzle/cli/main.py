"""
Pour Puzzle CLI.

Commands:
    pourpuzzle play [--capacities N ...] [--targets N ...]
    pourpuzzle show [--capacities N ...] [--targets N ...]

With no command, 'play' runs on the canonical 8/5/3 puzzle.
Logging goes to stderr so that stdout stays a clean game transcript.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from ..config import PuzzleConfig
from ..errors import PuzzleError
from ..puzzle import PuzzleState
from .shell import PuzzleShell, format_number_list, format_volumes

logger = logging.getLogger(__name__)

# Exit code for a rejected puzzle configuration
EXIT_BAD_CONFIG = 2


# =============================================================================
# HELPERS
# =============================================================================

def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_state(args: argparse.Namespace) -> Optional[PuzzleState]:
    """
    Build the puzzle named by --capacities/--targets.

    Prints the reason and returns None if the configuration is invalid.
    """
    try:
        config = PuzzleConfig.from_options(
            getattr(args, "capacities", None),
            getattr(args, "targets", None),
        )
    except PuzzleError as e:
        print("ERROR: Invalid puzzle configuration")
        print(f"Reason: {e.reason}")
        return None

    logger.debug("Using puzzle config %s", config)
    return PuzzleState.from_config(config)


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_play(args: argparse.Namespace) -> int:
    """Play the puzzle interactively."""
    state = build_state(args)
    if state is None:
        return EXIT_BAD_CONFIG

    return PuzzleShell(state).run()


def cmd_show(args: argparse.Namespace) -> int:
    """Print the starting buckets and the targets."""
    state = build_state(args)
    if state is None:
        return EXIT_BAD_CONFIG

    print("Pour Puzzle")
    print("=" * 50)
    print(format_volumes(state))
    print()
    print(f"targets: {format_number_list(state.get_target())}")
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def _add_puzzle_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--capacities",
        type=int,
        nargs="+",
        metavar="N",
        help="Bucket capacities, first bucket starts full (default: 8 5 3)",
    )
    parser.add_argument(
        "--targets",
        type=int,
        nargs="+",
        metavar="N",
        help="Target volume for each bucket (default: 4 4 0)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pourpuzzle",
        description="Pour Puzzle — the classic water pouring puzzle",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every pour to stderr",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Play command
    play_parser = subparsers.add_parser(
        "play",
        help="Play the puzzle interactively",
    )
    _add_puzzle_arguments(play_parser)
    play_parser.set_defaults(func=cmd_play)

    # Show command
    show_parser = subparsers.add_parser(
        "show",
        help="Show the starting buckets and targets",
    )
    _add_puzzle_arguments(show_parser)
    show_parser.set_defaults(func=cmd_show)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        return cmd_play(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
