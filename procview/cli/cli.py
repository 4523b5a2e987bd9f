"""
Argument parsing for the procview command.
"""
import argparse
import os
from pathlib import Path
from typing import Optional, Sequence


def build_env_parser(description: Optional[str] = None) -> argparse.ArgumentParser:
    """
    Create an ArgumentParser with the common --config / --env options.

    Args:
        description: Optional parser description shown in CLI help.

    Returns:
        argparse.ArgumentParser: parser preconfigured with the config arguments.
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Directory holding config.yaml (defaults are used when omitted).",
    )
    parser.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'dev'). "
            "Loads config_<env>.yaml in addition to the base config.yaml."
        ),
    )
    return parser


def build_watch_parser() -> argparse.ArgumentParser:
    parser = build_env_parser(description="Live memory / CPU history of one process")
    parser.add_argument("--pid", type=int, default=os.getpid(),
                        help="Process to watch (default: this process)")
    parser.add_argument("--ticks", type=int, default=None,
                        help="Stop after this many ticks (default: until the process exits or Ctrl-C)")
    parser.add_argument("--chart-dir", type=Path, default=None,
                        help="Write memory.png and cpu.png here when watching ends (overrides config)")
    parser.add_argument("--csv", type=Path, default=None,
                        help="Write the sample history as CSV to this path when watching ends")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the table on every tick")
    return parser


def parse_watch_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    args = build_watch_parser().parse_args(argv)
    if args.ticks is not None and args.ticks < 1:
        build_watch_parser().error("--ticks must be at least 1")
    return args
