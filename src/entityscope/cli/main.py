"""entityscope CLI entrypoint."""

import argparse
import logging
import sys
from typing import List, Optional

from entityscope.cli.commands.entities import (
    add_filter_arguments,
    cmd_export,
    cmd_list,
    cmd_resolve,
    cmd_show,
)
from entityscope.core.config import ConfigError, load_config
from entityscope.core.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_version(args: argparse.Namespace) -> int:
    from entityscope import __version__

    print(f"entityscope {__version__}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entityscope",
        description="Filter, inspect, export and cross-reference entity lumps",
    )
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    # List command
    list_parser = subparsers.add_parser("list", help="List entities matching the filters")
    list_parser.add_argument("file", help="JSON entity collection")
    add_filter_arguments(list_parser)
    list_parser.set_defaults(func=cmd_list)

    # Show command
    show_parser = subparsers.add_parser("show", help="Show one entity's properties and outputs")
    show_parser.add_argument("file", help="JSON entity collection")
    target = show_parser.add_mutually_exclusive_group()
    target.add_argument("--index", type=int, default=0, help="Row of the filtered list")
    target.add_argument("--targetname", help="Show the first entity with this targetname")
    add_filter_arguments(show_parser)
    show_parser.set_defaults(func=cmd_show)

    # Export command
    export_parser = subparsers.add_parser("export", help="Export entities to a JSON document")
    export_parser.add_argument("file", help="JSON entity collection")
    export_parser.add_argument("--output", "-o", help="Output file (default from config)")
    export_parser.add_argument(
        "--select",
        type=int,
        nargs="*",
        help="Rows of the filtered list to export (default: all rows)",
    )
    add_filter_arguments(export_parser)
    export_parser.set_defaults(func=cmd_export)

    # Resolve command
    resolve_parser = subparsers.add_parser("resolve", help="Find an entity by targetname")
    resolve_parser.add_argument("file", help="JSON entity collection")
    resolve_parser.add_argument("name", help="Targetname to look up")
    resolve_parser.set_defaults(func=cmd_resolve)

    parser.set_defaults(func=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code for the shell
            - 0: Success
            - 1: General error
            - 2: Incorrect usage (shows help)
            - 130: Interrupted by user (Ctrl+C)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.func is None:
        parser.print_help()
        return 2

    try:
        settings = load_config(args.config)
        configure_logging(
            verbose=args.verbose,
            level=settings.logging.level,
            fmt=settings.logging.format,
            file=settings.logging.file,
        )
    except (ConfigError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    args.settings = settings

    try:
        return int(args.func(args))
    except KeyboardInterrupt:
        print("\nOperation cancelled.")
        return 130
    except Exception as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
