#!/usr/bin/env python3
"""Admin CLI for inspecting the bot's slash-command declarations.

Commands:
    list [--file PATH] [--active-only]   Print all commands as JSON
    show NAME [--file PATH]              Print a single command as JSON

Usage:
    python -m botadmin.cli.commands_admin list
    python -m botadmin.cli.commands_admin list --active-only
    python -m botadmin.cli.commands_admin show explain --file ../commands.js
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from botadmin.commands import CommandSourceNotFound, find_command, load_commands, read_command_source
from botadmin.config import settings

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 1
EXIT_NO_SOURCE = 2


def cmd_list(args: argparse.Namespace) -> int:
    """Print every declared command."""
    commands = load_commands(args.file)
    if args.active_only:
        commands = [c for c in commands if c.active]

    print(json.dumps([c.to_dict() for c in commands], indent=2, ensure_ascii=False))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print a single command."""
    command = find_command(read_command_source(args.file), args.name)
    if command is None:
        logger.error(f"No command named '{args.name}' in {args.file}")
        return EXIT_NOT_FOUND

    data = command.to_dict()
    data["has_options"] = command.has_options
    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inspect slash commands declared in the bot source",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    file_help = f"Command source file (default: {settings.commands_file})"

    list_parser = subparsers.add_parser("list", help="Print all commands as JSON")
    list_parser.add_argument("--file", type=Path, default=settings.commands_file, help=file_help)
    list_parser.add_argument(
        "--active-only",
        action="store_true",
        help="Only print commands listed in ALL_COMMANDS",
    )

    show_parser = subparsers.add_parser("show", help="Print a single command as JSON")
    show_parser.add_argument("name", help="Command name, without the slash")
    show_parser.add_argument("--file", type=Path, default=settings.commands_file, help=file_help)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    handlers = {
        "list": cmd_list,
        "show": cmd_show,
    }

    if args.command not in handlers:
        parser.print_help()
        return EXIT_NOT_FOUND

    try:
        return handlers[args.command](args)
    except CommandSourceNotFound as e:
        logger.error(str(e))
        return EXIT_NO_SOURCE


if __name__ == "__main__":
    sys.exit(main())
