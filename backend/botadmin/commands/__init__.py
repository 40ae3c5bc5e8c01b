"""Slash-command declarations read from the bot source."""

from botadmin.commands.extractor import (
    Activation,
    CommandDefinition,
    CommandOption,
    CommandSourceError,
    extract_all_commands,
    find_command,
    resolve_active,
)
from botadmin.commands.source import CommandSourceNotFound, load_commands, read_command_source

__all__ = [
    "Activation",
    "CommandDefinition",
    "CommandOption",
    "CommandSourceError",
    "CommandSourceNotFound",
    "extract_all_commands",
    "find_command",
    "load_commands",
    "read_command_source",
    "resolve_active",
]
