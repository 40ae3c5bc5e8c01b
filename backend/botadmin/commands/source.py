"""Loading the bot's command source file."""

import logging
from pathlib import Path

from botadmin.commands.extractor import CommandDefinition, CommandSourceError, extract_all_commands
from botadmin.config import settings

logger = logging.getLogger(__name__)


class CommandSourceNotFound(CommandSourceError):
    """Raised when the command source file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Commands file not found at: {path}")


def read_command_source(path: Path) -> str:
    """Read the command source file as UTF-8 text."""
    if not path.is_file():
        raise CommandSourceNotFound(path)
    return path.read_text(encoding="utf-8")


def load_commands(path: Path | None = None) -> list[CommandDefinition]:
    """Read and extract commands, defaulting to the configured file."""
    path = path or settings.commands_file
    commands = extract_all_commands(read_command_source(path))
    logger.debug(
        f"Extracted {len(commands)} commands from {path}",
        extra={"command_count": len(commands)},
    )
    return commands
