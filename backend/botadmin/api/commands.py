"""Slash command API endpoints.

Commands are read-only here: they come from the bot's source file and are
re-extracted on every request.
"""

import logging

from fastapi import APIRouter, HTTPException

from botadmin.api.models import CommandDetailResponse, CommandResponse, ErrorResponse
from botadmin.commands import CommandSourceNotFound, find_command, load_commands, read_command_source
from botadmin.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/commands",
    responses={404: {"model": ErrorResponse, "description": "Command or source file not found"}},
)


def _source_not_found(error: CommandSourceNotFound) -> HTTPException:
    logger.error(str(error))
    return HTTPException(status_code=404, detail="Commands file not found")


@router.get("", response_model=list[CommandResponse])
async def list_commands() -> list[CommandResponse]:
    """List every command declared in the bot source, active or not."""
    try:
        commands = load_commands()
    except CommandSourceNotFound as e:
        raise _source_not_found(e) from e
    return [CommandResponse.model_validate(c.to_dict()) for c in commands]


@router.get("/{name}", response_model=CommandDetailResponse)
async def get_command(name: str) -> CommandDetailResponse:
    """Get a single command by name."""
    try:
        text = read_command_source(settings.commands_file)
    except CommandSourceNotFound as e:
        raise _source_not_found(e) from e

    command = find_command(text, name)
    if command is None:
        raise HTTPException(status_code=404, detail=f"Command not found: {name}")
    return CommandDetailResponse(**command.to_dict(), has_options=command.has_options)
