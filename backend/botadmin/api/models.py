"""Common API request and response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""

    success: bool = Field(default=False, description="Always false for errors")
    error: str = Field(description="Error message")


class MessageResponse(BaseModel):
    """Success envelope carrying only a message."""

    success: bool = Field(default=True, description="Operation succeeded")
    message: str = Field(description="Human-readable result")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    timestamp: datetime = Field(description="Server time")
    version: str = Field(description="Application version")


# === Parameters ===


class ParameterInput(BaseModel):
    """Create/update request body for a parameter.

    Fields are optional here so missing values can be reported with a single
    message; see ``api.parameters.validate_parameter_input``.
    """

    name: str | None = Field(default=None, description="Unique parameter name")
    type: str | None = Field(default=None, description="Value type (text, number, url, key, boolean, email)")
    value: str | int | float | bool | None = Field(default=None, description="Parameter value")


class ParameterResponse(BaseModel):
    """A stored parameter."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Parameter ID")
    name: str = Field(description="Parameter name")
    type: str = Field(description="Value type")
    value: str = Field(description="Value as stored")
    created_at: datetime | None = Field(default=None, description="Creation timestamp")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")


class ParameterEnvelope(BaseModel):
    """Success envelope for a single parameter."""

    success: bool = True
    data: ParameterResponse


class ParameterListEnvelope(BaseModel):
    """Success envelope for a list of parameters."""

    success: bool = True
    data: list[ParameterResponse]


# === Commands ===


class CommandOptionResponse(BaseModel):
    """An option (argument) of a slash command."""

    name: str = Field(description="Option name")
    description: str = Field(description="Option description")
    type: int = Field(description="Option type code (3 = string)")
    required: bool = Field(description="Whether the option must be supplied")


class CommandResponse(BaseModel):
    """A slash command declared in the bot source."""

    name: str = Field(description="Command name, without the slash")
    description: str = Field(description="Command description")
    active: bool = Field(description="Listed in ALL_COMMANDS and not commented out")
    options: list[CommandOptionResponse] = Field(default_factory=list)


class CommandDetailResponse(CommandResponse):
    """A slash command with derived details."""

    has_options: bool = Field(description="Whether the command declares options")
