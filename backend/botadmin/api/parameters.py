"""Parameter API endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from botadmin.api.models import (
    ErrorResponse,
    MessageResponse,
    ParameterEnvelope,
    ParameterInput,
    ParameterListEnvelope,
    ParameterResponse,
)
from botadmin.parameters import DuplicateParameterError, ParameterRepository, ParameterType

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/parameters",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid parameter"},
        404: {"model": ErrorResponse, "description": "Parameter not found"},
        409: {"model": ErrorResponse, "description": "Name already in use"},
    },
)

VALID_TYPES = [t.value for t in ParameterType]


def validate_parameter_input(data: ParameterInput) -> tuple[str, str, str]:
    """Check a request body and return ``(name, type, value)`` for storage.

    Raises:
        HTTPException: 400 if a field is missing or the type is unknown.
    """
    if not data.name or not data.type or data.value is None:
        raise HTTPException(status_code=400, detail="Name, type, and value are required")

    if data.type not in VALID_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Type must be one of: {', '.join(VALID_TYPES)}",
        )

    value = data.value
    if isinstance(value, bool):
        value = "true" if value else "false"

    return data.name, data.type, str(value)


@router.get("", response_model=ParameterListEnvelope)
async def list_parameters() -> ParameterListEnvelope:
    """List all parameters, newest first."""
    parameters = await ParameterRepository.list_all()
    return ParameterListEnvelope(
        data=[ParameterResponse.model_validate(p) for p in parameters]
    )


@router.get("/{parameter_id}", response_model=ParameterEnvelope)
async def get_parameter(parameter_id: int) -> ParameterEnvelope:
    """Get a single parameter."""
    parameter = await ParameterRepository.get(parameter_id)
    if not parameter:
        raise HTTPException(status_code=404, detail="Parameter not found")
    return ParameterEnvelope(data=ParameterResponse.model_validate(parameter))


@router.post("", response_model=ParameterEnvelope, status_code=201)
async def create_parameter(data: ParameterInput) -> ParameterEnvelope:
    """Create a new parameter."""
    name, type_, value = validate_parameter_input(data)

    try:
        parameter = await ParameterRepository.create(name, type_, value)
    except DuplicateParameterError:
        raise HTTPException(status_code=409, detail="A parameter with this name already exists")

    return ParameterEnvelope(data=ParameterResponse.model_validate(parameter))


@router.put("/{parameter_id}", response_model=ParameterEnvelope)
async def update_parameter(parameter_id: int, data: ParameterInput) -> ParameterEnvelope:
    """Replace a parameter's name, type and value."""
    name, type_, value = validate_parameter_input(data)

    try:
        parameter = await ParameterRepository.update(parameter_id, name, type_, value)
    except DuplicateParameterError:
        raise HTTPException(status_code=409, detail="A parameter with this name already exists")

    if not parameter:
        raise HTTPException(status_code=404, detail="Parameter not found")
    return ParameterEnvelope(data=ParameterResponse.model_validate(parameter))


@router.delete("/{parameter_id}", response_model=MessageResponse)
async def delete_parameter(parameter_id: int) -> MessageResponse:
    """Delete a parameter."""
    deleted = await ParameterRepository.delete(parameter_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Parameter not found")
    return MessageResponse(message="Parameter deleted successfully")
