"""Repository for configuration parameters.

Single-table CRUD over ``parameters``. Every method opens its own session
so handlers stay free of transaction bookkeeping.
"""

import logging
from enum import Enum

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

import botadmin.database as db_module
from botadmin.database import Parameter

logger = logging.getLogger(__name__)


def get_session():
    """Get the current session factory (supports test patching)."""
    return db_module.async_session_factory


class ParameterType(str, Enum):
    """Supported parameter value types."""

    TEXT = "text"
    NUMBER = "number"
    URL = "url"
    KEY = "key"
    BOOLEAN = "boolean"
    EMAIL = "email"


class DuplicateParameterError(Exception):
    """Raised when a parameter name is already taken."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A parameter named '{name}' already exists")


class ParameterRepository:
    """Repository for parameter persistence."""

    @staticmethod
    async def list_all() -> list[Parameter]:
        """List all parameters, newest first."""
        async with get_session()() as db:
            result = await db.execute(
                select(Parameter).order_by(Parameter.created_at.desc(), Parameter.id.desc())
            )
            return list(result.scalars().all())

    @staticmethod
    async def get(parameter_id: int) -> Parameter | None:
        """Get a parameter by ID."""
        async with get_session()() as db:
            result = await db.execute(select(Parameter).where(Parameter.id == parameter_id))
            return result.scalar_one_or_none()

    @staticmethod
    async def get_by_name(name: str) -> Parameter | None:
        """Get a parameter by name."""
        async with get_session()() as db:
            result = await db.execute(select(Parameter).where(Parameter.name == name))
            return result.scalar_one_or_none()

    @staticmethod
    async def create(name: str, type: str, value: str) -> Parameter:
        """Create a new parameter.

        Raises:
            DuplicateParameterError: If the name is already taken.
        """
        async with get_session()() as db:
            parameter = Parameter(name=name, type=type, value=value)
            db.add(parameter)
            try:
                await db.commit()
            except IntegrityError as e:
                await db.rollback()
                raise DuplicateParameterError(name) from e
            await db.refresh(parameter)
            logger.info(f"Created parameter {name}", extra={"parameter_id": parameter.id})
            return parameter

    @staticmethod
    async def update(parameter_id: int, name: str, type: str, value: str) -> Parameter | None:
        """Update a parameter, returning None if it doesn't exist.

        Raises:
            DuplicateParameterError: If another parameter already has ``name``.
        """
        async with get_session()() as db:
            result = await db.execute(select(Parameter).where(Parameter.id == parameter_id))
            parameter = result.scalar_one_or_none()
            if not parameter:
                return None

            parameter.name = name
            parameter.type = type
            parameter.value = value
            parameter.updated_at = func.now()
            try:
                await db.commit()
            except IntegrityError as e:
                await db.rollback()
                raise DuplicateParameterError(name) from e
            await db.refresh(parameter)
            logger.info(f"Updated parameter {name}", extra={"parameter_id": parameter_id})
            return parameter

    @staticmethod
    async def delete(parameter_id: int) -> bool:
        """Delete a parameter. Returns False if it doesn't exist."""
        async with get_session()() as db:
            result = await db.execute(select(Parameter).where(Parameter.id == parameter_id))
            parameter = result.scalar_one_or_none()
            if not parameter:
                return False

            await db.delete(parameter)
            await db.commit()
            logger.info(f"Deleted parameter {parameter.name}", extra={"parameter_id": parameter_id})
            return True
