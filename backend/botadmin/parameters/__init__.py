"""Key-value configuration parameters for the bot."""

from botadmin.parameters.repository import (
    DuplicateParameterError,
    ParameterRepository,
    ParameterType,
)

__all__ = [
    "DuplicateParameterError",
    "ParameterRepository",
    "ParameterType",
]
