"""API routes for Bot Admin."""

from fastapi import APIRouter

from botadmin.api.commands import router as commands_router
from botadmin.api.parameters import router as parameters_router

api_router = APIRouter(prefix="/api")
api_router.include_router(parameters_router, tags=["parameters"])
api_router.include_router(commands_router, tags=["commands"])

__all__ = ["api_router"]
