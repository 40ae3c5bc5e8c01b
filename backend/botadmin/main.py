"""Bot Admin - Main FastAPI application."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from botadmin import __version__
from botadmin.api import api_router
from botadmin.api.models import ErrorResponse, HealthResponse
from botadmin.config import get_cors_origins, settings, validate_critical_settings
from botadmin.database import close_db, init_db
from botadmin.logging_config import setup_logging

# Configure logging early
setup_logging(debug=settings.debug, json_logs=not settings.debug)

logger = logging.getLogger(__name__)

# Rate limiter - uses remote address as key
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default] if settings.rate_limit_enabled else [],
    enabled=settings.rate_limit_enabled,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Bot Admin starting up...")

    await init_db()
    logger.info("Database initialized")

    validate_critical_settings()
    logger.info(f"Serving commands from {settings.commands_file}")

    yield

    logger.info("Bot Admin shutting down...")
    try:
        await close_db()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error(f"Error closing database: {e}")


tags_metadata = [
    {
        "name": "parameters",
        "description": "Key-value configuration parameters for the bot",
    },
    {
        "name": "commands",
        "description": "Slash commands declared in the bot source",
    },
]

app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Admin backend for a chat bot: configuration parameters "
    "and the registry of declared slash commands.",
    lifespan=lifespan,
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests with timing information."""
    start_time = time.time()

    response = await call_next(request)

    duration_ms = (time.time() - start_time) * 1000

    path = request.url.path
    if path != "/health":
        logger.info(
            "http_request",
            extra={
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "client_ip": request.client.host if request.client else "unknown",
            },
        )

    return response


# === Error envelopes ===


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors in the API's error envelope."""
    # Unmatched routes raise a bare 404 with Starlette's default detail
    if exc.status_code == 404 and exc.detail == "Not Found":
        return _error(404, "Endpoint not found")
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400."""
    errors = exc.errors()
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = errors[0].get("msg", "Invalid request")
        return _error(400, f"{location}: {message}" if location else message)
    return _error(400, "Invalid request")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so clients always get the error envelope."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _error(500, "Internal server error")


# API routes
app.include_router(api_router)


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
    )


# Serve the built admin UI when configured
if settings.frontend_dir and settings.frontend_dir.exists():
    app.mount("/", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")
else:
    @app.get("/")
    async def root():
        """Root endpoint when no frontend bundle is configured."""
        return {
            "name": settings.app_name,
            "docs": "/docs",
            "api": "/api",
            "endpoints": ["/api/parameters", "/api/commands"],
        }


def main():
    """Run the application."""
    import uvicorn

    uvicorn.run(
        "botadmin.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
