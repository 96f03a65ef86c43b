"""FastAPI application entry point.

Forum API - posts, votes and threaded replies.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from forum.routes import api_router
from forum.schemas import ErrorDetail, ErrorResponse
from forum.services.errors import ForumError
from forum.services.uploads import ensure_upload_dir
from forum.settings import get_settings
from forum.stores.database import close_db, create_tables, init_db, ping_db

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Creates the schema and upload directory on startup (both idempotent)
    and disposes the engine on shutdown.
    """
    # Startup
    ensure_upload_dir()
    await init_db()
    await create_tables()
    await ping_db()
    logger.info(f"Database connected: {get_settings().async_database_url.split('://', 1)[0]}")

    yield

    # Shutdown
    await close_db()


def _error_body(code: str, message: str, detail: dict[str, Any] | None = None) -> dict[str, Any]:
    return ErrorResponse(error=ErrorDetail(code=code, message=message, detail=detail)).model_dump()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Minimal forum backend: posts, votes and replies",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ForumError)
    async def forum_error_handler(request: Request, exc: ForumError) -> JSONResponse:
        """Render service errors in the structured error format."""
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message, exc.detail),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report malformed request bodies/params as 400 instead of 422."""
        logger.warning(f"Validation error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=400,
            content=_error_body(
                "VALIDATION_ERROR",
                "Request validation failed",
                {"errors": jsonable_encoder(exc.errors())},
            ),
        )

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "INTERNAL_ERROR",
                str(exc) if settings.debug else "Internal server error",
            ),
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    # Include API routes
    app.include_router(api_router)

    # Public assets and uploads; mounted last so API routes take precedence.
    # The directory is created in lifespan, not at import.
    app.mount(
        "/",
        StaticFiles(directory=settings.public_dir, html=True, check_dir=False),
        name="public",
    )

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "forum.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
