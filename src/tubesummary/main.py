"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from tubesummary.api.v1.router import router as api_router
from tubesummary.config import get_settings
from tubesummary.domain.errors import (
    InvalidInputError,
    PersistenceError,
    UpstreamSummarizationError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    from tubesummary.infrastructure.database import engine

    logger.info("Starting TubeSummary application...")
    logger.info(f"Environment: {settings.environment}")
    if not settings.ai_gateway_api_key:
        logger.warning("AI_GATEWAY_API_KEY is not set; summarization requests will fail")

    yield

    await engine.dispose()
    logger.info("Shutting down TubeSummary application...")


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain failures to ``{"error": ...}`` responses."""

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
        return JSONResponse({"error": "Invalid request"}, status_code=400)

    @app.exception_handler(UpstreamSummarizationError)
    async def summarization_handler(
        request: Request, exc: UpstreamSummarizationError
    ) -> JSONResponse:
        logger.error(f"Summarization failed (status={exc.status_code}): {exc}")
        return JSONResponse({"error": "Failed to generate summary"}, status_code=500)

    @app.exception_handler(PersistenceError)
    async def persistence_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error(f"Persistence failed: {exc}")
        return JSONResponse({"error": "Failed to save summary"}, status_code=500)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            {"error": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers
        )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="TubeSummary",
        description="AI-generated summaries of YouTube videos",
        version="0.1.0",
        lifespan=lifespan,
        **docs_kwargs,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=CORS_ALLOW_HEADERS,
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(api_router)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Lightweight health check with DB connectivity test."""
        from tubesummary.infrastructure.database import async_session_factory

        try:
            async with async_session_factory() as session:
                await session.execute(text("SELECT 1"))
            return JSONResponse({"status": "healthy", "database": "connected"})
        except Exception:
            return JSONResponse(
                {"status": "unhealthy", "database": "disconnected"},
                status_code=503,
            )

    return app


# Create app instance
app = create_app()
