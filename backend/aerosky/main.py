"""
AeroSky - FastAPI Application
Main application entry point with middleware and route configuration
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aerosky.api.v1 import api_router
from aerosky.core.config import settings
from aerosky.core.database import init_db
from aerosky.core.errors import TimingMiddleware, add_error_handlers
from aerosky.core.question_bank import question_bank

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure root logging once from settings."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # HTTP client debug logs are noise
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info("Starting %s (%s)", settings.APP_NAME, settings.ENVIRONMENT)
    for subject in question_bank.subjects:
        logger.info(
            "Question bank: %d questions for %s",
            len(question_bank.questions_for(subject)),
            subject,
        )

    await init_db()
    logger.info("Database tables initialized")

    yield

    # Shutdown
    logger.info("Shutting down %s", settings.APP_NAME)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Timed tests, practice sessions and performance analytics",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(TimingMiddleware)
    add_error_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix=settings.API_PREFIX)

    def health_payload() -> dict:
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {**health_payload(), "environment": settings.ENVIRONMENT}

    @app.get(f"{settings.API_PREFIX}/health", tags=["Health"])
    async def api_health_check():
        """API health check."""
        return health_payload()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "aerosky.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
