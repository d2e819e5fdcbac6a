"""
Train Ticket Booking API - Main Application Entry Point

- Station directory with a built-in fallback list
- Direction-tolerant fare lookup per travel class
- Booking transaction: validate, price, insert, read back
- Structured logging with request correlation and Prometheus metrics
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from trainbook.core.config import get_settings
from trainbook.core.logging import setup_logging, get_logger
from trainbook.core.metrics import metrics_endpoint
from trainbook.core.exceptions import StoreUnavailable
from trainbook.api.router import api_router
from trainbook.api.errors import register_exception_handlers
from trainbook.api.middleware import RequestLoggingMiddleware
from trainbook.db.session import init_engine, dispose_engine, create_tables, get_engine

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    engine = init_engine()
    try:
        if settings.DB_CREATE_TABLES:
            await create_tables(engine)
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("database_ready")
    except (OSError, SQLAlchemyError) as e:
        # Serve anyway; requests that need the store will fail with 500.
        logger.error("database_unavailable", error=str(e))

    yield

    await dispose_engine()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Train ticket booking API: stations, fares, bookings",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    database = "ok"
    try:
        async with get_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (StoreUnavailable, OSError, SQLAlchemyError):
        database = "unavailable"

    return {
        "status": "healthy" if database == "ok" else "degraded",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "database": database,
    }


@app.get("/metrics", include_in_schema=False)
def metrics():
    return metrics_endpoint()
