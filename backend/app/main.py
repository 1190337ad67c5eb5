"""
Event Hotel Booking API - Main Application Entry Point

Backend for an event-registration platform:
- Enrollment, ticket reservation and card payment
- Hotel listing and room booking for paid hotel-inclusive tickets
- Structured logging with request correlation
- Redis catalog cache and Prometheus metrics
"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.core.metrics import metrics_endpoint
from app.api.router import api_router
from app.api.middleware import RequestLoggingMiddleware
from app.db.session import close_engine, get_db
from app.services.cache_service import get_redis, close_redis, get_cache_stats

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        api_prefix=settings.API_PREFIX or "/",
    )

    if await get_redis():
        logger.info("catalog_cache_ready")
    elif settings.REDIS_ENABLED:
        logger.warning("catalog_cache_unavailable", message="Catalog reads go to the database")

    yield

    await close_redis()
    await close_engine()
    logger.info("application_shutdown")


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Tickets, payments, hotels and room booking for event attendees",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(application)
    application.include_router(api_router)
    return application


app = create_app()


@app.get("/health", tags=["Health"])
async def health_check(db: AsyncSession = Depends(get_db)):
    """Liveness plus database and catalog cache reachability."""
    try:
        await db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.error("health_database_unreachable", error=str(e))
        database = "unreachable"

    return {
        "status": "healthy" if database == "connected" else "degraded",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "database": database,
        "cache": await get_cache_stats(),
    }


@app.get("/metrics", include_in_schema=False)
async def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
