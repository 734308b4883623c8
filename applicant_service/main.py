"""Applicant Service - Main Application.

HTTP service registering applicants with their address, intake form and
photo.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.endpoints import metrics as metrics_endpoint
from .api.v1.router import api_router
from .core.config import settings
from .core.constants import ApiEndpoints, HttpHeaders
from .core.logging import get_logger, setup_logging
from .core.metrics import set_app_info
from .db.database import engine
from .middleware.prometheus import PrometheusMiddleware
from .middleware.request_id import RequestIDMiddleware
from .storage.image_store import CloudinaryImageStore

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info(
        "Application starting",
        extra={
            'environment': settings.ENVIRONMENT,
            'version': settings.APP_VERSION
        }
    )

    set_app_info(
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT
    )

    image_store = CloudinaryImageStore.from_settings(settings)
    if not image_store.is_configured:
        logger.warning("Cloudinary credentials missing; applicant creation will fail")
    app.state.image_store = image_store

    yield

    logger.info("Application shutting down")
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Applicant registration with address, intake form and photo upload",
    lifespan=lifespan,
    docs_url=ApiEndpoints.DOCS,
    redoc_url=ApiEndpoints.REDOC,
    openapi_url=ApiEndpoints.OPENAPI
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Accept",
        HttpHeaders.REQUEST_ID,
    ],
    expose_headers=[HttpHeaders.REQUEST_ID, HttpHeaders.PROCESS_TIME],
)

app.add_middleware(PrometheusMiddleware)

# Added last so it wraps everything else and every log line carries the request id
app.add_middleware(RequestIDMiddleware)

# Include API routes
app.include_router(
    api_router,
    prefix=settings.API_V1_PREFIX
)

app.include_router(metrics_endpoint.router, tags=["Metrics"])


@app.get(ApiEndpoints.HEALTH, tags=["Health"])
async def health_check():
    """Health check endpoint for readiness/liveness probes."""
    return {
        "status": "healthy",
        "application": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.get(ApiEndpoints.ROOT, tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "application": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": ApiEndpoints.DOCS,
        "health": ApiEndpoints.HEALTH,
        "api": settings.API_V1_PREFIX
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "applicant_service.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
