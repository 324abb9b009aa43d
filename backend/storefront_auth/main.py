"""FastAPI main application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront_auth.api.v1 import auth, b2b
from storefront_auth.config import get_auth_config, settings
from storefront_auth.core.logging_config import get_logger, setup_logging
from storefront_auth.exceptions import (
    ConfigurationError,
    InfrastructureError,
    UpstreamProtocolError,
)
from storefront_auth.middleware.error_handler import ErrorHandlerMiddleware
from storefront_auth.services.error_logging_service import error_logging_service

_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    setup_logging()

    config = get_auth_config()
    get_logger(__name__).info(
        "startup",
        app=settings.APP_NAME,
        environment=settings.ENVIRONMENT,
        default_channel=config.default_channel_id,
        b2b_enabled=config.b2b_enabled,
    )

    yield

    get_logger(__name__).info("shutdown", app=settings.APP_NAME)


# Disable interactive API docs in production to reduce attack surface
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Catch uncaught exceptions with PII redaction
app.add_middleware(ErrorHandlerMiddleware)


@app.exception_handler(ConfigurationError)
async def configuration_exception_handler(request: Request, exc: ConfigurationError):
    error_logging_service.log_error(logger=_logger, error=exc, context={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Authentication is misconfigured"},
    )


@app.exception_handler(UpstreamProtocolError)
async def upstream_protocol_exception_handler(request: Request, exc: UpstreamProtocolError):
    error_logging_service.log_error(logger=_logger, error=exc, context={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "Upstream identity service returned an invalid response"},
    )


@app.exception_handler(InfrastructureError)
async def infrastructure_exception_handler(request: Request, exc: InfrastructureError):
    _logger.warning("Upstream unavailable on %s: %s", request.url.path, type(exc.__cause__).__name__)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Upstream identity service is unavailable"},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(auth.router, prefix="/api/v1/auth", tags=["Authentication"])
app.include_router(b2b.router, prefix="/api/v1/b2b", tags=["B2B"])
