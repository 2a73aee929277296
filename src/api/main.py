"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from auth.presentation import routes as auth_routes
from infrastructure.database import close_database_connections
from infrastructure.identity_service_dependencies import close_identity_service
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.settings import (
    get_cors_settings,
    get_identity_service_settings,
    get_settings,
)
from infrastructure.version import __version__
from tenancy import presentation as tenancy_presentation
from tenancy.presentation.errors import DefaultRequestFailureProbe, RequestFailureProbe

_probe = DefaultStartupProbe()
_request_probe: RequestFailureProbe = DefaultRequestFailureProbe()


@asynccontextmanager
async def gateway_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration and startup events
    - Identity service client shutdown (created lazily on first request)
    - Database engine disposal (created lazily on first request)
    """
    settings = get_settings()
    configure_logging(debug=settings.debug)

    identity_settings = get_identity_service_settings()
    _probe.identity_service_configured(
        api_base_url=identity_settings.api_base_url,
        saas_id=identity_settings.saas_id,
    )
    _probe.cors_configured(allowed_origins=get_cors_settings().allowed_origins)
    _probe.application_started(app_name=settings.app_name, version=__version__)

    yield

    try:
        await close_identity_service()
    except Exception as e:
        _probe.shutdown_cleanup_failed(resource="identity_service", error=e)

    try:
        await close_database_connections()
    except Exception as e:
        _probe.shutdown_cleanup_failed(resource="database", error=e)

    _probe.application_stopped()


def _describe_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request"


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests as 400 with a field-describing message."""
    detail = _describe_validation_error(exc)
    _request_probe.request_rejected(failure_detail=detail, error=exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail},
    )


def create_app() -> FastAPI:
    """Build the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()
    cors = get_cors_settings()

    application = FastAPI(
        title=settings.app_name,
        description="Tenant-scoped gateway in front of the SaaSus identity service",
        version=__version__,
        lifespan=gateway_lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=cors.allowed_origins,
        allow_credentials=True,
        allow_methods=cors.allowed_methods,
        allow_headers=cors.allowed_headers,
    )
    application.add_exception_handler(
        RequestValidationError, request_validation_exception_handler
    )

    application.include_router(auth_routes.router)
    application.include_router(tenancy_presentation.router)

    @application.get("/health")
    def health():
        """Basic health check endpoint."""
        return {"status": "ok"}

    return application


app = create_app()
