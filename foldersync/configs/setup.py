from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse
from starlette import status
from foldersync.schemas.response import ApiError, ErrorDetail, HealthCheck
from foldersync.configs.settings import settings
from foldersync.core.exceptions import AppError
from foldersync.utils import setup_logging, get_logger
from foldersync.middlewares import init_sentry
from foldersync.databases import mongodb
from foldersync.models import DOCUMENT_MODELS
from foldersync.api import folder_router, file_router, device_router

logger = get_logger(__name__)

API_VERSION = "1.0.0"


async def _setup_logging() -> None:
    """Setup application logging configuration"""
    setup_logging(
        level="DEBUG" if settings.APP_DEBUG else "INFO",
        app_name=settings.APP_NAME,
        enable_json=settings.APP_ENV == "prod",
        log_file="logs/app.log" if settings.APP_ENV == "prod" else None
    )
    logger.info("Logging configuration initialized")


async def _setup_sentry() -> None:
    """Setup Sentry monitoring for production environment"""
    if not settings.SENTRY_DSN:
        logger.warning("Sentry DSN not configured - monitoring disabled")
        return

    if settings.APP_ENV != "prod":
        logger.info("Sentry monitoring disabled - not in production environment")
        return

    try:
        init_sentry(
            dsn=settings.SENTRY_DSN,
            environment=settings.APP_ENV,
            release=settings.RELEASE,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
            send_default_pii=settings.SENTRY_SEND_DEFAULT_PII
        )
        logger.info("Sentry monitoring initialized for production environment")
    except Exception as e:
        # Monitoring is optional; the API still serves without it
        logger.error(f"Failed to initialize Sentry: {str(e)}")


async def _setup_databases() -> None:
    """Initialize MongoDB and Beanie"""
    try:
        await mongodb.connect(document_models=DOCUMENT_MODELS)
        logger.info("MongoDB connection established successfully")
    except Exception as e:
        logger.error(f"Failed to initialize MongoDB: {str(e)}")
        raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager"""
    logger.info(f"Starting {settings.APP_NAME} application...")

    try:
        await _setup_logging()
        await _setup_sentry()
        await _setup_databases()

        logger.info("Application startup completed successfully")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {str(e)}")
        raise
    finally:
        logger.info(f"Shutting down {settings.APP_NAME} application...")
        await mongodb.disconnect()
        logger.info("Application shutdown completed successfully")


async def _handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    """Handle custom application errors"""
    errors = list(exc.errors or [])
    if exc.field:
        errors.append({
            "code": exc.code,
            "message": exc.message,
            "field": exc.field
        })

    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")

    body = ApiError(
        success=False,
        message=exc.message,
        code=exc.code,
        errors=[ErrorDetail(**e) for e in errors] or None
    ).model_dump(mode="json", exclude_none=True)

    return JSONResponse(content=body, status_code=exc.status_code)


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions from Starlette"""
    body = ApiError(
        success=False,
        message=str(exc.detail)
    ).model_dump(mode="json", exclude_none=True)

    return JSONResponse(content=body, status_code=exc.status_code)


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors"""
    errors = []
    for error in exc.errors():
        location = ".".join(
            str(x) for x in error.get("loc", [])
            if x not in ("body",)
        )
        errors.append({
            "code": error.get("type", "validation_error"),
            "message": error.get("msg", ""),
            "field": location or None
        })

    body = ApiError(
        success=False,
        message="Validation error",
        code="invalid_input",
        errors=[ErrorDetail(**e) for e in errors]
    ).model_dump(mode="json", exclude_none=True)

    return JSONResponse(
        content=body,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
    )


def install_cors_middleware(app: FastAPI) -> None:
    """Install CORS middleware for the application"""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
        expose_headers=settings.CORS_EXPOSE_HEADERS,
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Install all exception handlers for the application"""
    app.exception_handler(AppError)(_handle_app_error)
    app.exception_handler(StarletteHTTPException)(_handle_http_exception)
    app.exception_handler(RequestValidationError)(_handle_validation_error)

    logger.info("Exception handlers installed successfully")


def _create_api_prefix(endpoint_name: str) -> str:
    """Create API prefix for router endpoints"""
    return f"/api/v1/{endpoint_name}"


def include_routers(app: FastAPI) -> None:
    """Include all API routers with proper configuration"""
    routers_config = [
        (folder_router, "folders"),
        (file_router, "files"),
        (device_router, "devices"),
    ]

    for router, prefix_name in routers_config:
        app.include_router(
            router,
            prefix=_create_api_prefix(prefix_name)
        )

    @app.get("/health", response_model=HealthCheck, include_in_schema=False)
    async def health():
        return HealthCheck(status="healthy", version=API_VERSION)

    logger.info(f"Included {len(routers_config)} API routers successfully")


def create_app(use_lifespan: bool = True) -> FastAPI:
    """Create and configure FastAPI application with all components"""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Folder hierarchy backend for the file organizer extension",
        version=API_VERSION,
        debug=settings.APP_DEBUG,
        lifespan=lifespan if use_lifespan else None,
        docs_url="/docs" if settings.APP_DEBUG else None,
        redoc_url="/redoc" if settings.APP_DEBUG else None,
    )

    install_cors_middleware(app)
    install_exception_handlers(app)
    include_routers(app)

    logger.info("FastAPI application created and configured successfully")
    return app
