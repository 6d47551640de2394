"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.product_app import __version__
from src.product_app.api.http.app_data import ApplicationDependencies
from src.product_app.api.http.routers.health import router as health_router
from src.product_app.api.http.routers.product import router as product_router
from src.product_app.api.utils.app_startup import configure_logging
from src.product_app.core.exceptions import ProductAppError, ValidationError
from src.product_app.core.services import DbManageService, DbSessionService
from src.product_app.runtime.config.config_data import ConfigData
from src.product_app.runtime.context import get_config

main_config = get_config()

configure_logging()


# --- Lifecycle hooks ---
async def startup(app: FastAPI) -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService(config)
    if config.database.create_tables:
        DbManageService(database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(database_service=database_service)


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


app = FastAPI(
    title="Product API",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if main_config.app.environment == "production" else "/docs",
    redoc_url=None if main_config.app.environment == "production" else "/redoc",
)

__all__ = ["app", "check_cors", "startup", "shutdown"]


# --- CORS configuration ---
def check_cors(config: ConfigData) -> None:
    """Reject a wildcard origin combined with credentials in production."""
    cors = config.app.cors
    if (
        config.app.environment == "production"
        and "*" in cors.origins
        and cors.allow_credentials
    ):
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )


check_cors(main_config)

app.add_middleware(
    CORSMiddleware,
    allow_origins=main_config.app.cors.origins,
    allow_credentials=main_config.app.cors.allow_credentials,
    allow_methods=main_config.app.cors.allow_methods,
    allow_headers=main_config.app.cors.allow_headers,
)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


def _error_response(request: Request, error: ProductAppError) -> JSONResponse:
    request_id = _request_id(request)
    return JSONResponse(
        status_code=error.status_code,
        content={
            "detail": error.detail,
            "error": error.error_code,
            "request_id": request_id,
        },
        headers={"X-Request-ID": request_id},
    )


# --- Error handlers ---
@app.exception_handler(ProductAppError)
async def handle_product_app_error(request: Request, exc: ProductAppError) -> JSONResponse:
    logger.bind(status_code=exc.status_code, error_type=type(exc).__name__).warning(
        "request.failed: {}", exc.detail
    )
    return _error_response(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    error = ValidationError(jsonable_encoder(exc.errors()))
    logger.bind(status_code=error.status_code, error_type=type(exc).__name__).info(
        "request.validation_error"
    )
    return _error_response(request, error)


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={
                    "detail": "Internal Server Error",
                    "error": "internal_error",
                    "request_id": request_id,
                },
                headers={"X-Request-ID": request_id},
            )


# --- Router registration ---
app.include_router(health_router)
app.include_router(product_router)
