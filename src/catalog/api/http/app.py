"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.routers import health, image, product, release
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.errors import CatalogError
from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.runtime.context import get_config


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        # HSTS only in prod
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    # Correlation / tracing
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

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

    # Everything that logs within this block inherits base_ctx
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
                content={"error": "Internal Server Error"},
                headers={"X-Request-ID": request_id},
            )


# --- Error translation ---
async def handle_catalog_error(request: Request, exc: CatalogError) -> JSONResponse:
    log = logger.bind(status_code=exc.status_code, error_type=type(exc).__name__)
    if exc.status_code >= 500:
        log.error("request.failed: {}", exc.message)
    else:
        log.info("request.rejected: {}", exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies answer 400 with the first pydantic complaint."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Malformed request: {location or 'body'}: {first.get('msg', 'invalid')}"
    else:
        message = "Malformed request"
    logger.bind(status_code=400, error_type=type(exc).__name__).info(
        "request.rejected: {}", message
    )
    return JSONResponse(status_code=400, content={"error": message})


def create_app(database_service: DbSessionService | None = None) -> FastAPI:
    """Build the catalog API.

    When ``database_service`` is given it is installed immediately and owned
    by the caller; otherwise one is created from the configuration on startup
    and disposed on shutdown.
    """
    config = get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = not hasattr(app.state, "app_dependencies")
        if owned:
            service = DbSessionService()
            DbManageService(service.engine).create_all()
            app.state.app_dependencies = ApplicationDependencies(
                database_service=service
            )
        logger.info("Starting up application in {} environment", config.app.environment)
        try:
            yield
        finally:
            logger.info("Shutting down application")
            if owned:
                app.state.app_dependencies.database_service.dispose()

    app = FastAPI(
        title="Release Catalog API",
        lifespan=lifespan,
        docs_url=None if config.app.environment == "production" else "/docs",
        redoc_url=None if config.app.environment == "production" else "/redoc",
    )

    if database_service is not None:
        app.state.app_dependencies = ApplicationDependencies(
            database_service=database_service
        )

    app.add_middleware(SecurityHeadersMiddleware)

    # --- CORS configuration ---
    if config.app.environment == "production" and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(CatalogError, handle_catalog_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    # --- Router registration ---
    app.include_router(health.router)
    app.include_router(product.router)
    app.include_router(release.router)
    app.include_router(release.index_router)
    app.include_router(image.router)

    return app


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    main_config = get_config()
    uvicorn.run(
        create_app(),
        host=main_config.app.host,
        port=main_config.app.port,
        access_log=False,  # We handle access logging in middleware
    )
