"""
FastAPI application entry point for the Reminders API.

This module:
- Builds the FastAPI application (create_app) with middleware and routers
- Sets up structured logging with structlog
- Implements global exception handlers for the {"error": ...} envelope
- Owns the in-memory reminder store for the lifetime of the app

Run locally with:
    python -m src.main
"""

import logging
import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api.dependencies import ReminderRepositoryDep
from src.api.routes import reminder
from src.config import Settings, settings
from src.core.exceptions import ErrorCode, InvalidInputError, ReminderAPIError
from src.repositories.reminder_repository import ReminderRepository

WELCOME_MESSAGE = "Welcome to the Reminder Management API!"


def configure_logging(config: Settings = settings) -> None:
    """Configure structlog: ISO timestamps, level filtering, JSON or console output."""
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if config.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.log_level.upper())
        ),
    )
    logging.basicConfig(level=config.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: Settings = app.state.settings
    logger.info(
        "application_starting",
        service=config.app_name,
        version=config.app_version,
        environment=config.app_env,
        url=f"http://{config.server_host}:{config.server_port}",
    )

    yield

    # The store is discarded with the process; nothing is persisted.
    logger.info(
        "application_shutting_down",
        reminders_discarded=app.state.reminder_repository.count(),
    )


async def log_requests(request: Request, call_next):
    """Log every request with its status and processing time."""
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    response.headers["X-Process-Time"] = str(round(process_time, 3))
    return response


# ===== Global Exception Handlers =====


async def reminder_api_error_handler(request: Request, exc: ReminderAPIError):
    """Convert domain errors to their status code and {"error": message}."""
    logger.warning(
        "reminder_api_error",
        error_code=exc.error_code.value,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        method=request.method,
        path=request.url.path
    )

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Handle body validation failures as 400 Bad Request.

    Common causes:
    - Missing required fields or an empty/missing body
    - Wrong field types (isCompleted must be a real boolean)
    - dueDate that is not ISO-8601
    """
    error = InvalidInputError()
    logger.warning(
        "validation_error",
        error_code=error.error_code.value,
        errors=[{"loc": e.get("loc"), "type": e.get("type")} for e in exc.errors()],
        path=request.url.path
    )

    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all handler: log the traceback, return a safe 500."""
    logger.exception(
        "unexpected_error",
        error_code=ErrorCode.INTERNAL_ERROR.value,
        error_type=type(exc).__name__,
        path=request.url.path
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error"}
    )


def create_app(
    repository: ReminderRepository | None = None,
    config: Settings = settings,
) -> FastAPI:
    """
    Build the application with its own reminder store.

    Args:
        repository: Store to serve from; a fresh empty one when omitted
        config: Settings used for CORS, logging context and health output
    """
    app = FastAPI(
        title=config.app_name,
        description="In-memory reminder tracking service",
        version=config.app_version,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.reminder_repository = repository if repository is not None else ReminderRepository()

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_methods=["GET", "POST", "PATCH", "DELETE"],
            allow_headers=["*"],
        )
    app.middleware("http")(log_requests)

    app.add_exception_handler(ReminderAPIError, reminder_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return WELCOME_MESSAGE

    @app.get("/health")
    async def health(repository: ReminderRepositoryDep):
        """Health check for load balancers and uptime monitors."""
        return {
            "status": "healthy",
            "environment": config.app_env,
            "version": config.app_version,
            "reminders": repository.count(),
            "timestamp": int(time.time())
        }

    app.include_router(reminder.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level,
    )
