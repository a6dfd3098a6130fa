# jobly/main.py
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from jobly.core.config import settings
from jobly.core.logging_config import configure_logging
from jobly.middleware.request_logging import RequestLoggingMiddleware
from jobly.routers.health import router as health_router
from jobly.routers.root import router as root_router
from jobly.routers.auth import router as auth_router
from jobly.routers.companies import router as companies_router
from jobly.routers.jobs import router as jobs_router
from jobly.core.exception_handlers import (
    app_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from jobly.core import AppError

configure_logging()


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app() -> FastAPI:
    app = FastAPI(title=settings.PROJECT_NAME)

    app.add_middleware(RequestLoggingMiddleware)

    # ---- CORS (env-driven) ----
    # CORS_ALLOW_ORIGINS="http://localhost:3000,https://jobly.example.com"
    # If unset, default to localhost only.
    allow_origins = _split_csv(settings.CORS_ALLOW_ORIGINS) or ["http://localhost:3000"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(companies_router)
    app.include_router(jobs_router)

    return app


app = create_app()
