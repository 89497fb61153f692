# prompt_relay/main.py
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from prompt_relay.core.config import settings
from prompt_relay.core.logging_config import configure_logging
from prompt_relay.middleware.request_logging import log_requests
from prompt_relay.routers.forward import router as forward_router
from prompt_relay.routers.health import router as health_router
from prompt_relay.routers.root import router as root_router
from prompt_relay.core.exception_handlers import (
    app_error_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from prompt_relay.core import AppError

configure_logging()


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)

    app.middleware("http")(log_requests)

    # ---- CORS (env-driven) ----
    # CORS_ALLOW_ORIGINS="http://localhost:3000,https://yourapp.web.app"
    allow_origins = _split_csv(settings.CORS_ALLOW_ORIGINS)
    if not allow_origins:
        allow_origins = ["http://localhost:3000"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(forward_router)

    return app


app = create_app()
