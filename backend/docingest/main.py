# docingest/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docingest.core import AppError
from docingest.core.config import settings
from docingest.core.exception_handlers import app_error_handler, unhandled_exception_handler
from docingest.core.logging_config import configure_logging
from docingest.middleware.request_logging import RequestLoggingMiddleware
from docingest.routers.extraction import router as extraction_router
from docingest.routers.health import router as health_router
from docingest.routers.llm_health import router as llm_health_router
from docingest.routers.root import router as root_router

configure_logging()


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)

    app.add_middleware(RequestLoggingMiddleware)

    # ---- CORS (env-driven) ----
    # CORS_ALLOW_ORIGINS="http://localhost:3000,https://yourapp.example.com"
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
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(llm_health_router)
    app.include_router(extraction_router)

    return app


app = create_app()
