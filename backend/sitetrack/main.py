import time
import uuid

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sitetrack.core.config import settings
from sitetrack.core.errors import register_exception_handlers
from sitetrack.core.logging import configure_logging, logger
from sitetrack.api.router import api_router
from sitetrack.db.session import engine
from sitetrack.db.base import Base
from sitetrack.services.seed import seed_demo
import sitetrack.db.models  # noqa: F401


def _prepare_dev_database() -> None:
    # outside dev the schema is owned by the alembic migrations
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DEMO:
        seed_demo()


def create_app() -> FastAPI:
    configure_logging(settings.ENV, level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    app = FastAPI(title="SiteTrack", version="0.1.0")

    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request.headers.get("X-Request-ID") or str(uuid.uuid4()))
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            logger.info(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )

    @app.on_event("startup")
    def _startup():
        if settings.ENV == "dev":
            _prepare_dev_database()

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)
    logger.info("app_started", env=settings.ENV, api_prefix=settings.API_PREFIX)
    return app

app = create_app()
