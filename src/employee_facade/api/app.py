"""
employee_facade.api.app

FastAPI app factory for the Employee Facade service.

Responsibilities:
- Build the FastAPI application and register routers, middleware and error handlers.
- Own the lifetime of the pooled upstream `httpx.AsyncClient`.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from employee_facade import __version__
from employee_facade.api.error_handlers import register_error_handlers
from employee_facade.api.routers.employees import router as employees_router
from employee_facade.api.routers.health import router as health_router
from employee_facade.observability.logging import configure_logging, get_logger
from employee_facade.observability.middleware import RequestContextMiddleware
from employee_facade.settings import Settings
from employee_facade.upstream.retry import RetryPolicy

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info(
            "startup",
            env=settings.env,
            upstream=settings.upstream_base_url,
            retry_worst_case_wait_ms=RetryPolicy.from_settings(settings).worst_case_wait_ms(),
        )
        # One pooled client per process; the gateway borrows it per request.
        app.state.upstream_http = httpx.AsyncClient(timeout=settings.upstream_timeout_seconds)
        try:
            yield
        finally:
            await app.state.upstream_http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Employee Facade",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(employees_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Business logic stays in the gateway; this file only composes the app.
