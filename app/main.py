"""Transaction Validation Service API.

Validates transactions against a catalog of business rules (amount limit,
currency allow-list, counterparty completeness) and returns a pass/fail
verdict with per-rule detail.

Run with:
    python3 -m uvicorn app.main:app --host 0.0.0.0 --port 8081
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.observability import configure_logging, install_request_logging
from app.routes import health, rules, validation
from app.storage.memory import ResultStore
from app.validation.catalog import RuleCatalog, default_rules, load_rules_file
from app.validation.engine import ValidationService

logger = logging.getLogger(__name__)


def build_catalog(settings: Settings) -> RuleCatalog:
    """Load the rules file named in settings, or fall back to the defaults."""
    if settings.rules_file:
        return RuleCatalog(load_rules_file(settings.rules_file))
    return RuleCatalog(default_rules())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(
            level=settings.log_level,
            json_logs=settings.log_json,
            service=settings.service_name,
            environment=settings.environment,
        )

        catalog = build_catalog(settings)
        store = ResultStore(max_results=settings.max_stored_results)

        # Attach to app state for the route handlers
        app.state.settings = settings
        app.state.catalog = catalog
        app.state.validation_service = ValidationService(catalog=catalog, store=store)

        logger.info(
            "Starting validation service",
            extra={
                "port": settings.port,
                "env": settings.environment,
                "version": settings.service_version,
            },
        )
        yield
        logger.info("Validation service stopped")

    app = FastAPI(
        title="Transaction Validation Service",
        description=(
            "Validates transactions against business rules: amount limits, "
            "allowed currencies, and counterparty completeness."
        ),
        version=settings.service_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=[
            "Origin",
            "Content-Type",
            "Content-Length",
            "Accept-Encoding",
            "X-CSRF-Token",
            "Authorization",
            "Accept",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=12 * 60 * 60,
    )
    install_request_logging(app)

    # Mount all API routers
    app.include_router(health.router)
    app.include_router(validation.router)
    app.include_router(rules.router)

    return app


app = create_app()
