"""Application configuration and router setup."""

import logging
from contextlib import asynccontextmanager

import fastapi
from fastapi.middleware import cors
from fastapi.openapi.utils import get_openapi

from components.core import config, init_db
from restapi import errors
from restapi.endpoints import health_check, transactions, budgets, categories, insights

settings = config.get_settings()

TITLE = "Personal Finance Tracker"
DESCRIPTION = "Transactions, monthly budgets and spending insights"
VERSION = "1.0.0"


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    if settings.CREATE_TABLES:
        await init_db.db_manager.create_tables()
    yield
    await init_db.db_manager.dispose()


def create_app() -> fastapi.FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()

    app = fastapi.FastAPI(
        title=TITLE,
        description=DESCRIPTION,
        version=VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        cors.CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    errors.register_exception_handlers(app)

    # Include routers
    app.include_router(health_check.router)
    app.include_router(transactions.router)
    app.include_router(budgets.router)
    app.include_router(categories.router)
    app.include_router(insights.router)

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        openapi_schema = get_openapi(
            title=TITLE,
            version=VERSION,
            description=DESCRIPTION,
            routes=app.routes,
        )
        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi

    return app
