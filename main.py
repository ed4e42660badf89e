"""
DailyDiet FastAPI Application
Main entry point: application factory, lifespan, middleware and routers
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import users, meals, health
from api.identity import HeaderIdentityResolver, IdentityResolver
from domain.models import Database
from app.config import settings, Settings

from api.middleware import (
    RequestLoggingMiddleware,
    unauthorized_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler,
)
from app.exceptions import UnauthorizedError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("dailydiet.main")


async def open_database(config: Settings) -> Database:
    """
    Build the store and create its schema, retrying while the server comes up.
    """
    database = Database(config.database_url, echo=config.db_echo)

    for attempt in range(1, config.db_init_attempts + 1):
        try:
            # Run blocking DDL in a thread to avoid blocking the event loop
            await anyio.to_thread.run_sync(database.create_schema)
            _logger.info("Database initialization succeeded")
            return database
        except Exception as exc:
            _logger.warning(
                "Database init attempt %d/%d failed: %s",
                attempt,
                config.db_init_attempts,
                exc,
            )
            if attempt < config.db_init_attempts:
                await anyio.sleep(config.db_init_delay_sec)
            else:
                _logger.error(
                    "Database initialization failed after %d attempts", attempt
                )
                database.dispose()
                raise


def create_app(
    config: Optional[Settings] = None,
    identity_resolver: Optional[IdentityResolver] = None,
) -> FastAPI:
    """Assemble the application around one store and one identity resolver."""
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _logger.info(f"Starting {config.app_name} in {config.environment.value} mode")
        app.state.database = await open_database(config)

        try:
            yield
        finally:
            _logger.info(f"Shutting down {config.app_name}")
            app.state.database.dispose()

    app = FastAPI(
        title=config.api_title,
        version=config.app_version,
        description=config.api_description,
        lifespan=lifespan,
        debug=config.debug,
        openapi_url=(
            f"{config.api_prefix}/openapi.json" if not config.is_production() else None
        ),
        docs_url=f"{config.api_prefix}/docs" if not config.is_production() else None,
        redoc_url=f"{config.api_prefix}/redoc" if not config.is_production() else None,
    )
    app.state.settings = config
    app.state.identity_resolver = identity_resolver or HeaderIdentityResolver(
        config.identity_header
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=config.cors_allow_credentials,
        allow_methods=config.cors_allow_methods,
        allow_headers=config.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(UnauthorizedError, unauthorized_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(users.router, prefix=config.api_prefix)
    app.include_router(meals.router, prefix=config.api_prefix)
    app.include_router(health.router, prefix=config.api_prefix)

    return app


app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
