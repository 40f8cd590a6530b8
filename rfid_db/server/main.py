"""
Main Application Entry Point.

This module builds the FastAPI application, wires the exception handlers and
includes all API routers. The database engine (the connection pool) is opened
in the lifespan and closed on shutdown.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from rfid_db.core.database import (
    check_connection,
    close_database,
    create_all,
    open_database,
)
from rfid_db.core.logging_config import get_logger, setup_logging

from .api.v1 import access_log, health, root, users, weapons
from .core import constant
from .core.config import Settings, settings
from .exception_handlers import setup_exception_handlers

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Opens the connection pool on startup and disposes it on shutdown. A failed
    connectivity check is logged and does not stop the server; requests will
    simply fail with a server error until the database is reachable.
    """
    app_settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting up {constant.PROJECT_NAME}...")
    database = open_database(
        app_settings.database_url,
        pool_size=app_settings.pool_size,
        max_overflow=app_settings.max_overflow,
    )
    app.state.database = database

    try:
        if app_settings.create_tables:
            await create_all(database.engine)
            logger.info("Database tables created")
        now = await check_connection(database.engine)
        logger.info(f"Connected to database at: {now}")
    except Exception as e:
        logger.error(f"Database connectivity check failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info(f"Shutting down {constant.PROJECT_NAME}...")
    await close_database(database)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use; the environment-derived settings by default

    Returns:
        The configured application
    """
    app_settings = app_settings or settings

    application = FastAPI(
        title=constant.PROJECT_NAME,
        description="""
        RFID Database Application API

        Records users, the weapons issued to them and an access log, each
        identified by an RFID tag number.
        """,
        version=constant.VERSION,
        lifespan=lifespan,
    )
    application.state.settings = app_settings
    application.state.expose_error_kind = app_settings.expose_error_kind

    setup_exception_handlers(application)

    application.include_router(root.router, tags=["root"])
    application.include_router(health.router, tags=["health"])
    application.include_router(users.router, prefix="/users")
    application.include_router(weapons.router, prefix="/weapons")
    application.include_router(access_log.router, prefix="/access_log")

    return application


app = create_app()
