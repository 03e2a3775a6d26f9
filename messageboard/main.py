"""
Messageboard FastAPI application.

Serves a read-only view of users and the messages they own. The database
handle is created once per process in the lifespan and injected into the
routes; data-access failures are translated to responses in one place
(see ``errors.register_exception_handlers``).
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from loguru import logger

from messageboard.config import Settings, configure_logging, get_settings
from messageboard.database import Database
from messageboard.errors import register_exception_handlers
from messageboard.routes.user import router as user_router


def create_app(
    settings: Optional[Settings] = None, database: Optional[Database] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: explicit settings; read from the environment when omitted
        database: an already built Database; one is created from
            ``settings.database_url`` at startup when omitted
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        configure_logging(settings.log_level)
        logger.info(f"Starting {settings.app_name}")

        # an injected database belongs to the caller and outlives the app
        owned = database is None
        db = database or Database(settings.database_url, echo=settings.database_echo)
        logger.info(f"Database: {db.display_url}")
        if settings.create_tables:
            logger.info("Creating tables")
            db.create_all()
        app.state.database = db

        yield

        # Shutdown
        logger.info("Shutting down gracefully...")
        if owned:
            db.dispose()
        logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        version=settings.api_version,
        lifespan=lifespan,
    )
    register_exception_handlers(app)

    app.include_router(user_router, prefix=settings.users_prefix, tags=["Users"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.api_version,
        }

    return app


app = create_app()


def run():
    settings = get_settings()
    uvicorn.run(
        "messageboard.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
