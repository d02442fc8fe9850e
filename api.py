"""
Fitness FastAPI Application

Main entry point for the fitness tracking API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Common library imports
from common.database import SQLDatabase, set_main_database
from common.utils import configure_logging

# App-specific imports
from fitness.config import Settings, settings
from fitness.database import init_database
from fitness.dependencies import init_all_services
from fitness.http import json_response
from fitness.middleware import LanguageMiddleware, SanitizedJSONResponse
from fitness.middleware.errors import register_exception_handlers

# Import routers
from fitness.routers import (
    auth_router,
    users_router,
    exercises_router,
    programs_router,
    user_exercises_router,
    i18n_router,
)

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings = settings) -> FastAPI:
    """
    Build the application.

    Args:
        app_settings: Settings to run with (tests pass their own)
    """
    configure_logging(app_settings.LOG_LEVEL, app_settings.LOG_DIR)

    # =========================================================================
    # Database Instance
    # =========================================================================
    main_db = SQLDatabase()

    # =========================================================================
    # Application Lifespan
    # =========================================================================
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Handles startup and shutdown tasks like database connections
        and service initialization.
        """
        # Startup
        logger.info(f"Starting {app_settings.APP_NAME}...")
        app_settings.validate_required()

        await main_db.connect(url=app_settings.DATABASE_URL, echo=app_settings.DATABASE_ECHO)
        set_main_database(main_db)
        await init_database(main_db)

        init_all_services(app_settings)
        logger.info(f"{app_settings.APP_NAME} started successfully!")

        yield

        # Shutdown
        logger.info(f"Shutting down {app_settings.APP_NAME}...")
        await main_db.disconnect()
        logger.info(f"{app_settings.APP_NAME} shut down complete.")

    # =========================================================================
    # FastAPI Application
    # =========================================================================
    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Fitness tracking API with localized responses",
        version=app_settings.APP_VERSION,
        lifespan=lifespan,
        default_response_class=SanitizedJSONResponse,
        docs_url="/docs" if app_settings.is_development() else None,
        redoc_url="/redoc" if app_settings.is_development() else None,
    )

    # =========================================================================
    # Middleware
    # =========================================================================
    app.add_middleware(LanguageMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.get_cors_origins(),
        allow_credentials=app_settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # =========================================================================
    # Include Routers
    # =========================================================================
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(exercises_router)
    app.include_router(programs_router)
    app.include_router(user_exercises_router)
    app.include_router(i18n_router)

    # =========================================================================
    # Health Check Endpoint
    # =========================================================================
    @app.get("/health", tags=["Health"])
    async def health(request: Request):
        """
        Health check endpoint.

        Returns the status of the API and the database connection.
        """
        database_ok = False
        if main_db.is_connected:
            try:
                async with main_db.engine.connect() as conn:
                    await conn.execute(text("SELECT 1"))
                database_ok = True
            except SQLAlchemyError as e:
                logger.warning(f"Health check database ping failed: {e}")

        return json_response(
            request,
            {
                "status": "ok",
                "version": app_settings.APP_VERSION,
                "database": database_ok,
            },
            "Service is running",
        )

    return app


app = create_app()


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
