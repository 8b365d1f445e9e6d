"""
FastAPI application entry point for the Movie Master Pro API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import config
from app.api.errors import register_exception_handlers
from app.api.routers import users, movies, reviews, watchlist, system
from app.core.identity import IdentityVerifier, build_identity_verifier
from app.database.connection import DocumentStore
from app.database.init_db import ensure_indexes
from app.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Build the shared store and identity verifier once at startup.

    Anything injected through create_app() is kept as is; only missing
    collaborators are built from configuration.
    """
    owns_store = app.state.store is None
    if owns_store:
        setup_logging(
            log_file=config.get_log_file(),
            level=config.get_log_level(),
            log_dir=config.get_log_dir(),
        )
        app.state.store = DocumentStore(
            uri=config.get_mongodb_uri(),
            db_name=config.get_database_name(),
            timeout_ms=config.get_mongodb_timeout_ms(),
        )
        logger.info("Connected to MongoDB database '%s'", app.state.store.db_name)
    if app.state.verifier is None:
        app.state.verifier = build_identity_verifier(config.get_firebase_service_key())

    ensure_indexes(app.state.store)

    yield

    if owns_store:
        app.state.store.close()
        app.state.store = None
        logger.info("MongoDB connection closed")


def create_app(
    store: Optional[DocumentStore] = None,
    verifier: Optional[IdentityVerifier] = None,
) -> FastAPI:
    """
    Application factory.

    Args:
        store: Pre-built document store (built from config at startup if None)
        verifier: Pre-built identity verifier (built from config if None)

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Movie Master Pro API",
        description="REST API for movies, reviews, and watchlists",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.verifier = verifier

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(system.router)
    app.include_router(users.router)
    app.include_router(movies.router)
    app.include_router(reviews.router)
    app.include_router(watchlist.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.api.main:app",
        host=config.get_api_host(),
        port=config.get_api_port(),
        log_level=config.get_log_level().lower(),
    )
