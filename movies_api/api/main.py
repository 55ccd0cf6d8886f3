"""
FastAPI application entry point for the Movies API.
"""

import logging
from typing import Iterable, Optional

import uvicorn
from fastapi import FastAPI

from movies_api.api.config import (
    get_allowed_origins,
    get_api_host,
    get_api_port,
    get_log_file,
    get_log_level,
    get_seed_path,
)
from movies_api.api.cors import CorsGate, install_cors_gate
from movies_api.api.errors import register_exception_handlers
from movies_api.api.routers import movies
from movies_api.store.movie_store import MovieStore
from movies_api.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[MovieStore] = None,
    allowed_origins: Optional[Iterable[str]] = None,
) -> FastAPI:
    """
    Build the application around a movie store.

    Args:
        store: Store to serve; defaults to one loaded from the seed dataset
        allowed_origins: CORS allow-list; defaults to the configured origins

    Returns:
        Configured FastAPI app with the store on ``app.state.store``
    """
    if store is None:
        store = MovieStore.from_seed(get_seed_path())
    if allowed_origins is None:
        allowed_origins = get_allowed_origins()

    app = FastAPI(
        title="Movies API",
        description="REST API for a catalogue of movies",
        version="1.0.0",
    )
    app.state.store = store

    install_cors_gate(app, CorsGate(allowed_origins))
    register_exception_handlers(app)
    app.include_router(movies.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {"message": "Movies API", "docs": "/docs"}

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    setup_logging(log_file=get_log_file(), level=get_log_level())
    host, port = get_api_host(), get_api_port()
    logger.info("Server running on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
