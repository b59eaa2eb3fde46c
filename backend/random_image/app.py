"""
Random Image Application

FastAPI application factory. Serverless entrypoints (see api/index.py)
import the module-level `app`.
"""

import os
import logging
from fastapi import FastAPI

from .exceptions import register_exception_handlers
from .routes_fastapi import router


def setup_logging() -> None:
    """Configure root logging from LOG_LEVEL (default INFO)."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app() -> FastAPI:
    """Build the FastAPI app serving /api/random."""
    setup_logging()

    app = FastAPI(
        title="Random Image API",
        description="Serves one random Unsplash photo as a small JSON payload",
        version="1.0.0",
    )
    register_exception_handlers(app)
    app.include_router(router)
    return app


app = create_app()
