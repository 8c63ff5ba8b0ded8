"""
main.py
-------
Entry point for the student records API.

Responsibilities:
    - Build the FastAPI application around an injectable DatabaseGateway.
    - Initialize the connection pool and schema on startup (the service
      starts even if this fails, and reports unready on /health).
    - Drain and close the pool on shutdown.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import HOST, PORT
from db.connection import DatabaseGateway
from handlers.errors import register_exception_handlers
from handlers.health_handler import router as health_router
from handlers.student_handler import router as student_router
from utils.logger import get_logger

logger = get_logger(__name__)


def create_app(gateway: Optional[DatabaseGateway] = None) -> FastAPI:
    """
    Build the application.

    Args:
        gateway: Database gateway to use; a default one built from
                 config is created when omitted.

    Returns:
        A configured FastAPI instance.
    """
    gateway = gateway if gateway is not None else DatabaseGateway()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ── 1. Database setup ─────────────────────────────
        logger.info("Initializing database...")
        if not gateway.initialize():
            logger.warning("Starting without a ready database; data requests will return 503.")
        yield
        # ── 2. Cleanup on shutdown ────────────────────────
        gateway.close()
        logger.info("Student API stopped.")

    app = FastAPI(title="Student Records API", version="1.0.0", lifespan=lifespan)
    app.state.gateway = gateway

    # The browser client is served from a different origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(student_router)
    return app


def main() -> None:
    """Run the API with uvicorn."""
    logger.info(f"Server running on port {PORT}")
    # log_config=None keeps the handlers set up by utils.logger.
    uvicorn.run(create_app(), host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    main()
