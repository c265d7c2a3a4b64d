"""Solscribe API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {success: false, error: <message>}
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager
    - No state shared between requests

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py; main only registers them
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solscribe import __version__
from solscribe.api.error_handlers import register_error_handlers
from solscribe.api.routes import health, keypair, message, send, token
from solscribe.config import get_settings
from solscribe.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Solscribe API started (token_account_mode="
        f"{settings.token_account_mode.value}, "
        f"reject_zero_amounts={settings.reject_zero_amounts})",
    )
    yield
    logger.info("Solscribe API shutting down")


app = FastAPI(
    title="Solscribe API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(keypair.router)
app.include_router(token.router)
app.include_router(message.router)
app.include_router(send.router)

register_error_handlers(app)
