"""Invoicing API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InvoicingError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
    - One RenderedViewCache per app instance (app.state.view_cache)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoicing.api.error_handlers import register_error_handlers
from invoicing.api.routes import auth, health, invoices
from invoicing.config import get_settings
from invoicing.infrastructure.database import close_db, init_db
from invoicing.infrastructure.observability import setup_logging
from invoicing.infrastructure.view_cache import RenderedViewCache

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Invoicing API started")
    yield
    await close_db()
    logger.info("Invoicing API shutting down")


app = FastAPI(
    title="Invoicing API", version="1.0.0", lifespan=lifespan,
)
app.state.view_cache = RenderedViewCache()

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(invoices.router)
app.include_router(auth.router)

register_error_handlers(app)
