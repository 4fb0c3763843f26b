"""Questions & Answers API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The Store is built once in the lifespan and owned by the app (app.state.store)
    - An unreachable backing store aborts startup (StartupError)
    - Every rejection goes through the Response Mapper (api/error_handlers.py)
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Request context middleware added last so it wraps CORS and sees every response
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from qa_api.api.cors import MappedCORSMiddleware
from qa_api.api.error_handlers import register_error_handlers
from qa_api.api.request_context import RequestContextMiddleware
from qa_api.api.routes import answers, health, questions
from qa_api.config import get_settings
from qa_api.infrastructure.observability import setup_logging
from qa_api.infrastructure.store_factory import open_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.logger_levels)
    app.state.store = await open_store(settings)
    logger.info("Questions & Answers API started")
    try:
        yield
    finally:
        logger.info("Questions & Answers API shutting down")
        await app.state.store.close()


def create_app() -> FastAPI:
    """Build the application: middleware, error handlers, routes."""
    settings = get_settings()
    app = FastAPI(
        title="Questions & Answers API", version="1.0.0", lifespan=lifespan,
    )

    app.add_middleware(
        MappedCORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )
    app.add_middleware(RequestContextMiddleware)

    register_error_handlers(app)

    app.include_router(questions.router)
    app.include_router(answers.router)
    app.include_router(health.router)
    return app


app = create_app()
