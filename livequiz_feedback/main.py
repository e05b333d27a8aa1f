"""LiveQuiz Feedback API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LiveQuizError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from livequiz_feedback.api.error_handlers import register_error_handlers
from livequiz_feedback.api.routes import feedback, health, quiz_responses
from livequiz_feedback.config import get_settings
from livequiz_feedback.infrastructure.database import init_db
from livequiz_feedback.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("LiveQuiz feedback API started")
    yield
    await manager.dispose()
    logger.info("LiveQuiz feedback API shutting down")


app = FastAPI(
    title="LiveQuiz Feedback API", version="0.1.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(feedback.router)
app.include_router(quiz_responses.router)

register_error_handlers(app)
