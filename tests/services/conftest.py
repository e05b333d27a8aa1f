"""Service test fixtures — async SQLite DB, SQL-backed services, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db_manager dependency overridden to use the test DB
    - db_manager singleton patched for the readiness probe

Design Decisions:
    - StaticPool: every session shares the single in-memory connection
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import livequiz_feedback.infrastructure.database as db_module
import livequiz_feedback.models  # noqa: F401
from livequiz_feedback.db.base import Base
from livequiz_feedback.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from livequiz_feedback.infrastructure.sql_repository import (
    SqlFeedbackRepository, SqlQuizResponseRepository,
)
from livequiz_feedback.main import app
from livequiz_feedback.services.feedback_service import FeedbackService
from livequiz_feedback.services.quiz_response_service import QuizResponseService


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def feedback_repository(test_db_manager):
    return SqlFeedbackRepository(test_db_manager)


@pytest.fixture
def response_repository(test_db_manager):
    return SqlQuizResponseRepository(test_db_manager)


@pytest.fixture
def feedback_service(feedback_repository):
    return FeedbackService(feedback_repository)


@pytest.fixture
def response_service(response_repository):
    return QuizResponseService(response_repository)


@pytest.fixture
async def client(test_db_manager):
    """FastAPI test client with DB dependency overridden."""
    app.dependency_overrides[get_db_manager] = lambda: test_db_manager

    original_manager = db_module.db_manager
    db_module.db_manager = test_db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
