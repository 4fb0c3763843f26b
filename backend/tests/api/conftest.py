"""API test fixtures — FastAPI test client over an injected Store.

Invariants:
    - get_store overridden: the lifespan never runs, no real database is opened
    - get_settings overridden per test through the `settings` fixture
    - Overrides cleared after every test

Design Decisions:
    - `client` runs against both Store backends (via the `store` fixture)
    - FailingStore raises DatabaseQueryError everywhere, to exercise the 422 path
"""

import pytest
from httpx import ASGITransport, AsyncClient

from qa_api.api.dependencies import get_store
from qa_api.config import Settings, get_settings
from qa_api.core.errors import DatabaseQueryError
from qa_api.main import app


class FailingStore:
    """Store whose backing database rejects every operation."""

    async def get_questions(self, limit=None, offset=0):
        raise DatabaseQueryError("query")

    async def add_question(self, new_question):
        raise DatabaseQueryError("commit")

    async def update_question(self, question, question_id):
        raise DatabaseQueryError("commit")

    async def delete_question(self, question_id):
        raise DatabaseQueryError("commit")

    async def add_answer(self, new_answer):
        raise DatabaseQueryError("commit")

    async def health_check(self):
        return False

    async def close(self):
        return None


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
async def make_client(settings):
    """Factory: build a test client around any Store."""
    clients = []

    async def _make(store) -> AsyncClient:
        app.dependency_overrides[get_store] = lambda: store
        app.dependency_overrides[get_settings] = lambda: settings
        c = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(c)
        return c

    yield _make

    for c in clients:
        await c.aclose()
    app.dependency_overrides.clear()


@pytest.fixture
async def client(make_client, store):
    return await make_client(store)


@pytest.fixture
async def failing_client(make_client):
    return await make_client(FailingStore())
