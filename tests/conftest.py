from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from movie_catalog.app import app
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.config.dependencies import get_dispatcher
from movie_catalog.infrastructure.persistence.database import Database
from movie_catalog.infrastructure.persistence.models import table_registry
from movie_catalog.presentation.dispatcher import RequestDispatcher

TEST_DATABASE_URL = "sqlite+aiosqlite://"


class FakeDatabase:
    """Stands in for ``Database`` when the repository is mocked."""

    def __init__(self):
        self.sessions_opened = 0

    @asynccontextmanager
    async def session(self):
        self.sessions_opened += 1
        yield MagicMock()

    async def dispose(self):
        pass


@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for use case testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def fake_database():
    return FakeDatabase()


@pytest.fixture
def mocked_dispatcher(fake_database, mock_movie_repository):
    """Dispatcher wired to the mocked repository"""
    return RequestDispatcher(fake_database, repository_factory=lambda session: mock_movie_repository)


class BaseIntegrationTest:
    """Base class for integration tests with common setup"""

    @pytest_asyncio.fixture
    async def database(self):
        """In-memory database shared by every session of one test"""
        database = Database(TEST_DATABASE_URL, poolclass=StaticPool, connect_args={"check_same_thread": False})

        async with database.engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield database

        async with database.engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await database.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, database):
        async with database.session() as session:
            yield session

    @pytest.fixture
    def dispatcher(self, database):
        return RequestDispatcher(database)

    @pytest_asyncio.fixture
    async def client(self, dispatcher):
        """Create test HTTP client with the dispatcher override"""
        app.dependency_overrides[get_dispatcher] = lambda: dispatcher

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()
