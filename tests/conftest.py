"""
Customer Service - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── dummy_customers: Two sample Customer records
    ├── mock_db_session: Mock AsyncSession (no real DB needed)
    ├── mock_repository / mock_usecase: AsyncMocks of the layer interfaces
    ├── test_client: HTTPX AsyncClient with the use case mocked out
    ├── sqlite_engine / sqlite_session_factory: In-memory SQLite with the
    │   customer table created
    └── sqlite_client: HTTPX AsyncClient over the full stack on SQLite
"""

import os

# Settings come from the environment; keep tests off any real database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from customer_service.config import Settings
from customer_service.database import Base, build_engine, build_session_factory
from customer_service.main import create_app
from customer_service.models.customer import CustomerRow  # noqa: F401
from customer_service.repositories.customer_repository import CustomerRepository
from customer_service.routes.customer import get_customer_usecase
from customer_service.schemas.customer import Customer
from customer_service.services.customer_usecase import CustomerUseCase

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def dummy_customers():
    return [
        Customer(id="C001", name="Dummy Name 1", address="Dummy Address 1"),
        Customer(id="C002", name="Dummy Name 2", address="Dummy Address 2"),
    ]


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
        result = await CustomerDbRepository(mock_db_session).find_by_id("C001")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def mock_repository():
    return AsyncMock(spec=CustomerRepository)


@pytest.fixture
def mock_usecase():
    return AsyncMock(spec=CustomerUseCase)


@pytest.fixture
def test_settings():
    return Settings(database_url=SQLITE_MEMORY_URL, log_level="WARNING")


@pytest_asyncio.fixture
async def test_client(test_settings, mock_usecase):
    """
    HTTPX AsyncClient talking to the app with the use case replaced by
    `mock_usecase`. No database statement is ever issued.
    """
    app = create_app(test_settings)
    app.dependency_overrides[get_customer_usecase] = lambda: mock_usecase
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def sqlite_engine(test_settings):
    """In-memory SQLite engine with the customer table created."""
    engine = build_engine(test_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def sqlite_session_factory(sqlite_engine):
    return build_session_factory(sqlite_engine)


@pytest_asyncio.fixture
async def sqlite_client(test_settings):
    """HTTPX AsyncClient over the full stack (routes → use case → repository → SQLite)."""
    app = create_app(test_settings)
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await app.state.engine.dispose()
