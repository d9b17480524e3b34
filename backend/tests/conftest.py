"""
Pytest fixtures for test database, client, and authentication.

Runs against a throwaway SQLite database (aiosqlite). Tables are created
before and dropped after every test for isolation.
"""

import os
from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from hotel_booking.main import app
from hotel_booking.db.base import Base
from hotel_booking.db.session import get_db
from hotel_booking.models import User
from tests import factories

TEST_DATABASE_URL = os.environ.get(
    "TEST_DATABASE_URL", "sqlite+aiosqlite:///./hotel_booking_test.db"
)

# NullPool: every test runs on its own event loop, so connections are not reused
test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)
TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield session, then drop tables for isolation."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    return await factories.create_user(db_session, email="test@example.com", password="testpassword123")


@pytest_asyncio.fixture
async def auth_headers(db_session: AsyncSession, test_user: User) -> dict:
    """Bearer header for test_user, backed by a stored session."""
    token = await factories.create_session_token(db_session, test_user)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def eligible_user(db_session: AsyncSession, test_user: User) -> User:
    """test_user with an enrollment and a paid, in-person, hotel ticket."""
    enrollment = await factories.create_enrollment(db_session, test_user)
    ticket_type = await factories.create_ticket_type(db_session, is_remote=False, includes_hotel=True)
    await factories.create_ticket(db_session, enrollment, ticket_type, paid=True)
    return test_user


@pytest_asyncio.fixture
async def hotel(db_session: AsyncSession):
    return await factories.create_hotel(db_session)
