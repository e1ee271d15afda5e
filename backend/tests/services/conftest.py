"""Service test fixtures — async DB, seeded rows, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - Each client gets a fresh RenderedViewCache (no cached list view leaks between tests)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for single-statement writes
    - Seeded users carry real argon2 hashes so sign-in runs the production verify path
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from invoicing.db.base import Base
from invoicing.infrastructure.database import get_db
from invoicing.infrastructure.identity_provider import hash_password
from invoicing.infrastructure.view_cache import RenderedViewCache
from invoicing.models import Customer, User
from invoicing.main import app

USER_EMAIL = "user@nextmail.com"
USER_PASSWORD = "123456"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def view_cache():
    return RenderedViewCache()


@pytest.fixture
async def client(test_session_factory, view_cache):
    """FastAPI test client with DB dependency and view cache overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_cache = app.state.view_cache
    app.state.view_cache = view_cache

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.view_cache = original_cache


@pytest.fixture
async def seed_customer(test_db):
    customer = Customer(name="Evil Rabbit", email="evil@rabbit.com")
    test_db.add(customer)
    await test_db.commit()
    await test_db.refresh(customer)
    return customer


@pytest.fixture
async def seed_user(test_db):
    user = User(
        name="User", email=USER_EMAIL, password=hash_password(USER_PASSWORD),
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user
