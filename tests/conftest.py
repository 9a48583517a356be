"""Shared pytest fixtures for houseledger tests."""

import os

os.environ.setdefault("LOG_TO_FILE", "false")

import anyio  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from houseledger.core.database import Base, enable_sqlite_pragmas, get_db  # noqa: E402
from houseledger.domain import registry  # noqa: F401,E402
from houseledger.domain.finance.models import Account, Bank  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture
def engine(tmp_path):
    """Async engine on a temporary SQLite file with the full schema."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'houseledger-test.db'}",
        poolclass=NullPool,
    )
    enable_sqlite_pragmas(test_engine)

    async def create_schema():
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    anyio.run(create_schema)
    yield test_engine
    anyio.run(test_engine.dispose)


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def run_db(session_factory):
    """Run ``func(session, *args)`` on a fresh session and return its result."""

    def run(func, *args):
        async def runner():
            async with session_factory() as session:
                return await func(session, *args)

        return anyio.run(runner)

    return run


@pytest.fixture
def make_account(run_db):
    """Create an account (and its bank) and return the account id."""

    def create(name="Checking", is_active=True, bank_name="Test Bank"):
        async def insert(session):
            bank = Bank(name=bank_name)
            account = Account(name=name, bank=bank, is_active=is_active)
            session.add_all([bank, account])
            await session.commit()
            return account.id

        return run_db(insert)

    return create


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the temporary database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
