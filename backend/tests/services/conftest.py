"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - db_manager patched so get_db, the auth middleware and the readiness check
      all share the test engine
    - Seeded account "cucumber" with admin and alice roles available on demand

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - make_client builds apps from explicit Settings (soft error mode, dev disabled)
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from httpx import ASGITransport, AsyncClient

from devgate.config import Settings
from devgate.core.domain_types import Identity
from devgate.db.base import Base
from devgate.db.session import create_session_factory
from devgate.infrastructure.database import DatabaseSessionManager
from devgate.main import app, create_app
from devgate.services.accounts import AccountService
from devgate.services.roles import RoleService
import devgate.infrastructure.database as db_module
import devgate.models  # noqa: F401


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
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_db_manager(test_engine, test_session_factory, monkeypatch):
    """Point the process-wide db_manager at the test engine."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    monkeypatch.setattr(db_module, "db_manager", fake_manager)
    return fake_manager


@pytest.fixture
async def make_client(test_db_manager):
    """Factory: AsyncClient over an app built from Settings overrides."""
    clients = []

    async def _make(**overrides) -> AsyncClient:
        target = create_app(Settings(**overrides)) if overrides else app
        c = AsyncClient(
            transport=ASGITransport(app=target), base_url="http://test",
        )
        clients.append(c)
        return c

    yield _make
    for c in clients:
        await c.aclose()


@pytest.fixture
async def client(make_client):
    """FastAPI test client for the default app."""
    return await make_client()


@pytest.fixture
async def cucumber(test_db):
    """Account "cucumber" — returns {"id", "api_key"} for its admin role."""
    return await AccountService(test_db).create_account(Identity.root(), "cucumber")


@pytest.fixture
async def alice(test_db, cucumber):
    """Non-admin role cucumber:user:alice."""
    return await RoleService(test_db).create_role(
        Identity.account_admin("cucumber"), "cucumber:user:alice",
    )
