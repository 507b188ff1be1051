# ruff: noqa: E402
# IMPORTANT:
# 1) Set environment variables (DATABASE_URL etc.) first, then import application modules.
# 2) anyio_backend must be session-scoped to avoid ScopeMismatch.

from collections.abc import AsyncGenerator
import os
import tempfile

from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool


# --- Early test environment setup ---
# Must run before any application import: settings are read at import time.
def _setup_test_environment() -> str:
    """Sets up environment variables for tests and returns the final DATABASE_URL."""
    os.environ["DB_CHECK_ON_START"] = "false"
    os.environ["DEBUG"] = "false"
    os.environ.setdefault("ENVIRONMENT", "development")
    os.environ.setdefault("TESTING", "true")

    # TEST_DATABASE_URL may point at Postgres; default is a throwaway SQLite file
    test_url = os.getenv("TEST_DATABASE_URL")
    if not test_url:
        db_dir = tempfile.mkdtemp(prefix="post-api-tests-")
        test_url = f"sqlite+aiosqlite:///{os.path.join(db_dir, 'posts.db')}"

    os.environ["DATABASE_URL"] = test_url
    return test_url


TEST_DATABASE_URL = _setup_test_environment()


# isort: off
from app import create_app
from core.deps import get_post_service
from db.database import Base, get_db
import db.models  # noqa: F401  registers posts and hash_tags
from tests.fakes import FakePostService

# isort: on


def _create_asgi_transport(app_to_use, *, raise_app_exceptions: bool = True) -> ASGITransport:
    """Creates ASGI transport for httpx client."""
    return ASGITransport(app=app_to_use, raise_app_exceptions=raise_app_exceptions)


# --- Pytest Fixtures ---


@pytest.fixture(scope="session")
def app():
    """FastAPI application instance for tests, created by factory."""
    return create_app()


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Align anyio_backend scope with anyio plugin expectations."""
    return "asyncio"


@pytest.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine]:
    """Engine with a freshly created schema, dropped again after the test."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=test_engine, autoflush=False, expire_on_commit=False)


@pytest.fixture(scope="function")
async def db_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession]:
    """Provide a fresh AsyncSession for each test."""
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
async def override_get_db(app, session_factory: async_sessionmaker[AsyncSession]):
    """Give each request its own session bound to the test engine."""

    async def _get_db_test() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db_test
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture(scope="function")
async def client(app, override_get_db: None) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client with app lifespan management for integration tests."""
    async with LifespanManager(app):
        async with AsyncClient(
            transport=_create_asgi_transport(app),
            base_url="https://testserver.local",
            follow_redirects=True,
        ) as ac:
            yield ac


@pytest.fixture(scope="function")
def fake_service() -> FakePostService:
    return FakePostService()


@pytest.fixture(scope="function")
async def unit_client(app, fake_service: FakePostService) -> AsyncGenerator[AsyncClient]:
    """
    Lightweight HTTP client for controller tests: no lifespan, no database,
    the PostService is replaced by an in-memory fake.
    """
    app.dependency_overrides[get_post_service] = lambda: fake_service
    try:
        async with AsyncClient(
            transport=_create_asgi_transport(app),
            base_url="https://testserver.local",
            follow_redirects=True,
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_post_service, None)


@pytest.fixture(scope="function")
async def lenient_unit_client(app, fake_service: FakePostService) -> AsyncGenerator[AsyncClient]:
    """Like unit_client, but unhandled exceptions become Starlette's 500 response."""
    app.dependency_overrides[get_post_service] = lambda: fake_service
    try:
        async with AsyncClient(
            transport=_create_asgi_transport(app, raise_app_exceptions=False),
            base_url="https://testserver.local",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_post_service, None)
