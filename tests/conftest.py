"""
Test infrastructure for the blog API.

Strategy
--------
- SQLite in-memory via aiosqlite replaces Postgres, so the suite needs no
  running database.
- StaticPool makes every session share the one in-memory connection;
  a second connection would see an empty database.
- The app's ``get_db`` dependency is overridden with the test session
  factory.
- Tables are created before and dropped after each test.
- Redis is disabled by setting ``cache._redis = None``; the CacheManager
  treats that as a permanent miss, so every request reaches the database.
"""
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from blogsite.cache import cache
from blogsite.database import Base, get_db
from blogsite.main import app
from blogsite.models import Post, PostCategory

# ---------------------------------------------------------------------------
# Test database engine: SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _add_post(
    db: AsyncSession,
    title: str = "A post",
    *,
    category: PostCategory = PostCategory.ENGINEERING,
    draft: bool = False,
    broadcast: bool = False,
    content: str = "First paragraph.\n\nSecond paragraph.",
    age_days: int = 0,
) -> Post:
    """Insert a post created *age_days* before ``BASE_TIME`` and commit it."""
    created = BASE_TIME - timedelta(days=age_days)
    post = Post(
        title=title,
        author="Test Author",
        category=category,
        draft=draft,
        broadcast=broadcast,
        raw_content=content,
        created_at=created,
        published_at=None if draft else created,
    )
    db.add(post)
    await db.commit()
    return post


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def add_post():
    """The post-inserting helper, for tests that seed rows directly."""
    return _add_post


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """
    Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport,
    with the Redis cache disabled.
    """
    cache._redis = None
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
