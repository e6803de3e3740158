"""测试公共 Fixtures —— 内存 SQLite + 独立 AsyncClient"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from bookstore.database import Base, get_db
from bookstore.models.book import Book


# ──────────── 内存数据库引擎 ────────────

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def session_factory():
    """每个测试独立引擎：建表 → 测试 → 清表"""
    engine = create_async_engine(TEST_DB_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


# ──────────── FastAPI 测试客户端 ────────────

@pytest_asyncio.fixture
async def client(session_factory):
    from bookstore.main import app

    async def _override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ──────────── 预置图书 ────────────

@pytest_asyncio.fixture
async def sample_book(session_factory) -> Book:
    async with session_factory() as db:
        book = Book(
            book_id="B001",
            book_name="The Great Gatsby",
            author_name="F. Scott Fitzgerald",
        )
        db.add(book)
        await db.commit()
        await db.refresh(book)
        return book
