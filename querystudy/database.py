"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class.
PostgreSQL (asyncpg) is the default target; any async SQLAlchemy URL works.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from querystudy.config import settings


def engine_options(database_url: str) -> dict[str, Any]:
    """드라이버별 엔진 옵션을 구성합니다.

    Build driver-specific engine keyword arguments.
    Pool sizing and the asyncpg statement cache only apply to PostgreSQL;
    SQLite (aiosqlite) uses SQLAlchemy's default pool.
    """
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if make_url(database_url).get_backend_name() == "postgresql":
        options.update(
            pool_size=5,
            max_overflow=10,
            # 트랜잭션 모드 풀러에서 prepared statement 비활성화
            # Disable prepared statement caches for transaction-mode pooling
            connect_args={"statement_cache_size": 0},
        )
    return options


# 비동기 데이터베이스 엔진 — Async database engine
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    **engine_options(settings.DATABASE_URL),
)

# 비동기 세션 팩토리 — Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
