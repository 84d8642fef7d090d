"""테스트 인프라 — 테스트 DB 엔진, 세션, httpx 클라이언트, 샘플 데이터 픽스처.

Test infrastructure — Test database engine, session, httpx client, and
fixture data. The database URL comes from TEST_DATABASE_URL and defaults to
in-memory SQLite (aiosqlite). Schema is created for every test and dropped
afterwards, and the session is rolled back, so each test runs in isolation.
"""

import os
from collections.abc import AsyncGenerator
from types import SimpleNamespace

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from querystudy.database import Base, get_db
from querystudy.main import app
from querystudy.models import Member, Team  # noqa: F401 — register models with metadata

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def _engine_kwargs(url: str) -> dict:
    # 인메모리 SQLite는 연결 하나를 공유해야 스키마가 유지됨
    # In-memory SQLite keeps its schema only on a single shared connection
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {"pool_pre_ping": True}


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 생성하고 종료 시 삭제합니다."""
    eng = create_async_engine(TEST_DATABASE_URL, echo=False, **_engine_kwargs(TEST_DATABASE_URL))

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다. 테스트 종료 시 롤백."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def sample_data(db: AsyncSession) -> SimpleNamespace:
    """teamA(member1, member2), teamB(member3, member4) 를 생성합니다.

    Ages are 10, 20, 30, 40. Rows are flushed, not committed.
    """
    team_a = Team("teamA")
    team_b = Team("teamB")
    db.add_all([team_a, team_b])

    members = [
        Member("member1", 10, team_a),
        Member("member2", 20, team_a),
        Member("member3", 30, team_b),
        Member("member4", 40, team_b),
    ]
    db.add_all(members)
    await db.flush()
    return SimpleNamespace(team_a=team_a, team_b=team_b, members=members)
