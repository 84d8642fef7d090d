"""샘플 데이터 시드 스크립트 — 팀 2개, 회원 100명 생성.

Seed script — Creates tables and loads the sample data used for manually
trying the search API.

Usage:
    python -m querystudy.seed

Creates:
    - 2개 팀: teamA, teamB (2 teams)
    - 100명 회원: member0 ~ member99, 나이 = 번호, 짝수는 teamA / 홀수는 teamB
      (100 members, age = index, even indexes in teamA, odd in teamB)
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.database import async_session, engine, Base
from querystudy.models import Member, Team

SAMPLE_MEMBER_COUNT = 100


async def init_members(db: AsyncSession) -> bool:
    """세션에 샘플 팀과 회원을 추가합니다.

    Add the sample teams and members to the session and flush.
    Idempotent: 팀이 하나라도 있으면 건너뜁니다 (Skips when any team exists).

    Returns:
        bool: 데이터를 새로 만들었는지 여부 (Whether data was created)
    """
    result = await db.execute(select(Team).limit(1))
    if result.scalar_one_or_none() is not None:
        return False

    team_a = Team("teamA")
    team_b = Team("teamB")
    db.add_all([team_a, team_b])

    for i in range(SAMPLE_MEMBER_COUNT):
        selected_team = team_a if i % 2 == 0 else team_b
        db.add(Member(f"member{i}", i, selected_team))

    await db.flush()
    return True


async def seed() -> None:
    """데이터베이스를 샘플 데이터로 시드합니다.

    Create tables if they don't exist, then insert the sample data.
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        created: bool = await init_members(db)
        if not created:
            print("Already seeded. Skipping.")
            return
        await db.commit()
        print(f"Seeded: 2 teams, {SAMPLE_MEMBER_COUNT} members")


if __name__ == "__main__":
    asyncio.run(seed())
