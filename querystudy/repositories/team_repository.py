"""팀 레포지토리 — 팀 조회 및 팀 단위 집계 쿼리.

Team Repository — Team lookups and per-team aggregation queries.
"""

from typing import Any, Sequence

from sqlalchemy import Row, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.models.member import Member
from querystudy.models.team import Team
from querystudy.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """팀 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the team table.
    """

    def __init__(self) -> None:
        super().__init__(Team)

    async def find_by_name(self, db: AsyncSession, name: str) -> Team | None:
        """이름으로 팀을 조회합니다.

        Retrieve a team by its exact name.
        """
        result = await db.execute(select(Team).where(Team.name == name))
        return result.scalar_one_or_none()

    async def average_age_by_team(self, db: AsyncSession) -> Sequence[Row[Any]]:
        """팀별 회원 수와 평균 나이를 조회합니다.

        Per-team member count and average age, ordered by team name.
        The outer join keeps teams without members (count 0, avg NULL).

        Returns:
            Sequence[Row]: (team_name, member_count, avg_age) 행 목록
        """
        query: Select = (
            select(
                Team.name.label("team_name"),
                func.count(Member.id).label("member_count"),
                func.avg(Member.age).label("avg_age"),
            )
            .select_from(Team)
            .outerjoin(Team.members)
            .group_by(Team.id, Team.name)
            .order_by(Team.name)
        )
        result = await db.execute(query)
        return result.all()


# 싱글턴 인스턴스 — Singleton instance
team_repository: TeamRepository = TeamRepository()
