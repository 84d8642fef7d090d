"""팀 서비스 — 팀 통계 조회.

Team Service — Team statistics lookup.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.repositories.team_repository import team_repository
from querystudy.schemas.team import TeamAgeDto
from querystudy.utils.projections import project_fields


class TeamService:
    """팀 관련 비즈니스 로직을 처리하는 서비스."""

    async def team_age_stats(self, db: AsyncSession) -> list[TeamAgeDto]:
        """팀별 회원 수와 평균 나이를 조회합니다.

        Per-team member count and average age, ordered by team name.
        """
        rows = await team_repository.average_age_by_team(db)
        return project_fields(TeamAgeDto, rows)


# 싱글턴 인스턴스 — Singleton instance
team_service: TeamService = TeamService()
