"""팀 라우터 — 팀 통계 엔드포인트.

Team router — Team statistics endpoint.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.database import get_db
from querystudy.schemas.team import TeamAgeDto
from querystudy.services.team_service import team_service

router: APIRouter = APIRouter()


@router.get("/stats", response_model=list[TeamAgeDto])
async def team_stats(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TeamAgeDto]:
    """팀별 회원 수와 평균 나이를 조회합니다.

    Per-team member count and average age.
    """
    return await team_service.team_age_stats(db)
