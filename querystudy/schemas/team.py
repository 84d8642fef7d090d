"""팀 관련 Pydantic DTO 스키마 정의.

Team-related Pydantic DTO schema definitions.
"""

from pydantic import BaseModel


class TeamAgeDto(BaseModel):
    """팀별 회원 수와 평균 나이.

    Per-team member count and average age. ``avg_age`` is None for a team
    without members.
    """

    team_name: str
    member_count: int
    avg_age: float | None = None
