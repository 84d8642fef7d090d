"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.

Tables:
    - member: 회원, 최대 하나의 팀에 소속 (Member, belongs to at most one team)
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from querystudy.database import Base

if TYPE_CHECKING:
    from querystudy.models.team import Team


class Member(Base):
    """회원 모델 — 팀과 다대일 관계.

    Member model with a nullable many-to-one reference to Team.
    ``username`` may be null and a member may have no team; both are used by
    the null-ordering and outer-join scenarios.

    Attributes:
        id: 대리 키 (Surrogate key)
        username: 회원 이름, null 허용 (Member name, nullable)
        age: 나이 (Age)
        team_id: 소속 팀 FK, null 허용 (Team foreign key, nullable)

    Relationships:
        team: 소속 팀, 지연 로딩 (Owning team, lazily loaded)
    """

    __tablename__ = "member"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 팀 삭제 시 회원은 남고 팀만 해제 — Team deletion detaches members (SET NULL)
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("team.id", ondelete="SET NULL"), nullable=True
    )

    team = relationship("Team", back_populates="members")

    def __init__(self, username: str | None = None, age: int = 0, team: "Team | None" = None) -> None:
        self.username = username
        self.age = age
        if team is not None:
            self.change_team(team)

    def change_team(self, team: "Team") -> None:
        """소속 팀을 변경합니다. back_populates가 team.members 쪽도 함께 갱신합니다.

        Move the member to another team; the inverse collection is updated
        in memory by the relationship's back_populates.
        """
        self.team = team

    def __repr__(self) -> str:
        # 연관관계 필드는 출력하지 않음 — never touch ``team`` (no lazy load)
        return f"Member(id={self.id}, username={self.username!r}, age={self.age})"
