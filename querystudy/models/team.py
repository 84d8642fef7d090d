"""팀 SQLAlchemy ORM 모델 정의.

Team SQLAlchemy ORM model definition.

Tables:
    - team: 회원이 소속되는 팀 (Team that members belong to)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from querystudy.database import Base


class Team(Base):
    """팀 모델 — 회원 목록을 역방향으로 참조.

    Team model. ``members`` is the inverse side of ``Member.team``;
    the foreign key lives on the member table, so this collection is
    read-only from the database's point of view.

    Attributes:
        id: 대리 키 (Surrogate key)
        name: 팀 이름 (Team name)

    Relationships:
        members: 소속 회원 목록 (Members of this team, back-reference only)
    """

    __tablename__ = "team"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    members = relationship("Member", back_populates="team")

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name!r})"
