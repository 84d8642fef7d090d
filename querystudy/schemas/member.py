"""회원 관련 Pydantic DTO 스키마 정의.

Member-related Pydantic DTO schema definitions.
These are the projection targets of member queries: rows are mapped into
them either by column label or by column position
(see ``querystudy.utils.projections``).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class MemberDto(BaseModel):
    """회원 이름/나이 DTO — 엔티티와 필드명이 같음.

    Member username/age DTO whose field names match the entity attributes.

    Attributes:
        username: 회원 이름 (Member username)
        age: 나이 (Age)
    """

    model_config = ConfigDict(from_attributes=True)

    username: str | None = None
    age: int | None = None

    @classmethod
    def query_projection(cls, member: Any) -> list[Any]:
        """이 DTO에 맞게 라벨링된 컬럼 목록을 반환합니다.

        Return the labelled columns this DTO is built from, bound to the given
        Member entity or alias. Selecting these and feeding the rows to
        ``project_fields`` keeps the column list and the DTO defined in one place.

        Usage:
            rows = await db.execute(select(*MemberDto.query_projection(Member)))
        """
        return [member.username.label("username"), member.age.label("age")]


class UserDto(BaseModel):
    """사용자 DTO — 엔티티와 필드명이 다름 (username 대신 name).

    User DTO whose ``name`` field does not match ``Member.username``.
    A label-based projection fills it only when the column is labelled ``name``;
    otherwise it stays ``None``.

    Attributes:
        name: 이름 (Name)
        age: 나이 (Age)
    """

    name: str | None = None
    age: int | None = None


class MemberSearchCondition(BaseModel):
    """회원 검색 조건 — 모든 항목 선택적.

    Member search condition. Every field is optional; empty fields add no
    predicate to the query.

    Attributes:
        username: 회원 이름 일치 (Exact username)
        team_name: 팀 이름 일치 (Exact team name)
        age_goe: 나이 하한, 이상 (Minimum age, inclusive)
        age_loe: 나이 상한, 이하 (Maximum age, inclusive)
    """

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None


class MemberTeamDto(BaseModel):
    """회원+팀 조회 결과 DTO.

    Member joined with its (optional) team.
    """

    member_id: int
    username: str | None = None
    age: int
    team_id: int | None = None  # 팀이 없는 회원은 None (None for members without a team)
    team_name: str | None = None
