"""회원 서비스 — 회원 검색 비즈니스 로직.

Member Service — Business logic for member search and lookup.
Converts repository rows into MemberTeamDto responses and validates
search conditions before they reach the database.
"""

from typing import Any, Literal

from sqlalchemy import Row
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.models.member import Member
from querystudy.repositories.member_repository import member_repository
from querystudy.schemas.common import Page, QueryResults
from querystudy.schemas.member import MemberSearchCondition, MemberTeamDto
from querystudy.utils.exceptions import BadRequestError, NotFoundError
from querystudy.utils.pagination import to_page
from querystudy.utils.projections import project_fields


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member search business logic.
    """

    def _validate(self, condition: MemberSearchCondition) -> None:
        """나이 범위가 뒤집혀 있으면 거부합니다.

        Reject an age range whose lower bound is above its upper bound.

        Raises:
            BadRequestError: age_goe > age_loe 일 때
        """
        if (
            condition.age_goe is not None
            and condition.age_loe is not None
            and condition.age_goe > condition.age_loe
        ):
            raise BadRequestError("age_goe must not be greater than age_loe")

    def _to_response(self, rows: list[Row[Any]]) -> list[MemberTeamDto]:
        return project_fields(MemberTeamDto, rows)

    async def search_members(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """검색 조건으로 회원 목록을 조회합니다.

        Search members with their team.

        Raises:
            BadRequestError: 나이 범위가 잘못되었을 때 (Invalid age range)
        """
        self._validate(condition)
        rows = await member_repository.search(db, condition)
        return self._to_response(list(rows))

    async def search_members_page(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page: int,
        per_page: int,
        strategy: Literal["simple", "complex"] = "simple",
    ) -> Page:
        """검색 조건으로 회원 페이지를 조회합니다.

        Search one page of members. ``strategy`` chooses between always
        counting (simple) and counting only when needed (complex).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            per_page: 페이지당 항목 수 (Items per page)
            strategy: 카운트 전략 (Count strategy)

        Returns:
            Page: MemberTeamDto 페이지 (Page of MemberTeamDto)
        """
        self._validate(condition)
        offset: int = (page - 1) * per_page
        if strategy == "complex":
            results: QueryResults = await member_repository.search_page_complex(
                db, condition, offset, per_page
            )
        else:
            results = await member_repository.search_page_simple(
                db, condition, offset, per_page
            )
        return to_page(self._to_response(results.results), results.total, page, per_page)

    async def get_member(self, db: AsyncSession, member_id: int) -> MemberTeamDto:
        """회원 한 명을 팀 정보와 함께 조회합니다.

        Retrieve a single member with its team.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        member: Member | None = await member_repository.get_with_team(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")

        team = member.team
        return MemberTeamDto(
            member_id=member.id,
            username=member.username,
            age=member.age,
            team_id=team.id if team is not None else None,
            team_name=team.name if team is not None else None,
        )


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
