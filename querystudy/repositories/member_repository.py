"""회원 레포지토리 — 동적 검색, 페이징, 벌크 연산.

Member Repository — Dynamic search, paging, and bulk statements.

Dynamic queries are built two ways:
    - search_by_builder: 조건을 리스트에 누적한 뒤 and_()로 결합
      (accumulate optional predicates, then combine with and_())
    - search: where 파라미터 방식, None 조건은 무시
      (where-parameter style; helpers return None for absent parameters)

Bulk statements bypass the session: they run with synchronize_session=False,
so objects already loaded keep their old values until the session is cleared
(``db.expunge_all()``) or the rows are re-read with populate_existing.
"""

from typing import Any, Sequence

from sqlalchemy import ColumnElement, Row, Select, and_, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from querystudy.models.member import Member
from querystudy.models.team import Team
from querystudy.repositories.base import BaseRepository
from querystudy.schemas.common import QueryResults
from querystudy.schemas.member import MemberSearchCondition
from querystudy.utils.pagination import count_rows


# ---------------------------------------------------------------------------
# 조건 헬퍼 — 파라미터가 None이면 None 반환 (Predicate helpers; None when absent)
# ---------------------------------------------------------------------------
def has_text(value: str | None) -> bool:
    """공백이 아닌 문자열인지 확인합니다 (Whether value holds non-blank text)."""
    return value is not None and value.strip() != ""


def username_eq(username: str | None) -> ColumnElement[bool] | None:
    """회원 이름 일치 조건. 빈 문자열도 그대로 비교합니다.

    Username equality; only None means "no condition".
    """
    return Member.username == username if username is not None else None


def team_name_eq(team_name: str | None) -> ColumnElement[bool] | None:
    """팀 이름 일치 조건 (Team name equality; None means no condition)."""
    return Team.name == team_name if team_name is not None else None


def age_eq(age: int | None) -> ColumnElement[bool] | None:
    """나이 일치 조건 (Age equality)."""
    return Member.age == age if age is not None else None


def age_goe(age: int | None) -> ColumnElement[bool] | None:
    """나이 하한 조건, 이상 (Age greater than or equal)."""
    return Member.age >= age if age is not None else None


def age_loe(age: int | None) -> ColumnElement[bool] | None:
    """나이 상한 조건, 이하 (Age less than or equal)."""
    return Member.age <= age if age is not None else None


def combine(*conditions: ColumnElement[bool] | None) -> ColumnElement[bool] | None:
    """None이 아닌 조건만 AND로 결합합니다.

    AND together the non-None conditions; None if none are left.
    Composed helpers such as ``age_between`` are built on this.
    """
    present = [c for c in conditions if c is not None]
    if not present:
        return None
    return and_(*present)


def age_between(goe: int | None, loe: int | None) -> ColumnElement[bool] | None:
    """goe 이상 loe 이하, 한쪽만 있어도 됨 (Age range; either bound may be None)."""
    return combine(age_goe(goe), age_loe(loe))


def search_conditions(condition: MemberSearchCondition) -> list[ColumnElement[bool]]:
    """검색 조건에서 where 절에 넣을 조건 목록을 만듭니다.

    Where-parameter list for a search condition. 검색 화면의 빈 문자열은
    조건 없음으로 취급합니다 (blank text fields count as absent).
    """
    candidates = (
        username_eq(condition.username if has_text(condition.username) else None),
        team_name_eq(condition.team_name if has_text(condition.team_name) else None),
        age_between(condition.age_goe, condition.age_loe),
    )
    return [c for c in candidates if c is not None]


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the member table.
    """

    def __init__(self) -> None:
        super().__init__(Member)

    async def get_with_team(self, db: AsyncSession, member_id: int) -> Member | None:
        """회원을 팀과 함께 한 번의 조인으로 조회합니다 (fetch join).

        Retrieve a member with its team populated by the same joined query.
        """
        result = await db.execute(
            select(Member).options(joinedload(Member.team)).where(Member.id == member_id)
        )
        return result.scalar_one_or_none()

    async def find_all(self, db: AsyncSession) -> list[Member]:
        """전체 회원을 id 순으로 조회합니다 (All members ordered by id)."""
        result = await db.execute(select(Member).order_by(Member.id))
        return list(result.scalars().all())

    async def find_by_username(self, db: AsyncSession, username: str) -> list[Member]:
        """이름이 일치하는 회원 목록 (Members with the given username)."""
        result = await db.execute(
            select(Member).where(Member.username == username).order_by(Member.id)
        )
        return list(result.scalars().all())

    async def search_by_builder(
        self,
        db: AsyncSession,
        username: str | None,
        age: int | None,
    ) -> list[Member]:
        """조건을 누적하는 방식으로 회원을 검색합니다.

        Search members by accumulating optional predicates into one AND.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 회원 이름, None이면 조건 없음 (Username or None)
            age: 나이, None이면 조건 없음 (Age or None)

        Returns:
            list[Member]: 조건에 맞는 회원 목록 (Matching members)
        """
        builder: list[ColumnElement[bool]] = []
        if username is not None:
            builder.append(Member.username == username)
        if age is not None:
            builder.append(Member.age == age)

        query: Select = select(Member).order_by(Member.id)
        if builder:
            query = query.where(and_(*builder))
        result = await db.execute(query)
        return list(result.scalars().all())

    async def search_by_params(
        self,
        db: AsyncSession,
        username: str | None,
        age: int | None,
    ) -> list[Member]:
        """where 파라미터 방식으로 회원을 검색합니다.

        Search members with where-parameter predicates; a None predicate
        contributes nothing.
        """
        conditions = [c for c in (username_eq(username), age_eq(age)) if c is not None]
        result = await db.execute(select(Member).where(*conditions).order_by(Member.id))
        return list(result.scalars().all())

    def _search_query(self, condition: MemberSearchCondition) -> Select:
        """회원+팀 검색 쿼리를 구성합니다. 팀이 없는 회원도 포함 (left outer join).

        Member-with-team search query; members without a team are kept.
        """
        return (
            select(
                Member.id.label("member_id"),
                Member.username.label("username"),
                Member.age.label("age"),
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Member.team)
            .where(*search_conditions(condition))
            .order_by(Member.id)
        )

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> Sequence[Row[Any]]:
        """검색 조건으로 회원+팀 정보를 조회합니다.

        Search members with their team by a search condition.

        Returns:
            Sequence[Row]: (member_id, username, age, team_id, team_name) 행 목록
        """
        result = await db.execute(self._search_query(condition))
        return result.all()

    async def search_page_simple(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        offset: int,
        limit: int,
    ) -> QueryResults:
        """내용 쿼리와 카운트 쿼리를 항상 함께 실행하는 페이징 검색.

        Paged search that always runs both the content and the count query.
        """
        query: Select = self._search_query(condition)
        result = await db.execute(query.offset(offset).limit(limit))
        content = list(result.all())
        total: int = await count_rows(db, query)
        return QueryResults(results=content, total=total, offset=offset, limit=limit)

    async def search_page_complex(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        offset: int,
        limit: int,
    ) -> QueryResults:
        """전체 건수를 알 수 있으면 카운트 쿼리를 생략하는 페이징 검색.

        Paged search that skips the count query when the total follows from
        the content: a first page shorter than the limit, or a non-empty
        last page shorter than the limit.
        """
        query: Select = self._search_query(condition)
        result = await db.execute(query.offset(offset).limit(limit))
        content = list(result.all())

        if offset == 0 and len(content) < limit:
            total: int = len(content)
        elif 0 < len(content) < limit:
            total = offset + len(content)
        else:
            total = await count_rows(db, query)
        return QueryResults(results=content, total=total, offset=offset, limit=limit)

    async def bulk_rename_younger_than(self, db: AsyncSession, age: int, username: str) -> int:
        """나이가 age 미만인 회원의 이름을 일괄 변경합니다.

        Bulk-rename members younger than ``age``. Returns the affected row count.
        """
        stmt = (
            update(Member)
            .where(Member.age < age)
            .values(username=username)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount

    async def bulk_age_plus(self, db: AsyncSession, delta: int) -> int:
        """모든 회원의 나이에 delta를 더합니다 (음수 가능).

        Add ``delta`` to every member's age. Returns the affected row count.
        """
        stmt = (
            update(Member)
            .values(age=Member.age + delta)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount

    async def bulk_age_multiply(self, db: AsyncSession, factor: int) -> int:
        """모든 회원의 나이에 factor를 곱합니다.

        Multiply every member's age by ``factor``. Returns the affected row count.
        """
        stmt = (
            update(Member)
            .values(age=Member.age * factor)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount

    async def bulk_delete_older_than(self, db: AsyncSession, age: int) -> int:
        """나이가 age 초과인 회원을 일괄 삭제합니다.

        Bulk-delete members older than ``age``. Returns the affected row count.
        """
        stmt = (
            delete(Member)
            .where(Member.age > age)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
